from typing import Dict, Any, List, Optional

from sqlalchemy.exc import IntegrityError

from apollo.database import models
from apollo.repositories.interfaces import IUserRepository, IRoleRepository
from apollo.security.authorities import roles_to_capabilities, has_authority
from apollo.services.exceptions import (
    UserCreationError, UserNotFoundError, RoleNotFoundError, AuthorizationError
)
from apollo.services.representations import user_to_v1
from apollo.services.schemas import UserCreateRequest, UserUpdateRequest, parse

class UserService:
    """사용자 계정, 역할 부여, 권한 토큰 조회 서비스를 제공합니다."""

    def __init__(self, user_repo: IUserRepository, role_repo: IRoleRepository):
        """
        UserService를 초기화합니다.

        Args:
            user_repo: 사용자 데이터에 접근하기 위한 리포지토리.
            role_repo: 역할 데이터에 접근하기 위한 리포지토리.
        """
        self.user_repo = user_repo
        self.role_repo = role_repo

    def _get_user_or_raise(self, user_id: int) -> models.User:
        user = self.user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(f"User with id '{user_id}' not found.")
        return user

    def create_user(self, username: str, primary_email: str) -> Dict[str, Any]:
        """
        새로운 사용자를 생성합니다. username과 email은 소문자로 정규화되어 저장됩니다.

        Raises:
            ValueError: username 길이(2~30자) 또는 이메일 형식이 잘못되었을 때.
            UserCreationError: 대소문자만 다른 경우를 포함해, 같은 username 또는 email이 이미 존재할 때.
        """
        request = parse(UserCreateRequest, username=username, primary_email=primary_email)

        if self.user_repo.find_by_username(request.username):
            raise UserCreationError(f"User with username '{request.username}' already exists.")
        if self.user_repo.find_by_email(request.primary_email):
            raise UserCreationError(f"User with email '{request.primary_email.lower()}' already exists.")

        new_user = models.User(request.username, request.primary_email)
        try:
            created_user = self.user_repo.create(new_user)
        except IntegrityError as e:
            # 중복 검사 이후 다른 요청이 먼저 같은 값을 저장한 경우
            raise UserCreationError("User with the same username or email already exists.") from e
        return user_to_v1(created_user)

    def list_users(self) -> List[Dict[str, Any]]:
        """모든 사용자의 목록을 조회합니다."""
        return [user_to_v1(u) for u in self.user_repo.list_all()]

    def get_user(self, user_id: int) -> Dict[str, Any]:
        """
        ID로 특정 사용자를 조회합니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
        """
        return user_to_v1(self._get_user_or_raise(user_id))

    def update_user(self, user_id: int, username: Optional[str] = None, primary_email: Optional[str] = None) -> Dict[str, Any]:
        """
        사용자 정보를 부분 수정합니다. None으로 전달된 필드는 그대로 유지됩니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
            ValueError: 입력 형식이 잘못되었을 때.
            UserCreationError: 다른 사용자가 이미 같은 username 또는 email을 사용 중일 때.
        """
        request = parse(UserUpdateRequest, username=username, primary_email=primary_email)
        user = self._get_user_or_raise(user_id)

        # 두 필드의 중복 검사를 모두 통과한 뒤에만 엔티티를 변경합니다.
        if request.username is not None:
            other = self.user_repo.find_by_username(request.username)
            if other and other.id != user.id:
                raise UserCreationError(f"User with username '{request.username}' already exists.")

        if request.primary_email is not None:
            other = self.user_repo.find_by_email(request.primary_email)
            if other and other.id != user.id:
                raise UserCreationError(f"User with email '{request.primary_email.lower()}' already exists.")

        if request.username is not None:
            user.username = request.username
        if request.primary_email is not None:
            user.primary_email = request.primary_email

        try:
            updated_user = self.user_repo.update(user)
        except IntegrityError as e:
            raise UserCreationError("User with the same username or email already exists.") from e
        return user_to_v1(updated_user)

    def delete_user(self, user_id: int) -> bool:
        """
        사용자를 삭제합니다. 역할 연관, 주제 멤버십, 소유한 주제도 함께 삭제됩니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
        """
        user = self._get_user_or_raise(user_id)
        self.user_repo.delete(user)
        return True

    def add_role(self, user_id: int, role_name: str) -> List[str]:
        """
        사용자에게 역할을 부여하고, 갱신된 권한 토큰 목록을 반환합니다.
        같은 역할을 다시 부여하면 연관 레코드가 하나 더 추가됩니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
            RoleNotFoundError: 해당 이름의 역할을 찾을 수 없을 때.
        """
        user = self._get_user_or_raise(user_id)

        role = self.role_repo.find_by_name(role_name)
        if not role: raise RoleNotFoundError(f"Role '{role_name}' not found.")

        self.role_repo.add_role_to_user(user, role)
        return roles_to_capabilities(user.roles)

    def get_authorities(self, user_id: int) -> List[str]:
        """사용자의 권한 토큰('ROLE_<NAME>') 목록을 역할 부여 순서대로 반환합니다."""
        return roles_to_capabilities(self._get_user_or_raise(user_id).roles)

    def check_authority(self, user_id: int, capability: str) -> bool:
        """
        사용자가 주어진 권한 토큰을 가지고 있는지 검증합니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
            AuthorizationError: 사용자에게 해당 권한이 없을 때.
        """
        user = self._get_user_or_raise(user_id)
        if not has_authority(user.roles, capability):
            raise AuthorizationError(f"User '{user.username}' lacks authority '{capability}'.")
        return True
