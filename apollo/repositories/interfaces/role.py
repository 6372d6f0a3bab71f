from abc import ABC, abstractmethod
from typing import List, Optional
from apollo.database import models

class IRoleRepository(ABC):
    @abstractmethod
    def create(self, role_model: models.Role) -> models.Role:
        """새로운 역할을 생성합니다."""
        pass

    @abstractmethod
    def find_by_id(self, role_id: int) -> Optional[models.Role]:
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[models.Role]:
        """이름으로 특정 역할을 조회합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.Role]:
        pass

    @abstractmethod
    def add_role_to_user(self, user: models.User, role: models.Role) -> models.UserRoles:
        """사용자에게 역할을 부여합니다. 이미 같은 역할이 있어도 새 연관을 추가합니다."""
        pass
