from abc import ABC, abstractmethod
from typing import List, Optional
from apollo.database import models

class IUserRepository(ABC):
    @abstractmethod
    def create(self, user_model: models.User) -> models.User:
        """새로운 사용자를 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[models.User]:
        """고유 ID로 특정 사용자를 조회합니다."""
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[models.User]:
        """사용자 이름으로 특정 사용자를 조회합니다. 대소문자를 구분하지 않습니다."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[models.User]:
        """대표 이메일로 특정 사용자를 조회합니다. 대소문자를 구분하지 않습니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.User]:
        """모든 사용자의 목록을 조회합니다."""
        pass

    @abstractmethod
    def update(self, user: models.User) -> models.User:
        """변경된 사용자 정보를 저장합니다."""
        pass

    @abstractmethod
    def delete(self, user: models.User) -> bool:
        """
        특정 사용자를 데이터베이스에서 삭제합니다.
        사용자의 역할 연관, 주제 멤버십, 소유한 주제(와 그 멤버십)도 함께 삭제합니다.
        """
        pass
