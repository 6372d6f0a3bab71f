from abc import ABC, abstractmethod
from typing import List, Optional
from apollo.database import models

class ITopicRepository(ABC):
    @abstractmethod
    def create(self, topic_model: models.Topic) -> models.Topic:
        """새로운 주제를 생성합니다."""
        pass

    @abstractmethod
    def find_by_id(self, topic_id: int) -> Optional[models.Topic]:
        """고유 ID로 특정 주제를 조회합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.Topic]:
        """모든 주제의 목록을 조회합니다."""
        pass

    @abstractmethod
    def delete(self, topic: models.Topic) -> bool:
        """주제와 그 주제의 모든 멤버십을 삭제합니다."""
        pass

    @abstractmethod
    def find_membership(self, topic: models.Topic, user: models.User) -> Optional[models.TopicUsers]:
        """사용자의 주제 멤버십을 조회합니다."""
        pass

    @abstractmethod
    def add_member(self, topic: models.Topic, user: models.User) -> models.TopicUsers:
        """사용자를 주제의 일반 멤버로 추가합니다."""
        pass

    @abstractmethod
    def remove_member(self, membership: models.TopicUsers):
        """주제 멤버십을 삭제합니다."""
        pass
