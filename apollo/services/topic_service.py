from typing import Dict, Any, List

from apollo.database import models
from apollo.repositories.interfaces import ITopicRepository, IUserRepository
from apollo.services.exceptions import (
    TopicNotFoundError, UserNotFoundError, TopicMembershipError
)
from apollo.services.representations import topic_to_v1
from apollo.services.schemas import TopicCreateRequest, parse

class TopicService:
    """주제 생성과 멤버십(소유와 구분되는 일반 참여) 관리를 제공합니다."""

    def __init__(self, topic_repo: ITopicRepository, user_repo: IUserRepository):
        self.topic_repo = topic_repo
        self.user_repo = user_repo

    def _get_user_or_raise(self, user_id: int) -> models.User:
        user = self.user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(f"User with id '{user_id}' not found.")
        return user

    def _get_topic_or_raise(self, topic_id: int) -> models.Topic:
        topic = self.topic_repo.find_by_id(topic_id)
        if not topic:
            raise TopicNotFoundError(f"Topic with id '{topic_id}' not found.")
        return topic

    def create_topic(self, owner_id: int, name: str) -> Dict[str, Any]:
        """
        사용자가 소유하는 새 주제를 생성합니다.

        Raises:
            ValueError: 주제 이름이 비어 있거나 너무 길 때.
            UserNotFoundError: 소유자로 지정한 사용자를 찾을 수 없을 때.
        """
        request = parse(TopicCreateRequest, name=name)
        owner = self._get_user_or_raise(owner_id)
        created_topic = self.topic_repo.create(models.Topic(name=request.name, owner=owner))
        return topic_to_v1(created_topic)

    def list_topics(self) -> List[Dict[str, Any]]:
        return [topic_to_v1(t) for t in self.topic_repo.list_all()]

    def delete_topic(self, topic_id: int) -> bool:
        """
        주제와 그 멤버십을 삭제합니다.

        Raises:
            TopicNotFoundError: 해당 ID의 주제를 찾을 수 없을 때.
        """
        self.topic_repo.delete(self._get_topic_or_raise(topic_id))
        return True

    def join_topic(self, user_id: int, topic_id: int) -> Dict[str, Any]:
        """
        사용자를 주제의 일반 멤버로 추가합니다.
        소유자는 멤버십과 구분되므로 자신의 주제에 멤버로 참여할 수 없습니다.

        Raises:
            UserNotFoundError, TopicNotFoundError: 대상이 존재하지 않을 때.
            TopicMembershipError: 소유자이거나 이미 멤버일 때.
        """
        user = self._get_user_or_raise(user_id)
        topic = self._get_topic_or_raise(topic_id)

        if topic.owner_id == user.id:
            raise TopicMembershipError(f"User '{user.username}' owns topic '{topic.name}' and cannot join it as a member.")
        if self.topic_repo.find_membership(topic, user):
            raise TopicMembershipError(f"User '{user.username}' is already a member of topic '{topic.name}'.")

        self.topic_repo.add_member(topic, user)
        return topic_to_v1(topic)

    def leave_topic(self, user_id: int, topic_id: int) -> bool:
        """
        사용자의 주제 멤버십을 해제합니다.

        Raises:
            TopicMembershipError: 사용자가 해당 주제의 멤버가 아닐 때.
        """
        user = self._get_user_or_raise(user_id)
        topic = self._get_topic_or_raise(topic_id)

        membership = self.topic_repo.find_membership(topic, user)
        if not membership:
            raise TopicMembershipError(f"User '{user.username}' is not a member of topic '{topic.name}'.")
        self.topic_repo.remove_member(membership)
        return True
