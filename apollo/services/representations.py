"""
엔티티를 외부(API) 표현으로 변환하는 함수들입니다.

엔티티 자체는 직렬화 방식을 알지 못하며, 노출할 필드는 전적으로 이 모듈이 결정합니다.
사용자 표현에는 역할(roles), 소유한 주제(owned_topics), 권한 토큰이 포함되지 않습니다.
주제 멤버십은 "topics" 키로 노출되며, 역참조를 따라 다시 확장하지 않습니다.
"""
from typing import Any, Dict

from apollo.database import models

REPRESENTATION_VERSION = "v1"


def topic_membership_to_v1(membership: models.TopicUsers) -> Dict[str, Any]:
    return {"topicid": membership.topic.id, "name": membership.topic.name}


def user_to_v1(user: models.User) -> Dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "primaryemail": user.primary_email,
        "topics": [topic_membership_to_v1(m) for m in user.member_topics],
    }


def topic_to_v1(topic: models.Topic) -> Dict[str, Any]:
    return {
        "topicid": topic.id,
        "name": topic.name,
        "owner": {"id": topic.owner.id, "username": topic.owner.username},
        "members": [{"id": m.user.id, "username": m.user.username} for m in topic.users],
    }
