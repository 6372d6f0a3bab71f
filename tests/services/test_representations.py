# tests/services/test_representations.py
from apollo.database import models
from apollo.services.representations import user_to_v1, topic_to_v1

def _user(user_id, username):
    user = models.User(username, f"{username}@apollo.io")
    user.id = user_id
    return user

class TestUserRepresentation:
    def test_member_topics_exposed_as_topics_and_rest_hidden(self):
        """멤버 주제만 'topics'로 노출되고, 소유 주제/역할/권한은 제외되는지 테스트합니다."""
        # === Arrange ===
        user = _user(1, "Juno")
        other = _user(2, "leader")
        user.add_role(models.Role(name="admin"))
        models.Topic(id=10, name="Owned", owner=user)
        joined = models.Topic(id=20, name="Joined", owner=other)
        models.TopicUsers(topic=joined, user=user)

        # === Act ===
        payload = user_to_v1(user)

        # === Assert ===
        assert payload == {
            "id": 1,
            "username": "juno",
            "primaryemail": "juno@apollo.io",
            "topics": [{"topicid": 20, "name": "Joined"}],
        }

    def test_user_without_memberships(self):
        assert user_to_v1(_user(3, "solo"))["topics"] == []

class TestTopicRepresentation:
    def test_topic_does_not_expand_owner_collections(self):
        owner = _user(1, "leader")
        member = _user(2, "member")
        topic = models.Topic(id=7, name="Rockets", owner=owner)
        models.TopicUsers(topic=topic, user=member)

        assert topic_to_v1(topic) == {
            "topicid": 7,
            "name": "Rockets",
            "owner": {"id": 1, "username": "leader"},
            "members": [{"id": 2, "username": "member"}],
        }
