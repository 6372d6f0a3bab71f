from typing import List, Optional
from sqlalchemy.orm import Session
from apollo.database import models
from apollo.repositories.interfaces import ITopicRepository

class SqlalchemyTopicRepository(ITopicRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, topic_model: models.Topic) -> models.Topic:
        self.db.add(topic_model)
        self.db.commit()
        self.db.refresh(topic_model)
        return topic_model

    def find_by_id(self, topic_id: int) -> Optional[models.Topic]:
        return self.db.query(models.Topic).filter(models.Topic.id == topic_id).first()

    def list_all(self) -> List[models.Topic]:
        return self.db.query(models.Topic).order_by(models.Topic.id.asc()).all()

    def delete(self, topic: models.Topic) -> bool:
        if topic:
            for membership in list(topic.users):
                self.db.delete(membership)
            self.db.delete(topic)
            self.db.commit()
            return True
        return False

    def find_membership(self, topic: models.Topic, user: models.User) -> Optional[models.TopicUsers]:
        return self.db.query(models.TopicUsers).filter(
            models.TopicUsers.topic_id == topic.id,
            models.TopicUsers.user_id == user.id
        ).first()

    def add_member(self, topic: models.Topic, user: models.User) -> models.TopicUsers:
        membership = models.TopicUsers(topic=topic, user=user)
        self.db.add(membership)
        self.db.commit()
        self.db.refresh(membership)
        return membership

    def remove_member(self, membership: models.TopicUsers):
        self.db.delete(membership)
        self.db.commit()
