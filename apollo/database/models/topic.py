from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base
from .auditable import Auditable

class Topic(Base, Auditable):
    """
    사용자들이 함께 참여하는 주제(Topic)를 나타냅니다.
    하나의 소유자(Topic Leader)와, 소유자와 구분되는 여러 멤버를 가집니다.
    """
    __tablename__ = "topics"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    owner = relationship("User", back_populates="owned_topics")
    users = relationship("TopicUsers", back_populates="topic")

    def __repr__(self):
        return f"Topic(name={self.name!r})"
