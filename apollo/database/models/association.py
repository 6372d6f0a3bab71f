from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base
from .auditable import Auditable

class UserRoles(Base, Auditable):
    """
    사용자(User)와 역할(Role)을 연결하는 연관 엔티티입니다.
    같은 역할을 두 번 부여할 수 있도록 (user_id, role_id) 대신 별도의 id를 기본 키로 사용합니다.
    """
    __tablename__ = 'userroles'
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    role_id = Column(Integer, ForeignKey('roles.id'), nullable=False)

    user = relationship("User", back_populates="roles")
    role = relationship("Role")


class TopicUsers(Base, Auditable):
    """
    사용자가 어떤 주제(Topic)의 멤버인지를 나타내는 연관 엔티티입니다.
    소유(owner)와는 별개의 일반 멤버십만 표현합니다.
    """
    __tablename__ = 'topicusers'
    id = Column(Integer, primary_key=True)
    topic_id = Column(Integer, ForeignKey('topics.id'), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)

    topic = relationship("Topic", back_populates="users")
    user = relationship("User", back_populates="member_topics")
