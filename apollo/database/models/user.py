from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship, validates
from ..database import Base
from .auditable import Auditable
from .association import UserRoles
from apollo.security.authorities import roles_to_capabilities

USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 30

_UNSET = object()

class User(Base, Auditable):
    """
    시스템의 계정 하나를 나타냅니다.
    사용자는 여러 역할(Role)을 가질 수 있고, 주제(Topic)를 소유하거나 멤버로 참여할 수 있습니다.
    username과 primary_email은 항상 소문자로 저장되며, 전체 사용자 사이에서 유일합니다.
    """
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(USERNAME_MAX_LENGTH), unique=True, nullable=False, index=True)
    primary_email = Column("primaryemail", String, unique=True, nullable=False, index=True)

    roles = relationship("UserRoles", back_populates="user", order_by="UserRoles.id")
    owned_topics = relationship("Topic", back_populates="owner")
    member_topics = relationship("TopicUsers", back_populates="user")

    def __init__(self, username=_UNSET, primary_email=_UNSET, **kwargs):
        # id는 첫 flush 시점에 DB가 할당합니다.
        # 생략된 필드만 미설정으로 두고, 명시적인 None은 @validates에서 거부됩니다.
        if username is not _UNSET:
            kwargs["username"] = username
        if primary_email is not _UNSET:
            kwargs["primary_email"] = primary_email
        super().__init__(**kwargs)

    @validates("username", "primary_email")
    def _normalize_lowercase(self, key, value):
        if value is None:
            raise ValueError(f"{key} must not be None")
        return value.lower()

    def add_role(self, role) -> UserRoles:
        """역할을 하나 추가합니다. 같은 역할이라도 중복 제거 없이 새 연관 레코드를 만듭니다."""
        association = UserRoles(role=role)
        self.roles.append(association)
        return association

    def get_authority(self):
        return roles_to_capabilities(self.roles)

    def __repr__(self):
        return f"User(username={self.username!r})"
