from .user import User
from .role import Role
from .topic import Topic
from .association import UserRoles, TopicUsers

__all__ = ["User", "Role", "Topic", "UserRoles", "TopicUsers"]
