from .user import IUserRepository
from .role import IRoleRepository
from .topic import ITopicRepository
