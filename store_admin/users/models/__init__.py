from .role import Role
from .user import User, roles_users
