from .user import IUserRepository
from .role import IRoleRepository
from .user_role import IUserRoleRepository
from .authorizable import IAuthorizableRepository
