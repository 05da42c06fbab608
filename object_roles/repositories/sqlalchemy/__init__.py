from .sqlalchemy_user_repository import SqlalchemyUserRepository
from .sqlalchemy_role_repository import SqlalchemyRoleRepository
from .sqlalchemy_user_role_repository import SqlalchemyUserRoleRepository
from .sqlalchemy_authorizable_repository import SqlalchemyAuthorizableRepository
