from .user import User
from .role import Role
from .association import UserRole
from .authorizable import AuthorizableMixin, base_type_name, remove_accepted_roles

__all__ = [
    "User",
    "Role",
    "UserRole",
    "AuthorizableMixin",
    "base_type_name",
    "remove_accepted_roles",
]
