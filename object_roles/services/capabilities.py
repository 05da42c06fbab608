# object_roles/services/capabilities.py
from abc import ABC, abstractmethod
from typing import Any, List

from object_roles.database import models
from object_roles.services.authorizable_service import AuthorizableService
from object_roles.services.role_service import RoleService


class RoleHolder(ABC):
    """역할을 보유할 수 있는 주체의 공통 인터페이스."""

    @abstractmethod
    def has_role(self, role_name: str, target=None) -> bool:
        pass

    @abstractmethod
    def add_role(self, role_name: str, target=None) -> models.Role:
        pass

    @abstractmethod
    def remove_role(self, role_name: str, target=None):
        pass


class UserRoles(RoleHolder):
    """특정 사용자에 바인딩된 RoleHolder."""

    def __init__(self, role_service: RoleService, user: models.User):
        self.role_service = role_service
        self.user = user

    def has_role(self, role_name: str, target=None) -> bool:
        return self.role_service.has_role(self.user, role_name, target)

    def add_role(self, role_name: str, target=None) -> models.Role:
        return self.role_service.add_role(self.user, role_name, target)

    def remove_role(self, role_name: str, target=None) -> bool:
        return self.role_service.remove_role(self.user, role_name, target)

    def has_roles_for(self, target=None) -> bool:
        return self.role_service.has_roles_for(self.user, target)

    has_role_for = has_roles_for

    def roles_for(self, target=None) -> List[models.Role]:
        return self.role_service.roles_for(self.user, target)

    def remove_roles_for(self, target=None) -> List[models.Role]:
        return self.role_service.remove_roles_for(self.user, target)

    def remove_all_roles(self) -> List[models.Role]:
        return self.role_service.remove_all_roles(self.user)

    def authorizables_for(self, model_class) -> List[Any]:
        return self.role_service.authorizables_for(self.user, model_class)


class RoleRegistry(RoleHolder):
    """
    사용자 대신 역할 테이블 자체를 보유자로 다루는 RoleHolder.
    역할을 미리 등록하거나 전체에서 제거할 때 사용하며, 사용자 연결은 만들지 않습니다.
    """

    def __init__(self, role_service: RoleService):
        self.role_service = role_service

    def has_role(self, role_name: str, target=None) -> bool:
        return self.role_service.role_registered(role_name, target)

    def add_role(self, role_name: str, target=None) -> models.Role:
        return self.role_service.register_role(role_name, target)

    def remove_role(self, role_name: str, target=None):
        return self.role_service.unregister_role(role_name, target)


class Authorizable(ABC):
    """역할의 대상이 될 수 있는 객체의 공통 인터페이스."""

    @abstractmethod
    def accepts_role(self, role_name: str, user: models.User) -> bool:
        pass

    @abstractmethod
    def grant_role(self, role_name: str, user: models.User) -> models.Role:
        pass

    @abstractmethod
    def revoke_role(self, role_name: str, user: models.User):
        pass

    @abstractmethod
    def accepts_roles_by(self, user: models.User) -> bool:
        pass

    @abstractmethod
    def accepted_roles_by(self, user: models.User) -> List[models.Role]:
        pass


class AuthorizableRoles(Authorizable):
    """특정 도메인 객체에 바인딩된 Authorizable."""

    def __init__(self, authorizable_service: AuthorizableService, authorizable):
        self.authorizable_service = authorizable_service
        self.authorizable = authorizable

    def accepts_role(self, role_name: str, user: models.User) -> bool:
        return self.authorizable_service.accepts_role(self.authorizable, role_name, user)

    def grant_role(self, role_name: str, user: models.User) -> models.Role:
        return self.authorizable_service.grant_role(self.authorizable, role_name, user)

    def revoke_role(self, role_name: str, user: models.User) -> bool:
        return self.authorizable_service.revoke_role(self.authorizable, role_name, user)

    def accepts_roles_by(self, user: models.User) -> bool:
        return self.authorizable_service.accepts_roles_by(self.authorizable, user)

    accepts_role_by = accepts_roles_by

    def accepted_roles_by(self, user: models.User) -> List[models.Role]:
        return self.authorizable_service.accepted_roles_by(self.authorizable, user)

    def authorizables_by(self, user: models.User) -> List[Any]:
        return self.authorizable_service.authorizables_by(self.authorizable, user)

    def users(self) -> List[models.User]:
        return self.authorizable_service.users_for(self.authorizable)

    def destroy(self) -> bool:
        return self.authorizable_service.destroy(self.authorizable)
