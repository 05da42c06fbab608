# object_roles/wiring.py
from dataclasses import dataclass

from sqlalchemy.orm import Session

from object_roles.repositories.sqlalchemy import (
    SqlalchemyRoleRepository, SqlalchemyUserRoleRepository, SqlalchemyAuthorizableRepository
)
from object_roles.services.authorizable_service import AuthorizableService
from object_roles.services.capabilities import AuthorizableRoles, RoleRegistry, UserRoles
from object_roles.services.role_service import RoleService


@dataclass
class RoleServices:
    """하나의 DB 세션에 묶인 역할 서비스 묶음."""
    roles: RoleService
    authorizables: AuthorizableService

    def holder(self, user) -> UserRoles:
        return UserRoles(self.roles, user)

    def registry(self) -> RoleRegistry:
        return RoleRegistry(self.roles)

    def authorizable(self, obj) -> AuthorizableRoles:
        return AuthorizableRoles(self.authorizables, obj)


def build_role_services(db_session: Session) -> RoleServices:
    """요청(트랜잭션) 단위의 세션으로 리포지토리와 서비스를 생성하여 연결합니다."""
    # 1. 의존성 생성 (Repositories -> Services)
    role_repo = SqlalchemyRoleRepository(db_session)
    user_role_repo = SqlalchemyUserRoleRepository(db_session)
    authorizable_repo = SqlalchemyAuthorizableRepository(db_session)

    role_service = RoleService(role_repo, user_role_repo, authorizable_repo)
    authorizable_service = AuthorizableService(role_service, user_role_repo, authorizable_repo)
    return RoleServices(roles=role_service, authorizables=authorizable_service)
