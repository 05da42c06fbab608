from typing import Any, List

from object_roles.database import models
from object_roles.repositories.interfaces import IAuthorizableRepository, IUserRoleRepository
from object_roles.services.role_service import RoleService
from object_roles.services.scope import Scope


class AuthorizableService:
    """도메인 객체를 기준으로 역할을 부여, 회수, 조회하는 서비스를 제공합니다."""

    def __init__(self, role_service: RoleService, user_role_repo: IUserRoleRepository, authorizable_repo: IAuthorizableRepository):
        self.role_service = role_service
        self.user_role_repo = user_role_repo
        self.authorizable_repo = authorizable_repo

    def accepts_role(self, authorizable, role_name: str, user: models.User) -> bool:
        """사용자가 이 객체에 대해 역할을 보유하고 있는지 확인합니다."""
        return self.role_service.has_role(user, role_name, authorizable)

    def grant_role(self, authorizable, role_name: str, user: models.User) -> models.Role:
        """사용자에게 이 객체에 대한 역할을 부여합니다."""
        return self.role_service.add_role(user, role_name, authorizable)

    def revoke_role(self, authorizable, role_name: str, user: models.User) -> bool:
        """사용자로부터 이 객체에 대한 역할을 회수합니다."""
        return self.role_service.remove_role(user, role_name, authorizable)

    def accepts_roles_by(self, authorizable, user: models.User) -> bool:
        """사용자가 이 객체에 대해 역할을 하나라도 보유하고 있는지 확인합니다."""
        return self.role_service.has_roles_for(user, authorizable)

    accepts_role_by = accepts_roles_by

    def accepted_roles_by(self, authorizable, user: models.User) -> List[models.Role]:
        """사용자가 이 객체에 대해 보유한 역할 목록을 반환합니다."""
        return self.role_service.roles_for(user, authorizable)

    def authorizables_by(self, authorizable, user: models.User) -> List[Any]:
        """사용자가 역할을 보유한, 이 객체와 같은 타입의 객체들을 조회합니다."""
        model_class = authorizable if isinstance(authorizable, type) else type(authorizable)
        return self.role_service.authorizables_for(user, model_class)

    def users_for(self, authorizable) -> List[models.User]:
        """이 객체에 한정된 역할을 하나라도 보유한 사용자를 중복 없이 조회합니다."""
        scope = Scope.for_instance(authorizable)
        return self.user_role_repo.list_users_for_authorizable(scope.authorizable_type, scope.authorizable_id)

    def destroy(self, authorizable) -> bool:
        """
        객체를 삭제합니다.
        객체에 한정된 역할과 연관 행은 다른 사용자가 보유하고 있더라도 함께 삭제됩니다.
        """
        return self.authorizable_repo.delete(authorizable)
