import logging
from typing import Any, List, Optional

from object_roles.database import models
from object_roles.repositories.interfaces import (
    IRoleRepository, IUserRoleRepository, IAuthorizableRepository
)
from object_roles.services.exceptions import InvalidArgumentError
from object_roles.services.role_resolver import RoleResolver
from object_roles.services.scope import Scope

logger = logging.getLogger(__name__)


class RoleService:
    """사용자와 역할 사이의 연결(부여, 회수, 조회)을 관리하는 서비스를 제공합니다."""

    def __init__(self, role_repo: IRoleRepository, user_role_repo: IUserRoleRepository, authorizable_repo: IAuthorizableRepository):
        """
        RoleService를 초기화합니다.

        Args:
            role_repo: 역할 데이터에 접근하기 위한 리포지토리.
            user_role_repo: 사용자-역할 연결에 접근하기 위한 리포지토리.
            authorizable_repo: 역할의 대상이 되는 도메인 객체를 조회하기 위한 리포지토리.
        """
        self.role_repo = role_repo
        self.user_role_repo = user_role_repo
        self.authorizable_repo = authorizable_repo
        self.resolver = RoleResolver(role_repo)

    # --- 사용자 단위 조회 ---

    def has_role(self, user: models.User, role_name: str, target=None) -> bool:
        """
        사용자가 역할을 보유하고 있는지 확인합니다.

        대상 없이 호출하면 사용자가 어떤 역할이든 하나라도 보유하고 있거나,
        해당 이름의 전역 역할이 저장소에 존재하기만 해도 True를 반환합니다.
        특정 이름의 역할 보유 여부를 엄격하게 확인하려면 Scope.none()을 넘기세요.

        Args:
            user: 확인할 사용자.
            role_name: 역할 이름.
            target: None, 클래스, 도메인 객체 또는 Scope.
        """
        if target is None:
            if self.user_role_repo.list_roles(user):
                return True
            return self.resolver.resolve(role_name) is not None

        role = self.resolver.resolve(role_name, target)
        return self.user_role_repo.exists(user, role) if role else False

    def has_roles_for(self, user: models.User, target=None) -> bool:
        """사용자가 대상 범위에 속하는 역할을 하나라도 보유하고 있는지 확인합니다."""
        scope = Scope.of(target)
        return any(scope.matches(role) for role in self.user_role_repo.list_roles(user))

    has_role_for = has_roles_for

    def roles_for(self, user: models.User, target=None) -> List[models.Role]:
        """사용자가 보유한 역할 중 대상 범위에 속하는 역할만 반환합니다."""
        scope = Scope.of(target)
        return [role for role in self.user_role_repo.list_roles(user) if scope.matches(role)]

    def authorizables_for(self, user: models.User, model_class) -> List[Any]:
        """
        사용자가 역할을 하나라도 보유한 model_class 타입의 객체들을 조회합니다.

        Returns:
            중복 없는 도메인 객체 리스트. 이미 삭제된 객체는 건너뛰며, 하나도 없으면 빈 리스트.

        Raises:
            InvalidArgumentError: model_class가 클래스가 아닐 때.
        """
        if not isinstance(model_class, type):
            raise InvalidArgumentError(f"Invalid argument: '{model_class}'. You must provide a class here.")

        ids = self.user_role_repo.list_authorizable_ids(user, models.base_type_name(model_class))
        if not ids:
            return []
        return self.authorizable_repo.find_by_ids(model_class, ids)

    # --- 사용자 단위 변경 ---

    def add_role(self, user: models.User, role_name: str, target=None) -> models.Role:
        """
        사용자에게 역할을 부여합니다. 역할이 없으면 먼저 생성하며, 이미 보유한 경우 연결을 추가하지 않습니다.

        Returns:
            부여된 Role.
        """
        role = self.resolver.resolve_or_create(role_name, target)
        if not self.user_role_repo.exists(user, role):
            self.user_role_repo.add(user, role)
        return role

    def remove_role(self, user: models.User, role_name: str, target=None) -> bool:
        """
        사용자의 역할을 회수합니다. 더 이상 아무도 보유하지 않는 역할은 삭제됩니다.

        Returns:
            역할이 존재하여 회수를 시도했으면 True, 역할 자체가 없으면 False.
        """
        role = self.resolver.resolve(role_name, target)
        if not role:
            return False
        self.user_role_repo.remove(user, role)
        self._delete_role_if_orphaned(role)
        return True

    def remove_roles_for(self, user: models.User, target=None) -> List[models.Role]:
        """대상 범위에 속하는 사용자의 모든 역할을 회수하고, 회수된 역할 목록을 반환합니다."""
        old_roles = self.roles_for(user, target)
        for role in old_roles:
            self.user_role_repo.remove(user, role)
        for role in old_roles:
            self._delete_role_if_orphaned(role)
        return old_roles

    def remove_all_roles(self, user: models.User) -> List[models.Role]:
        """사용자의 모든 역할을 회수하고, 회수된 역할 목록을 반환합니다."""
        old_roles = self.user_role_repo.list_roles(user)
        self.user_role_repo.remove_all(user)
        for role in old_roles:
            self._delete_role_if_orphaned(role)
        return old_roles

    # --- 클래스 단위 (역할 템플릿 등록) ---

    def role_registered(self, role_name: str, target=None) -> bool:
        """
        역할 테이블 전체를 기준으로 역할이 존재하는지 확인합니다.
        대상 없이 호출하면 범위와 관계없이 같은 이름의 역할이 하나라도 있으면 True입니다.
        """
        if target is None:
            return self.role_repo.exists_by_name(role_name)
        return self.resolver.resolve(role_name, target) is not None

    def register_role(self, role_name: str, target=None) -> models.Role:
        """사용자에게 연결하지 않고 역할만 생성(또는 조회)합니다."""
        return self.resolver.resolve_or_create(role_name, target)

    def unregister_role(self, role_name: str, target=None) -> Optional[models.Role]:
        """역할을 보유자와 관계없이 역할 테이블에서 삭제합니다. 삭제된 역할이 없으면 None을 반환합니다."""
        role = self.resolver.resolve(role_name, target)
        if role:
            self.role_repo.delete(role)
            logger.info("Unregistered role '%s' (%s)", role_name, Scope.of(target))
        return role

    def _delete_role_if_orphaned(self, role: models.Role) -> bool:
        """역할을 보유한 사용자가 한 명도 남지 않았으면 역할을 삭제합니다."""
        if self.role_repo.count_users(role) == 0:
            role_name = role.name
            self.role_repo.delete(role)
            logger.info("Deleted orphaned role '%s'", role_name)
            return True
        return False
