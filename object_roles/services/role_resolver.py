import logging
from typing import Optional

from object_roles.database import models
from object_roles.repositories.interfaces import IRoleRepository
from object_roles.services.exceptions import RoleAlreadyExistsError
from object_roles.services.scope import Scope

logger = logging.getLogger(__name__)


class RoleResolver:
    """역할 이름과 범위를 유일한 Role 레코드로 해석합니다."""

    def __init__(self, role_repo: IRoleRepository):
        self.role_repo = role_repo

    def resolve(self, role_name: str, target=None) -> Optional[models.Role]:
        """
        역할 이름과 대상(None, 클래스, 객체, Scope)에 해당하는 역할을 조회합니다.

        Returns:
            일치하는 Role, 없으면 None.
        """
        scope = Scope.of(target)
        return self.role_repo.find_by_scope(role_name, scope.authorizable_type, scope.authorizable_id)

    def resolve_or_create(self, role_name: str, target=None) -> models.Role:
        """
        역할을 조회하고, 없으면 범위의 형태(전역/클래스/인스턴스)에 맞게 생성합니다.
        동시에 다른 호출자가 먼저 생성하여 삽입이 거부되면 다시 조회하여 그 역할을 반환합니다.

        Raises:
            RoleAlreadyExistsError: 삽입이 거부되었는데 재조회에서도 역할을 찾지 못했을 때.
        """
        scope = Scope.of(target)
        role = self.resolve(role_name, scope)
        if role:
            return role

        new_role = models.Role(
            name=role_name,
            authorizable_type=scope.authorizable_type,
            authorizable_id=scope.authorizable_id,
        )
        try:
            role = self.role_repo.create(new_role)
        except RoleAlreadyExistsError:
            role = self.resolve(role_name, scope)
            if role is None:
                raise
            return role

        logger.debug("Created role '%s' (%s)", role_name, scope)
        return role
