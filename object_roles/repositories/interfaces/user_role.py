from abc import ABC, abstractmethod
from typing import Any, List
from object_roles.database import models

class IUserRoleRepository(ABC):
    @abstractmethod
    def add(self, user: models.User, role: models.Role):
        """사용자에게 역할을 연결합니다. 이미 연결되어 있으면 무시합니다."""
        pass

    @abstractmethod
    def remove(self, user: models.User, role: models.Role) -> bool:
        """사용자와 역할의 연결을 끊습니다. 연결이 없었다면 False를 반환합니다."""
        pass

    @abstractmethod
    def exists(self, user: models.User, role: models.Role) -> bool:
        """사용자가 해당 역할에 연결되어 있는지 확인합니다."""
        pass

    @abstractmethod
    def list_roles(self, user: models.User) -> List[models.Role]:
        """사용자가 보유한 모든 역할을 조회합니다."""
        pass

    @abstractmethod
    def remove_all(self, user: models.User) -> int:
        """사용자의 모든 역할 연결을 끊고, 끊어진 연결의 개수를 반환합니다."""
        pass

    @abstractmethod
    def list_users_for_authorizable(self, authorizable_type: str, authorizable_id: Any) -> List[models.User]:
        """특정 객체에 한정된 역할을 하나라도 보유한 사용자를 중복 없이 조회합니다."""
        pass

    @abstractmethod
    def list_authorizable_ids(self, user: models.User, authorizable_type: str) -> List[Any]:
        """
        사용자가 보유한 역할이 가리키는 객체 ID 목록을 중복 없이 조회합니다.

        Args:
            user: 역할을 보유한 사용자.
            authorizable_type: 최상위(base) 타입 이름.

        Returns:
            authorizable_id 값의 리스트. 클래스 범위 역할(ID가 NULL)은 제외됩니다.
        """
        pass
