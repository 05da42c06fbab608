from abc import ABC, abstractmethod
from typing import Optional
from object_roles.database import models

class IRoleRepository(ABC):
    @abstractmethod
    def find_by_scope(self, name: str, authorizable_type: Optional[str], authorizable_id: Optional[int]) -> Optional[models.Role]:
        """
        (name, authorizable_type, authorizable_id) 식별 키와 정확히 일치하는 역할을 조회합니다.
        None으로 전달된 값은 IS NULL 조건으로 비교합니다.
        """
        pass

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """범위와 관계없이 해당 이름의 역할이 하나라도 존재하는지 확인합니다."""
        pass

    @abstractmethod
    def create(self, role_model: models.Role) -> models.Role:
        """
        새로운 역할을 데이터베이스에 생성합니다.

        Raises:
            RoleAlreadyExistsError: 저장소의 유일성 제약에 의해 삽입이 거부되었을 때.
        """
        pass

    @abstractmethod
    def delete(self, role: models.Role) -> bool:
        """역할과 그 역할의 모든 연관 행을 데이터베이스에서 삭제합니다."""
        pass

    @abstractmethod
    def count_users(self, role: models.Role) -> int:
        """역할을 보유한 사용자 수를 조회합니다."""
        pass
