from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Type

class IAuthorizableRepository(ABC):
    @abstractmethod
    def find_by_ids(self, model_class: Type[Any], ids: Sequence[Any]) -> List[Any]:
        """
        주어진 ID에 해당하는 도메인 객체를 조회합니다.
        존재하지 않는 ID는 조용히 건너뜁니다.
        """
        pass

    @abstractmethod
    def delete(self, authorizable: Any) -> bool:
        """도메인 객체를 삭제합니다. 객체에 한정된 역할도 함께 삭제됩니다."""
        pass
