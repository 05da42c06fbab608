from typing import Any, List, Sequence, Type
from sqlalchemy.orm import Session
from object_roles.repositories.interfaces import IAuthorizableRepository

class SqlalchemyAuthorizableRepository(IAuthorizableRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_ids(self, model_class: Type[Any], ids: Sequence[Any]) -> List[Any]:
        if not ids:
            return []
        return (
            self.db.query(model_class)
            .filter(model_class.id.in_(list(ids)))
            .order_by(model_class.id.asc())
            .all()
        )

    def delete(self, authorizable: Any) -> bool:
        # 객체에 한정된 역할은 before_flush 훅(remove_accepted_roles)이 같은 flush에서 삭제합니다.
        if authorizable:
            self.db.delete(authorizable)
            self.db.commit()
            return True
        return False
