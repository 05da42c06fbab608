from typing import Any, List
from sqlalchemy.orm import Session
from object_roles.database import models
from object_roles.repositories.interfaces import IUserRoleRepository

class SqlalchemyUserRoleRepository(IUserRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def add(self, user: models.User, role: models.Role):
        association = models.UserRole(user_id=user.id, role_id=role.id)
        self.db.merge(association) # INSERT OR IGNORE와 유사한 동작
        self.db.commit()

    def remove(self, user: models.User, role: models.Role) -> bool:
        association = self._find(user, role)
        if association:
            self.db.delete(association)
            self.db.commit()
            return True
        return False

    def exists(self, user: models.User, role: models.Role) -> bool:
        return self._find(user, role) is not None

    def list_roles(self, user: models.User) -> List[models.Role]:
        return (
            self.db.query(models.Role)
            .join(models.UserRole, models.UserRole.role_id == models.Role.id)
            .filter(models.UserRole.user_id == user.id)
            .order_by(models.Role.id.asc())
            .all()
        )

    def remove_all(self, user: models.User) -> int:
        associations = self.db.query(models.UserRole).filter(models.UserRole.user_id == user.id).all()
        for association in associations:
            self.db.delete(association)
        self.db.commit()
        return len(associations)

    def list_users_for_authorizable(self, authorizable_type: str, authorizable_id: Any) -> List[models.User]:
        return (
            self.db.query(models.User)
            .join(models.UserRole, models.UserRole.user_id == models.User.id)
            .join(models.Role, models.Role.id == models.UserRole.role_id)
            .filter(
                models.Role.authorizable_type == authorizable_type,
                models.Role.authorizable_id == authorizable_id,
            )
            .distinct()
            .order_by(models.User.id.asc())
            .all()
        )

    def list_authorizable_ids(self, user: models.User, authorizable_type: str) -> List[Any]:
        rows = (
            self.db.query(models.Role.authorizable_id)
            .join(models.UserRole, models.UserRole.role_id == models.Role.id)
            .filter(
                models.UserRole.user_id == user.id,
                models.Role.authorizable_type == authorizable_type,
                models.Role.authorizable_id.isnot(None),
            )
            .distinct()
            .all()
        )
        return [row[0] for row in rows]

    def _find(self, user: models.User, role: models.Role):
        return self.db.query(models.UserRole).filter(
            models.UserRole.user_id == user.id,
            models.UserRole.role_id == role.id
        ).first()
