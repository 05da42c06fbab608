from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from object_roles.database import models
from object_roles.repositories.interfaces import IRoleRepository
from object_roles.services.exceptions import RoleAlreadyExistsError

class SqlalchemyRoleRepository(IRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_scope(self, name: str, authorizable_type: Optional[str], authorizable_id: Optional[int]) -> Optional[models.Role]:
        query = self.db.query(models.Role).filter(models.Role.name == name)
        if authorizable_type is None:
            query = query.filter(models.Role.authorizable_type.is_(None))
        else:
            query = query.filter(models.Role.authorizable_type == authorizable_type)
        if authorizable_id is None:
            query = query.filter(models.Role.authorizable_id.is_(None))
        else:
            query = query.filter(models.Role.authorizable_id == authorizable_id)
        return query.order_by(models.Role.id.asc()).first()

    def exists_by_name(self, name: str) -> bool:
        return self.db.query(models.Role.id).filter(models.Role.name == name).first() is not None

    def create(self, role_model: models.Role) -> models.Role:
        self.db.add(role_model)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise RoleAlreadyExistsError(
                f"Role '{role_model.name}' already exists for "
                f"({role_model.authorizable_type}, {role_model.authorizable_id})."
            ) from e
        self.db.refresh(role_model)
        return role_model

    def delete(self, role: models.Role) -> bool:
        if role:
            self.db.delete(role)
            self.db.commit()
            return True
        return False

    def count_users(self, role: models.Role) -> int:
        return self.db.query(models.UserRole).filter(models.UserRole.role_id == role.id).count()
