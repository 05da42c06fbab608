from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base

class User(Base):
    """
    역할(Role)을 보유하는 사용자를 나타냅니다.
    사용자는 roles_users 연관 테이블을 통해 여러 역할과 다대다(many-to-many)로 연결되며,
    사용자가 삭제되면 연결된 모든 연관 행도 함께 삭제됩니다.
    """
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)

    role_associations = relationship("UserRole", back_populates="user", cascade="all, delete-orphan")
