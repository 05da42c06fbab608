from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from ..database import Base

class Role(Base):
    """
    이름이 붙은 권한 단위입니다. (예: 'admin', 'editor').
    선택적으로 특정 타입(authorizable_type) 또는 특정 객체(authorizable_type + authorizable_id)에
    범위가 한정될 수 있으며, (name, authorizable_type, authorizable_id) 세 값이 역할의 실질적인 식별 키입니다.

    - 전역 역할: authorizable_type, authorizable_id 모두 NULL
    - 클래스 범위 역할: authorizable_type만 지정, authorizable_id는 NULL
    - 인스턴스 범위 역할: 두 값 모두 지정
    """
    __tablename__ = "roles"
    # NULL은 서로 다른 값으로 취급되므로 인스턴스 범위 역할의 중복만 DB가 막아줍니다.
    __table_args__ = (
        UniqueConstraint("name", "authorizable_type", "authorizable_id", name="uq_roles_identity"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(40), nullable=False, index=True)
    authorizable_type = Column(String(40), nullable=True)
    authorizable_id = Column(Integer, nullable=True)

    user_associations = relationship("UserRole", back_populates="role", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Role {self.name!r} type={self.authorizable_type!r} id={self.authorizable_id!r}>"
