# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from object_roles.database import models
from object_roles.database.database import Base
from object_roles.repositories.sqlalchemy import SqlalchemyUserRepository
from object_roles.wiring import RoleServices, build_role_services
from tests import fakes  # noqa: F401 - posts, comments 테이블을 Base.metadata에 등록


@pytest.fixture
def engine():
    """테스트마다 새로 만들어지는 인메모리 SQLite 엔진."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def services(db_session) -> RoleServices:
    return build_role_services(db_session)


@pytest.fixture
def make_user(db_session):
    """이름만으로 사용자를 생성해 주는 팩토리."""
    user_repo = SqlalchemyUserRepository(db_session)

    def _make_user(username: str) -> models.User:
        return user_repo.create(models.User(username=username))

    return _make_user


@pytest.fixture
def make_post(db_session):
    def _make_post(post_id: int = None, title: str = "", model_class=fakes.Post):
        post = model_class(id=post_id, title=title)
        db_session.add(post)
        db_session.commit()
        return post

    return _make_post
