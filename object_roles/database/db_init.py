import logging

from object_roles.config import configure_logging
from .database import engine as default_engine, Base
from . import models  # noqa: F401 - Base.metadata에 모든 테이블을 등록

logger = logging.getLogger(__name__)


def initialize_db(engine=None):
    """
    역할 관련 테이블(users, roles, roles_users)을 생성합니다.
    이미 존재하는 테이블은 건드리지 않으므로 여러 번 호출해도 안전합니다.
    """
    engine = engine or default_engine
    logger.info("DB 초기화 중 (%s)...", engine.url)

    Base.metadata.create_all(bind=engine)
    logger.info("테이블 생성 완료: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == '__main__':
    configure_logging()
    initialize_db()
