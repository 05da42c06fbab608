# object_roles/config.py
"""환경 변수(.env 포함)에서 읽어오는 애플리케이션 설정."""
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """OBJECT_ROLES_ 접두사가 붙은 환경 변수로 덮어쓸 수 있는 설정 값."""

    model_config = SettingsConfigDict(
        env_prefix="OBJECT_ROLES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # 데이터베이스
    database_url: str = "sqlite:///object_roles.db"
    sql_echo: bool = False

    # 로깅
    log_level: str = "INFO"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()


def configure_logging(config: Settings = settings) -> None:
    """루트 로거의 포맷과 레벨을 설정합니다."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
