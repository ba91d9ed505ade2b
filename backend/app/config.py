"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./newsroom_cms.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:5174"]
    LOG_LEVEL: str = "INFO"

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # Versioning
    # 동시 편집으로 버전 번호가 충돌하면 이 횟수만큼 재할당을 시도한다.
    VERSION_ALLOCATION_RETRIES: int = 3

    # Listing
    DEFAULT_LIST_LIMIT: int = 50
    LATEST_LIST_LIMIT: int = 10

    # 실행 cwd와 무관하게 backend/.env를 로드한다.
    model_config = SettingsConfigDict(env_file=str(Path(__file__).resolve().parents[1] / ".env"))


settings = Settings()
