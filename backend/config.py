# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, List
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./boxpoint.db"

    # Every router is mounted under this prefix, image download URLs included
    API_PREFIX: str = "/api/v1"

    APP_TITLE: str = "Boxpoint API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # passlib schemes, first one is used for new hashes
    PASSWORD_SCHEMES: List[str] = ["pbkdf2_sha256"]

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
