# ednc/core/config.py
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SECRET_KEY: str = "your-super-secret-jwt-key-change-in-prod"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440  # 24 hours

    DATABASE_URL: str = "sqlite:///./ednc_edu.db"
    CREATE_TABLES_ON_STARTUP: bool = True

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://127.0.0.1",
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    RATE_LIMIT: str = "100/15minutes"
    RATE_LIMIT_ENABLED: bool = True

    LOG_LEVEL: str = "INFO"

    # True restores the old behaviour: only the literal owner may edit a course,
    # even though admins may list and delete it.
    OWNER_ONLY_COURSE_UPDATE: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
