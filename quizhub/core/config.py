from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"

    PROJECT_NAME: str = "QuizHub Backend"
    DATABASE_URL: str = "sqlite:///./quizhub.db"
    PORT: int = 5000

    # Frontend origins allowed by CORS
    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    # Create tables on startup instead of running `alembic upgrade head`
    AUTO_CREATE_TABLES: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
