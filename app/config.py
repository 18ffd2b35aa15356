"""User Registry — Configuration via pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_PATH: str = "./data/database.sqlite"
    DATABASE_URL: str = ""  # overrides DATABASE_PATH when set

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # CORS
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",  # Docker frontend
        "http://localhost:5173",  # Vite dev server
        "http://localhost",
        "http://localhost:80",
    ]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{Path(self.DATABASE_PATH).as_posix()}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
