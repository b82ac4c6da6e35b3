"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the FastAPI backend.

    Instances are frozen: the app factory receives one at startup and nothing
    mutates it afterwards.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, frozen=True)

    DATABASE_URL: Optional[str] = Field(default=None)

    LOGIN_DB_HOST: str = Field(default="localhost")
    LOGIN_DB_PORT: int = Field(default=3306)
    LOGIN_DB_NAME: str = Field(default="login_db")
    LOGIN_DB_USER: str = Field(default="root")
    LOGIN_DB_PASSWORD: str = Field(default="")
    LOGIN_DB_CHARSET: str = Field(default="utf8mb4")

    CORS_ALLOWED_ORIGINS: List[str] = Field(default=["https://sample-login-plum.vercel.app"])

    LOG_LEVEL: str = Field(default="INFO")

    def sqlalchemy_url(self) -> str:
        """Build a SQLAlchemy URL, preferring an explicit DATABASE_URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.LOGIN_DB_USER}:{self.LOGIN_DB_PASSWORD}"
            f"@{self.LOGIN_DB_HOST}:{self.LOGIN_DB_PORT}/{self.LOGIN_DB_NAME}"
            f"?charset={self.LOGIN_DB_CHARSET}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()
