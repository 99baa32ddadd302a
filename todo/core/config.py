# todo/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRET_KEY = "dev-secret-change-me"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = Field("Todo", alias="APP_NAME")
    app_env: Literal["dev", "prod", "test"] = Field("dev", alias="ENV")

    # flash messages live in the signed session cookie
    secret_key: str = Field(DEFAULT_SECRET_KEY, alias="SECRET_KEY")
    session_cookie: str = Field("todo_session", alias="SESSION_COOKIE")

    run_migrations: bool = Field(True, alias="RUN_MIGRATIONS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(8000, alias="PORT")

    @field_validator("app_env", mode="before")
    @classmethod
    def _normalize_env(cls, v):
        # same normalisation as todo.db.session._get_env
        return v.strip().lower() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
