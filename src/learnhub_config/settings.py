"""LearnHub settings.

Values are taken from, highest priority first:

1. the process environment
2. the file named by ``LEARNHUB_ENV_FILE`` (absolute or project-relative)
3. ``config/.env.dev``, else ``config/.env``
4. the defaults below
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "LEARNHUB_ENV_FILE"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _project_root() -> Path:
    here = Path(__file__).resolve()
    for candidate in here.parents:
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    # Installed without a checkout: fall back to the working directory
    return Path.cwd()


def get_config_dir() -> Path:
    """Directory holding the ``.env`` files."""
    return _project_root() / "config"


def _env_file() -> Optional[Path]:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        path = path if path.is_absolute() else _project_root() / path
        if path.is_file():
            return path

    for name in (".env.dev", ".env"):
        path = get_config_dir() / name
        if path.is_file():
            return path
    return None


class Settings(BaseSettings):
    """Runtime configuration. Field names map to upper-case env variables."""

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "LearnHub"
    debug: bool = False

    database_type: Literal["postgresql", "sqlite"] = Field(
        "postgresql",
        description="Backend selected for database_url",
    )
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("postgres")
    postgres_db: str = "learnhub"
    sqlite_path: str = Field(
        "data/learnhub.db",
        description="Database file, used when database_type is sqlite",
    )

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = Field(False, description="Expose /docs and /openapi.json")
    api_cors_origins: str = Field(
        "",
        description="Comma separated allowed origins; empty disables CORS",
    )

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origin_list(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(str(v) for v in value)
        return str(value) if value else ""

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return level

    @computed_field(repr=False)  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL (aiosqlite or asyncpg driver)."""
        if self.database_type == "sqlite":
            return f"sqlite+aiosqlite:///{self.sqlite_path}"
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
