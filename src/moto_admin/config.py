"""
Runtime configuration, read from MOTO_ADMIN_* environment variables or a .env file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from moto_admin.errors import ConfigError

DEFAULT_BASE_URL = "http://localhost:3000/api"
DEFAULT_STORAGE_PATH = Path.home() / ".moto-admin" / "session.json"


class Settings(BaseSettings):
    api_base_url: str = DEFAULT_BASE_URL
    storage_path: Path = DEFAULT_STORAGE_PATH
    request_timeout: float = Field(default=30.0, gt=0)

    # Terminal columns below which tables collapse into cards.
    compact_width: int = Field(default=80, gt=0)
    # Terminal columns below which hide_on_tablet columns are dropped.
    medium_width: int = Field(default=120, gt=0)
    page_size: int = Field(default=20, gt=0)

    log_level: str = "WARNING"
    log_json: bool = False
    storage_poll_interval: float = Field(default=1.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="MOTO_ADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("api_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("storage_path", mode="after")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise ConfigError(f"Invalid MOTO_ADMIN_* settings: {problems}") from e
