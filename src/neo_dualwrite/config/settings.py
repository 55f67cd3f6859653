"""
Configuration for dual-write tuple collection.

Settings are loaded from DUALWRITE_* environment variables or a .env file.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import MANAGED_ROLE_PREFIX


class DualWriteSettings(BaseSettings):
    """Settings for the legacy store and the authorization engine client."""

    model_config = SettingsConfigDict(
        env_prefix="DUALWRITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Legacy store
    database_url: str = Field(default="")
    sql_dialect: str = Field(default="postgres")
    db_pool_min_size: int = Field(default=1, ge=0)
    db_pool_max_size: int = Field(default=10, ge=1)
    db_command_timeout: float = Field(default=60.0, gt=0)

    # Authorization engine
    authz_url: str = Field(default="http://localhost:8080")
    authz_namespace: str = Field(default="default")
    authz_token: Optional[str] = Field(default=None)
    authz_timeout_seconds: float = Field(default=10.0, gt=0)
    authz_page_size: int = Field(default=100, ge=1)
    authz_max_pages: int = Field(default=1000, ge=1)

    managed_role_prefix: str = Field(default=MANAGED_ROLE_PREFIX)

    @field_validator("authz_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("sql_dialect")
    @classmethod
    def normalize_dialect(cls, value: str) -> str:
        return value.strip().lower()


@lru_cache()
def get_settings() -> DualWriteSettings:
    """Get cached settings instance."""
    return DualWriteSettings()
