"""Library settings using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from emitkit.core.exceptions import ConfigurationError


def resolve_log_level(name: object) -> int:
    """Return the numeric level for a level name such as ``"debug"``."""
    level = logging.getLevelName(str(name).strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            "Cannot resolve log level",
            details={"log_level": name},
        )
    return level


class Settings(BaseSettings):
    """Settings loaded from ``EMITKIT_*`` environment variables.

    Only logging is configurable; emitter semantics are fixed.
    """

    model_config = SettingsConfigDict(
        env_prefix="EMITKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_json: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> str:
        try:
            resolve_log_level(v)
        except ConfigurationError as e:
            raise ValueError(f"unknown log level: {v!r}") from e
        return str(v).strip().upper()

    @property
    def log_level_number(self) -> int:
        return resolve_log_level(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
