from __future__ import annotations

"""backend/faultcatalog/config/settings.py

Application configuration using environment-driven settings.

This module centralizes:
- logging level for the CLI
- accepted range for set_priority
- default timeout for the external-resource connect scenario

Every default reproduces the documented catalog behavior, so nothing
has to be configured to run it. Values can be overridden with
FAULTCATALOG_* environment variables or a local .env file.
"""
from functools import lru_cache

from pydantic import ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from faultcatalog.errors import ConfigurationError
from faultcatalog.logging_config import LOG_LEVELS


class Settings(BaseSettings):
  app_name: str = "faultcatalog"
  environment: str = "development"

  # Logging
  log_level: str = "WARNING"

  # set_priority bounds (inclusive)
  priority_min: int = 1
  priority_max: int = 10

  # connect_to_external_resource
  connect_timeout_seconds: float = 5.0

  model_config = SettingsConfigDict(
    env_prefix="FAULTCATALOG_",
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
  )

  @field_validator("log_level")
  @classmethod
  def _normalize_log_level(cls, value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
      raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
    return level

  @model_validator(mode="after")
  def _check_priority_bounds(self) -> "Settings":
    if self.priority_min > self.priority_max:
      raise ValueError(
        f"priority_min ({self.priority_min}) must not exceed "
        f"priority_max ({self.priority_max})"
      )
    return self


def load_settings() -> Settings:
    """Build Settings, converting validation failures into ConfigurationError."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration: {exc}",
            hint="Check FAULTCATALOG_* environment variables and .env",
        ) from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return load_settings()
