from __future__ import annotations

"""backend/diagkit/config/settings.py

Library configuration using environment-driven settings.

This module centralizes:
- the environment tier reported with telemetry events
- the default path convention used by the path redactor
- the Statsig server secret (telemetry stays disabled without it)

Every variable is read with the DIAGKIT_ prefix, e.g.
DIAGKIT_PATH_CONVENTION=windows.
"""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
  environment: str = "development"

  # Path redaction: "auto" follows the host OS
  path_convention: Literal["auto", "posix", "windows"] = "auto"

  # Telemetry
  statsig_server_secret: str | None = None

  model_config = SettingsConfigDict(
      env_prefix="DIAGKIT_",
      env_file=".env",
      env_file_encoding="utf-8",
      extra="ignore",
  )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Return a cached Settings instance."""
  return Settings()
