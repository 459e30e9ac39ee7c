"""Centralized application configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the repository root: .env, .env.local, .env.dev/.env.test/.env.prod
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `RECURVIZ_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    base_delay_ms : int
        Pacing delay applied at each commit at speed 1x; maps from
        `RECURVIZ_BASE_DELAY_MS`. The effective delay is divided by the speed.
    memory_slots : int
        Capacity of the simulated stack memory; maps from `RECURVIZ_MEMORY_SLOTS`.
    default_speed : float
        Speed multiplier a fresh playback controller starts with; maps from
        `RECURVIZ_DEFAULT_SPEED`.
    """

    environment: EnvName = Field(default="dev", alias="RECURVIZ_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    base_delay_ms: int = Field(default=500, ge=0, alias="RECURVIZ_BASE_DELAY_MS")
    memory_slots: int = Field(default=64, ge=1, alias="RECURVIZ_MEMORY_SLOTS")
    default_speed: float = Field(
        default=1.0, gt=0, allow_inf_nan=False, alias="RECURVIZ_DEFAULT_SPEED"
    )

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    We keep this behind an LRU cache so tests can force a rebuild via
    `load_settings.cache_clear()` after mutating `os.environ`.
    """
    os.environ.setdefault("RECURVIZ_ENV", "dev")
    return Settings()


# Export a ready-to-use singleton (import-time read of env / .env files).
settings: Settings = load_settings()


def get_logger(name: str = "recurviz") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
