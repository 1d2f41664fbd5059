"""Environment-driven settings for UPILens."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

from upilens.core.exceptions import ConfigError

# backend/upilens/core/config.py -> backend -> project root
ENV_PATH = Path(__file__).resolve().parents[3] / ".env"

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from an environment mapping.

        Args:
            env: Variables to read from (defaults to ``os.environ``)

        Raises:
            ConfigError: If LOG_LEVEL is not a standard logging level name
        """
        env = os.environ if env is None else env
        level = str(env.get("LOG_LEVEL", "INFO")).strip().upper() or "INFO"
        if level not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid LOG_LEVEL: {level}",
                details={"allowed": sorted(LOG_LEVELS)},
            )
        return cls(log_level=level)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(ENV_PATH)
    return Settings.from_env()
