"""Runtime settings read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, field_validator

LOG_LEVEL_VAR = "MINICURL_LOG_LEVEL"


class Settings(BaseModel):
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if env.get(LOG_LEVEL_VAR):
            values["log_level"] = env[LOG_LEVEL_VAR]
        return cls(**values)
