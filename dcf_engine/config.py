"""
Engine Configuration.

Pydantic Settings model for the valuation engine.  All configuration is
loaded from ``DCF_ENGINE_``-prefixed environment variables and an optional
``.env`` file.  Inject an EngineConfig instance via dependency injection
where needed.

Numerical constants (IRR bracket, tolerance, iteration cap, day count)
are part of the engine's contract and deliberately not configurable.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineConfig(BaseSettings):
    """Central configuration loaded from environment variables and defaults."""

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # empty: console logging only
    LOG_MAX_BYTES: int = 5_242_880  # 5 MB
    LOG_BACKUP_COUNT: int = 3

    # --- Input handling ---
    # Reject empty schedules before they reach the engine.  Off by default:
    # the engine itself treats an empty schedule as NPV 0 with no IRR.
    STRICT_INPUT_VALIDATION: bool = False

    model_config = SettingsConfigDict(
        env_prefix="DCF_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        """Normalise the level name and reject names ``logging`` does not know."""
        name: str = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {value!r}")
        return name

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)


# ---------------------------------------------------------------------------
# Module-level singleton factory
# ---------------------------------------------------------------------------

_config_instance: Optional[EngineConfig] = None
_config_lock: threading.Lock = threading.Lock()


def get_config() -> EngineConfig:
    """Return a cached ``EngineConfig`` singleton.

    On first call, creates an ``EngineConfig`` instance (reading from the
    environment and ``.env``).  Subsequent calls return the same instance.
    Uses a check-lock-check pattern so concurrent first calls from a host
    build a single instance.

    Prefer direct constructor injection of ``EngineConfig``; this factory
    serves hosts that do not manage configuration themselves.
    """
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = EngineConfig()
    return _config_instance


def reset_config() -> None:
    """Drop the cached singleton so the next ``get_config()`` re-reads the environment."""
    global _config_instance
    with _config_lock:
        _config_instance = None
