"""Environment-driven configuration for the AtomRing engine and service.

All settings are read once from the process environment and cached in an
immutable :class:`EngineConfig`. Tests that tweak the environment call
``get_config.cache_clear()`` afterwards.

Environment Variables:
    ATOMRING_PERIODIC_TABLE_PATH: CSV file overriding the bundled catalog
    ATOMRING_DEBUG_ENGINE: Enable DEBUG logging for field reactions
    ATOMRING_LOG_LEVEL: Service log level (default: INFO)
    ATOMRING_MAX_ACTIONS: Max actions per simulation request (default: 256)
    CORS_ORIGINS: Comma-separated allowed origins (default: *)
    PORT: HTTP port for ``python -m atomring.main`` (default: 8010)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from .errors import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}", variable=name
        ) from None


@dataclass(frozen=True)
class EngineConfig:
    periodic_table_path: str | None
    debug_engine: bool
    log_level: str
    max_actions: int
    cors_origins: tuple[str, ...]
    port: int


@lru_cache(maxsize=1)
def get_config() -> EngineConfig:
    max_actions = env_int("ATOMRING_MAX_ACTIONS", 256)
    if max_actions < 1:
        raise ConfigurationError(
            "ATOMRING_MAX_ACTIONS must be positive",
            variable="ATOMRING_MAX_ACTIONS",
        )
    return EngineConfig(
        periodic_table_path=os.getenv("ATOMRING_PERIODIC_TABLE_PATH") or None,
        debug_engine=env_flag("ATOMRING_DEBUG_ENGINE"),
        log_level=os.getenv("ATOMRING_LOG_LEVEL", "INFO").upper(),
        max_actions=max_actions,
        cors_origins=tuple(
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ),
        port=env_int("PORT", 8010),
    )
