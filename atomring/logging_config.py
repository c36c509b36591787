"""Logging setup shared by the HTTP service and the CLI."""

from __future__ import annotations

import logging

from .config import get_config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str | int | None = None) -> None:
    """Configure root logging once.

    ``level`` defaults to ``ATOMRING_LOG_LEVEL``. When
    ``ATOMRING_DEBUG_ENGINE`` is set, the field logger is forced to DEBUG so
    each fusion is traced regardless of the root level.
    """
    config = get_config()
    logging.basicConfig(level=level or config.log_level, format=LOG_FORMAT)
    if config.debug_engine:
        logging.getLogger("atomring.field").setLevel(logging.DEBUG)
