"""Logging setup for applications embedding playbill."""

from __future__ import annotations

import logging
import os
from typing import Final

from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "PLAYBILL_LOG_LEVEL"


def resolve_log_level(name: str) -> int:
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {name!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: when ``level``
    is omitted it comes from ``PLAYBILL_LOG_LEVEL`` (INFO if unset). Pass ``force=True``
    to reconfigure during tests or specialised entry points.
    """

    if level is None:
        level = resolve_log_level(os.getenv(LOG_LEVEL_ENV) or "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
