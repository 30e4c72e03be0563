"""Shared logging helpers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "SOURCECANON_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: int = logging.INFO


def get_logging_config() -> LoggingConfig:
    raw_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if raw_level is None or not raw_level.strip():
        return LoggingConfig()
    level = logging.getLevelNamesMapping().get(raw_level.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV_VAR}: {raw_level}")
    return LoggingConfig(level=level)


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to ``SOURCECANON_LOG_LEVEL`` (INFO when unset) and a terse format suitable
    for CLI output. Pass ``force=True`` to reconfigure during tests or specialised
    entry points.
    """

    logging.basicConfig(
        level=level if level is not None else get_logging_config().level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
