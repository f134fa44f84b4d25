"""
Configuration helpers for spammy.

Only the package's own diagnostics and its locking behavior are configurable;
suppressed messages themselves are never routed or formatted. Values are read
from the environment once, at import time, with safe fallbacks on bad input.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_LEVEL_ENV_VAR = "SPAMMY_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "SPAMMY_LOG_FORMAT"
SYNCHRONIZED_ENV_VAR = "SPAMMY_SYNCHRONIZED"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "plain"  # json or plain
LOG_FORMATS = ("json", "plain")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _load_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def _load_log_level() -> str:
    raw = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(raw), int):
        return raw
    return DEFAULT_LOG_LEVEL


def _load_log_format() -> str:
    raw = os.getenv(LOG_FORMAT_ENV_VAR, DEFAULT_LOG_FORMAT).strip().lower()
    return raw if raw in LOG_FORMATS else DEFAULT_LOG_FORMAT


LOG_LEVEL = _load_log_level()
LOG_FORMAT = _load_log_format()
SYNCHRONIZED = _load_bool(SYNCHRONIZED_ENV_VAR, True)


@dataclass(slots=True)
class SpammyConfig:
    """Runtime configuration for the output service and its logger."""

    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT
    synchronized: bool = SYNCHRONIZED

    @property
    def level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


default_config = SpammyConfig()
