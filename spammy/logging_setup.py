"""Handler wiring for the ``spammy`` logger. Never called on import."""

from __future__ import annotations

import json
import logging
from typing import Optional

from spammy.config import SpammyConfig, default_config

PACKAGE_LOGGER = "spammy"
PLAIN_FORMAT = "%(levelname)s %(name)s %(message)s"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("key", "sink", "outcome"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def configure_logging(
    config: Optional[SpammyConfig] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Attach one handler to the package logger using the configured level and format."""
    config = config or default_config
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    handler = handler or logging.StreamHandler()
    if config.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    for existing in list(pkg_logger.handlers):
        pkg_logger.removeHandler(existing)
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(config.level)
    return pkg_logger
