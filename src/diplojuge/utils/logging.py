from __future__ import annotations

import logging
import sys

from diplojuge.config import GameConfig

LOGGER_NAME = "diplojuge"
LOG_FORMAT = "[%(levelname)s] [%(name)s] %(message)s"


def configure_logging(config: GameConfig | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    config = config or GameConfig.from_env()
    logger = logging.getLogger(LOGGER_NAME)
    level = getattr(logging, config.log_level.upper(), logging.WARNING)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
