"""Application logging for Barbook.

All module loggers live under the ``barbook`` namespace. ``get_logger()``
attaches a rotating file handler (``<work dir>/logs/app.log``) and a stdout
handler to that namespace once per process; ``reset_logger()`` detaches them
again so a later call can configure a fresh work directory.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "barbook"
WORK_DIR_ENV = "BARBOOK_WORK_DIR"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LOGGER: logging.Logger | None = None


def work_dir() -> Path:
    """Runtime directory for logs; ``$BARBOOK_WORK_DIR`` or ``./.barbook``."""

    env = os.getenv(WORK_DIR_ENV)
    if env:
        return Path(env)
    return Path.cwd() / ".barbook"


def get_logger(log_dir: Path | None = None) -> logging.Logger:
    """Return the ``barbook`` logger, configuring its handlers on first use."""

    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER

    base = Path(log_dir) if log_dir is not None else work_dir() / "logs"
    base.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list[logging.Handler] = [
        RotatingFileHandler(base / "app.log", maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"),
        logging.StreamHandler(sys.stdout),
    ]
    for handler in handlers:
        handler.setFormatter(fmt)
        logger.addHandler(handler)

    _LOGGER = logger
    return logger


def reset_logger() -> None:
    """Close and detach the handlers installed by ``get_logger()``."""

    global _LOGGER
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    _LOGGER = None
