"""Application logger for taskrecur.

CLI events and library diagnostics share one rotating log file under the
platform log directory. Library modules log through
``logging.getLogger(__name__)``; their records reach the file once
:func:`get_logger` has attached the handler to the ``taskrecur`` parent logger.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "taskrecur"
LOG_FILE_NAME = "taskrecur.log"
MAX_LOG_BYTES = 2 * 1024 * 1024
BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def get_log_path() -> Path:
    """Return the log file location, creating its directory if needed."""
    log_dir = Path(user_log_dir(LOGGER_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / LOG_FILE_NAME


def _file_handler(path: Path) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=MAX_LOG_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """Return the ``taskrecur`` logger, attaching the file handler on first use."""
    global _logger
    if _logger is None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        if not any(
            isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
        ):
            logger.addHandler(_file_handler(get_log_path()))
        _logger = logger
    return _logger
