import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from sprite_trigger.utilities.env.parsing import _env_flag

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "SPRITE_TRIGGER_LOG_DIR"
LOG_TO_FILE_ENV_VAR = "SPRITE_TRIGGER_LOG_TO_FILE"
DEFAULT_LOG_SUBDIR = Path(".sprite_trigger") / "logs"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 2 * 1024 * 1024  # 2 MiB
BACKUP_COUNT = 3


def _resolve_log_directory() -> Path:
    """Return the directory where log files should be written."""

    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    path = Path(log_dir).expanduser() if log_dir else Path.home() / DEFAULT_LOG_SUBDIR
    path.mkdir(parents=True, exist_ok=True)
    return path


def _log_filename(name: str) -> str:
    stem = name.replace(os.sep, "_").replace(".", "_") or "root"
    return f"{stem}.log"


def _configure_logger(logger: logging.Logger, level_name: str) -> None:
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        # Someone else (a test, an embedding host) already owns this logger.
        return

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if _env_flag(LOG_TO_FILE_ENV_VAR):
        handlers.append(
            RotatingFileHandler(
                _resolve_log_directory() / _log_filename(logger.name),
                maxBytes=MAX_LOG_BYTES,
                backupCount=BACKUP_COUNT,
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing to stderr and, when enabled, a rolling file."""

    logger = logging.getLogger(name)
    _configure_logger(logger, os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper())
    return logger
