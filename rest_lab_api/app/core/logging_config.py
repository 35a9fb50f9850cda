"""
Logging setup shared by both services.

``setup_logging`` installs a console handler on the root logger and,
when a log file is configured, a file handler next to it.  Handlers it
installs are named ``rest_lab_api.*``; a second call finds them and
leaves the configuration alone, which matters because every
application factory (and every test) calls it.  Handlers attached by
other code, such as a test runner's capture handler, do not count.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "rest_lab_api.console"
FILE_HANDLER_NAME = "rest_lab_api.file"


def _is_configured(root: logging.Logger) -> bool:
    return any(h.name in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME) for h in root.handlers)


def _file_handler(logfile: str, max_bytes: int, backup_count: int) -> logging.Handler:
    path = Path(logfile).resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    if max_bytes > 0:
        return RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    return logging.FileHandler(path, encoding="utf-8")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    *,
    max_bytes: int = 0,
    backup_count: int = 3,
) -> None:
    """Configure the root logger for the services.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File to log to in addition to the console.  Missing parent
        directories are created.
    max_bytes : int
        Rotate ``logfile`` once it reaches this size; ``0`` disables
        rotation.
    backup_count : int
        Number of rotated files kept.
    """
    root = logging.getLogger()
    if _is_configured(root):
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    handlers[0].name = CONSOLE_HANDLER_NAME
    if logfile:
        file_handler = _file_handler(logfile, max_bytes, backup_count)
        file_handler.name = FILE_HANDLER_NAME
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
