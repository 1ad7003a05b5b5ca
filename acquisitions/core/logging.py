"""Logging setup: console outside production, optional error/combined log files."""

import logging
import time
from pathlib import Path

from acquisitions.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


class UTCFormatter(logging.Formatter):
    """Formatter whose timestamps are in UTC, matching the trailing Z in LOG_DATEFMT."""

    converter = time.gmtime


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger once per process.

    With LOG_DIR set, ERROR and above go to error.log and everything to
    combined.log. The console handler is added outside production, and in
    production too when there is no log directory (so logs are never dropped).
    """
    handlers: list[logging.Handler] = []
    if settings.LOG_DIR:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        error_handler = logging.FileHandler(log_dir / "error.log", encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)
        handlers.append(logging.FileHandler(log_dir / "combined.log", encoding="utf-8"))
    if settings.APP_ENV != "prod" or not settings.LOG_DIR:
        handlers.append(logging.StreamHandler())

    formatter = UTCFormatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in handlers:
        handler.setFormatter(formatter)

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL)
