"""Logging setup: rotating file plus console."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Client libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "openai", "urllib3")


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.environ.get("PROFILE_ANALYZER_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        # getLevelName maps a known name to its number, anything else to a string
        value = logging.getLevelName(level.upper())
        return value if isinstance(value, int) else logging.INFO
    return level


def setup_logging(
    log_dir: str | None = "logs",
    level: int | str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Configure the ``profile_analyzer`` logger.

    Console output goes to stderr so ``--json`` output on stdout stays
    parseable. Pass ``log_dir=None`` to skip the file handler.
    """
    level = _resolve_level(level)

    logger = logging.getLogger("profile_analyzer")
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates on re-init
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # 5MB per file, keep 3 backups
        file_handler = RotatingFileHandler(
            log_path / "profile_analyzer.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return logger
