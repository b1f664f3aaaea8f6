# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import config


def setup_logger(level: str | None = None, log_dir: str | None = None):
    """
    Configure the "store" logger for the inventory tracker.

    Features:
    - Console output, always
    - Daily rotating log file, only when a log directory is configured
    - Unified log format with timestamp and level

    Modules log through children of this logger (store.inventory, store.console).
    """
    level = level or config.LOG_LEVEL
    log_dir = log_dir if log_dir is not None else config.LOG_DIR

    logger = logging.getLogger("store")
    logger.setLevel(getattr(logging, level, logging.WARNING))

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=path / "store.log",
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logger initialized")
    return logger
