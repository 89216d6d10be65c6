"""Logging setup for VocabLoop."""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "vocabloop",
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return a named logger.

    Safe to call repeatedly: handlers are only attached once per logger.

    Args:
        name: Logger name (package loggers inherit from "vocabloop")
        level: Level name or number, defaults to INFO
        log_file: Optional path for an additional file handler

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level if level is not None else logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT)

    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if log_file:
        log_path = Path(log_file).resolve()
        if not any(isinstance(h, logging.FileHandler) and Path(h.baseFilename).resolve() == log_path
                   for h in logger.handlers):
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
