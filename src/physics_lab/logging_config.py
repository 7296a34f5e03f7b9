# MIT License (see LICENSE)
"""
Logging setup for the physics_lab namespace.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
configure handlers. Applications (examples, benchmarks, a GUI) call
setup_logging() once at start-up.
"""
from __future__ import annotations
import logging
import sys

LOGGER_NAME = "physics_lab"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Configure the 'physics_lab' logger with a stdout handler.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO).
        log_file: Optional path; when given, records are also written there.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate records when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
