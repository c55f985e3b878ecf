"""Loguru setup for the menu build.

Call setup_logging() once from the entry point; modules just do
``from loguru import logger``.
"""
import sys

from loguru import logger


def setup_logging(level: str = "WARNING", log_file=None) -> None:
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
    )

    if log_file:
        logger.add(
            log_file,
            level=level,
            rotation="1 MB",
            retention=3,
            encoding="utf-8",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        )
