"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL


def setup_logging(level: str | None = None, to_file: bool = True):
    """Configure console and optional file output.

    Records carry a ``tenant`` extra (``-`` outside a request) so one tenant's
    aggregation can be followed through the log.
    """
    level = level or LOG_LEVEL
    logger.remove()
    logger.configure(extra={"tenant": "-"})

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{extra[tenant]}</cyan> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "summary_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[tenant]} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
            enqueue=True,
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
