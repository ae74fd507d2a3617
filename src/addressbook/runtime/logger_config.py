"""Loguru sink setup."""

import sys

from loguru import logger

from src.addressbook.runtime.config.config_data import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(config: LoggingConfig, level: str | None = None) -> None:
    """Replace loguru's sinks with a stderr sink and an optional file sink.

    Args:
        config: Logging section of the configuration
        level: Overrides ``config.level`` when given
    """
    effective_level = (level or config.level).upper()

    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=effective_level,
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    if config.file:
        logger.add(
            config.file,
            level=effective_level,
            rotation=f"{config.max_size_mb} MB",
            retention=config.backup_count,
            serialize=config.format == "json",
            encoding="utf-8",
        )

    logger.debug("Logging configured at level {}", effective_level)
