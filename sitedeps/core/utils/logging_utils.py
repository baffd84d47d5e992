"""Loguru setup for sitedeps."""

import sys
from typing import Any

from loguru import logger

from sitedeps.core.config.logging_config import LoggingConfig


def setup_logging(verbose: bool = False, config: Any | None = None) -> None:
    """Configure loguru sinks.

    Args:
        verbose: Send DEBUG output to the console
        config: A ``LoggingConfig`` or any object with a ``logging`` attribute
            holding one (e.g. the top-level ``Config``)
    """
    logging_config: LoggingConfig | None
    if isinstance(config, LoggingConfig):
        logging_config = config
    else:
        logging_config = getattr(config, "logging", None) if config else None

    logger.remove()

    file_enabled = logging_config is not None and logging_config.file.enabled

    if verbose:
        console_level = "DEBUG"
    elif file_enabled:
        # File sink captures details; keep the console quiet
        console_level = "WARNING"
    elif logging_config is not None:
        console_level = logging_config.console_level
    else:
        console_level = "WARNING"

    logger.add(
        sys.stderr,
        level=console_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
    )

    if file_enabled:
        file_config = logging_config.file
        logger.add(
            file_config.path,
            level=file_config.level,
            rotation=file_config.rotation,
            retention=file_config.retention,
            format=file_config.format,
        )
        logger.debug(f"File logging enabled: {file_config.path}")
