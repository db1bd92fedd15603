"""
Logging configuration for sequential_ui.

The library only binds module loggers; sinks are left to the host
application unless it calls configure_logging().
"""

import os
import sys
from typing import Optional

from loguru import logger

from .config import get_setting

LOG_LEVEL_ENV_VAR = "SEQUENTIAL_UI_LOG_LEVEL"
LOG_FILE_ENV_VAR = "SEQUENTIAL_UI_LOG_FILE"


def configure_logging(
    level: Optional[str] = None,
    console: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Replace loguru's default handler with sequential_ui's sinks.

    Arguments take precedence over the environment, which takes precedence
    over the [logging] settings section.

    Args:
        level: Minimum level name, e.g. "DEBUG"
        console: Whether to log to stderr
        log_file: Optional path of a rotating log file
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR) or get_setting("logging", "level", "INFO")
    if console is None:
        console = bool(get_setting("logging", "console", True))
    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV_VAR) or get_setting("logging", "file", "")

    logger.remove()

    if console:
        logger.add(sink=sys.stderr, level=level, colorize=True)

    if log_file:
        logger.add(
            sink=log_file,
            level=level,
            rotation="10 MB",
            retention="7 days",
        )

    logger.info(f"sequential_ui logging configured: level={level}, console={console}, file={log_file or None}")
