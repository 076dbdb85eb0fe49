"""Configuration utilities: environment loading and logging setup.

Environment variables:
- WELLNESS_LOG_LEVEL: Log level for this tool (takes precedence)
- LOG_LEVEL: Generic log level fallback (default: WARNING)

Logs are written to stderr so they never mix with the report on stdout.
"""

import logging
import os
import sys
from typing import Optional

import structlog
from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def load_environment() -> None:
    """Load variables from a ``.env`` file if one is present."""
    load_dotenv()


def get_log_level(default: str = DEFAULT_LOG_LEVEL) -> str:
    """
    Get the configured log level name.

    Returns:
        Upper-case level name; unknown names fall back to ``default``
    """
    level = os.getenv("WELLNESS_LOG_LEVEL") or os.getenv("LOG_LEVEL") or default
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure stdlib logging and route structlog through it.

    Args:
        level: Level name; read from the environment when omitted
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
