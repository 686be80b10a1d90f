"""Logging configuration for the command line and example scripts.

The library itself never configures logging; applications that want to see
deprecatable's debug output call ``configure_logging`` or set up logging
themselves.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> int:
    """Configure root logging to stdout.

    Args:
        level: Level name such as "DEBUG". Defaults to the LOG_LEVEL
            environment variable, then INFO.

    Returns:
        The numeric level that was applied.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level_int = getattr(logging, level_name, logging.INFO)
    if not isinstance(level_int, int):
        level_int = logging.INFO

    logging.basicConfig(
        level=level_int,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    return level_int
