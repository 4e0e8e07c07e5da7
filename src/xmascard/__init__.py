"""
This file provides:

- Version numbering
- Logging setup (level taken from `XMASCARD_LOG_LEVEL`)
"""

__version__ = "1.0.0"

import logging
import os

from xmascard.utils.log import logger  # noqa: E402

_log_level = os.getenv("XMASCARD_LOG_LEVEL", "WARNING").upper()
try:
    logger.setLevel(_log_level)
except ValueError:
    logger.setLevel(logging.WARNING)
    logger.warning(f"Unknown XMASCARD_LOG_LEVEL {_log_level!r}, using WARNING")

__all__ = [
    "__version__",
    "logger",
]
