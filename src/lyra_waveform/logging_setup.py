"""loguru sink configuration for the CLI and host applications.

The library itself only emits through ``loguru.logger``; sinks are added
here on request and never at import time.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from .storage.paths import ensure_parents

LOG_FORMAT = "{time:HH:mm:ss.SSS} | {level: <7} | {name}:{line} - {message}"


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Replace loguru's default handler with a stderr sink at *level*.

    When *log_file* is given a rotating file sink is added as well.
    """
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    if log_file is not None:
        path = ensure_parents(Path(log_file))
        logger.add(path, level="DEBUG", rotation="5 MB", retention=3)
        logger.debug(f"Logging to {path}")
