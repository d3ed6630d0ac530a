"""Logging setup for entry points. Library code only ever calls logging.getLogger(__name__)."""

import logging
import sys
from typing import Optional

# The handler installed by the last call, replaced (not duplicated) on the next one
_console_handler: Optional[logging.Handler] = None


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger to write to stdout."""
    global _console_handler

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stdout)
    _console_handler.setFormatter(formatter)
    root_logger.addHandler(_console_handler)

    logging.getLogger("src").setLevel(level.upper())
