"""
Structured logging setup.

Provides consistent logging across the codebase.
"""

import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Setup structured logging.

    Report files are the program's only output, so records go to
    stderr unless another stream is given.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses default if None)
        stream: Destination stream (stderr if None)
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=format_string,
        handlers=[logging.StreamHandler(stream or sys.stderr)],
    )

