"""
Fatal-error reporting.

The diagnostics settings are read from the environment once at startup and
handed to the top-level error handler explicitly.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

TRACEBACK_ENV = "ROSTER_REPORTS_TRACEBACK"
LOG_LEVEL_ENV = "ROSTER_REPORTS_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "full", "on"}
# Fatal errors log at ERROR and must stay visible.
_QUIETER_THAN_ERROR = {"CRITICAL", "FATAL"}


@dataclass(frozen=True)
class DiagnosticsConfig:
    """How much detail to show when a run fails."""

    show_traceback: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DiagnosticsConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            DiagnosticsConfig
        """
        env = os.environ if environ is None else environ
        show_traceback = env.get(TRACEBACK_ENV, "").strip().lower() in _TRUTHY
        log_level = env.get(LOG_LEVEL_ENV, "").strip().upper() or "INFO"
        if log_level in _QUIETER_THAN_ERROR:
            log_level = "ERROR"
        return cls(show_traceback=show_traceback, log_level=log_level)


def report_fatal_error(exc: BaseException, config: DiagnosticsConfig) -> int:
    """
    Log a fatal error and return the process exit code.

    Args:
        exc: The exception that aborted the run
        config: Diagnostics settings for this run

    Returns:
        Non-zero exit code
    """
    if config.show_traceback:
        logger.error(f"Run failed: {exc}", exc_info=(type(exc), exc, exc.__traceback__))
    else:
        logger.error(f"Run failed: {exc}")
    return 1
