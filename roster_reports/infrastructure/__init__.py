"""
Infrastructure utilities.

Cross-cutting concerns: logging and fatal-error diagnostics.
"""

from .logging import setup_logging
from .diagnostics import DiagnosticsConfig, report_fatal_error

__all__ = ["setup_logging", "DiagnosticsConfig", "report_fatal_error"]
