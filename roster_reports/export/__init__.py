"""Report output."""

from .report_writer import ReportWriter

__all__ = ["ReportWriter"]
