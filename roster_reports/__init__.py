"""Roster progress reports: completed-time totals and stale-log notifications."""

from .pipeline import ReportPipeline, PipelineConfig, PipelineStats
from .errors import (
    RosterReportError,
    DecodeError,
    ParseError,
    InvalidDateError,
    ReportIOError,
)

__all__ = [
    "ReportPipeline",
    "PipelineConfig",
    "PipelineStats",
    "RosterReportError",
    "DecodeError",
    "ParseError",
    "InvalidDateError",
    "ReportIOError",
]
