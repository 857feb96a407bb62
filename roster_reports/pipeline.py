"""
ReportPipeline - Orchestrates the roster report flow.

Reads the roster, filters by first name, derives the time and email
reports, then writes both files. Both reports are computed before either
file is written.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Union

from .core.filtering import filter_by_first_name
from .core.notifications import collect_notifications
from .core.staleness import STALE_AFTER_DAYS, StalenessClassifier
from .core.time_aggregator import aggregate_time
from .export.report_writer import ReportWriter
from .ingest.roster_reader import RosterReader

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Configuration for one report run."""

    input_file: Union[str, Path]
    first_name_filter: str
    output_for_time: Union[str, Path]
    output_for_emails: Union[str, Path]
    today: Optional[date] = None  # local date when None
    stale_after_days: int = STALE_AFTER_DAYS


@dataclass
class PipelineStats:
    """Statistics from a pipeline run."""

    records_read: int = 0
    records_kept: int = 0
    time_entries: int = 0
    stale_records: int = 0
    notification_candidates: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


class ReportPipeline:
    """Builds the time and email reports for a roster."""

    def __init__(
        self,
        config: PipelineConfig,
        reader: Optional[RosterReader] = None,
        writer: Optional[ReportWriter] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Pipeline configuration
            reader: Roster decoder (default RosterReader)
            writer: Report writer (default ReportWriter)
        """
        self.config = config
        self.reader = reader or RosterReader()
        self.writer = writer or ReportWriter()
        self.classifier = StalenessClassifier(
            today=config.today,
            threshold_days=config.stale_after_days,
        )

    def run(self) -> PipelineStats:
        """
        Run the full pipeline.

        Returns:
            PipelineStats for the run

        Raises:
            RosterReportError: Any decode, date or I/O failure
        """
        stats = PipelineStats()

        records = self.reader.read(self.config.input_file)
        stats.records_read = len(records)

        kept = filter_by_first_name(records, self.config.first_name_filter)
        stats.records_kept = len(kept)
        logger.info(
            f"Kept {len(kept)} of {len(records)} records matching "
            f"first name filter {self.config.first_name_filter!r}"
        )

        stale = list(self.classifier.classify(kept))
        stats.stale_records = len(stale)
        candidates = collect_notifications(stale)
        stats.notification_candidates = len(candidates)
        logger.info(
            f"{len(candidates)} people to notify ({len(stale)} stale records, "
            f"reference date {self.classifier.today.isoformat()})"
        )

        entries = aggregate_time(kept)
        stats.time_entries = len(entries)

        self.writer.write_email_report(candidates, self.config.output_for_emails)
        self.writer.write_time_report(entries, self.config.output_for_time)

        return stats
