"""
Roster reports CLI - Build the time and email reports from a roster file.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import RosterReportError
from .infrastructure.diagnostics import DiagnosticsConfig, report_fatal_error
from .infrastructure.logging import setup_logging
from .pipeline import PipelineConfig, ReportPipeline

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="roster-reports",
        description="Sum completed time per person and list people to notify",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Everyone named Ann (or Annabel, Joanne, ...)
  roster-reports roster.psv Ann time.txt emails.txt

  # Every record
  roster-reports roster.psv "" time.txt emails.txt

Environment:
  ROSTER_REPORTS_TRACEBACK=1     show the full traceback on failure
  ROSTER_REPORTS_LOG_LEVEL=DEBUG log every notification decision
""",
    )

    parser.add_argument("input_file", help="Pipe-delimited roster file with a header row")
    parser.add_argument("first_name_filter", help="Keep records whose first name contains this text")
    parser.add_argument("output_for_time", help="Time report output path")
    parser.add_argument("output_for_emails", help="Email report output path")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the roster reports CLI."""
    diagnostics = DiagnosticsConfig.from_env()
    setup_logging(diagnostics.log_level)

    args = parse_args(argv)

    config = PipelineConfig(
        input_file=args.input_file,
        first_name_filter=args.first_name_filter,
        output_for_time=args.output_for_time,
        output_for_emails=args.output_for_emails,
    )

    try:
        stats = ReportPipeline(config).run()
    except RosterReportError as e:
        return report_fatal_error(e, diagnostics)

    logger.info(
        f"Done: {stats.time_entries} time entries, "
        f"{stats.notification_candidates} people to notify"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
