"""
Report derivation: filtering, time aggregation, staleness and notifications.
"""

from .types import Person, TimeEntry, NotificationCandidate, ROSTER_FIELDS
from .filtering import filter_by_first_name
from .time_aggregator import aggregate_time, format_completed
from .staleness import StalenessClassifier, parse_last_log, needs_notification
from .notifications import collect_notifications

__all__ = [
    "Person",
    "TimeEntry",
    "NotificationCandidate",
    "ROSTER_FIELDS",
    "filter_by_first_name",
    "aggregate_time",
    "format_completed",
    "StalenessClassifier",
    "parse_last_log",
    "needs_notification",
    "collect_notifications",
]
