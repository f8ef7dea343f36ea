"""Personal time tracking with date x project timesheet summaries."""

from datetime import date, datetime
from typing import Union

from .aggregation import SummaryAggregator, build_summary
from .domain import (
    ProjectDayTotal,
    SessionError,
    StorageError,
    Summary,
    TallysheetError,
    ValidationError,
    WorkEntry,
)

__version__ = "0.1.0"


def entry_from_minutes(
    project: str,
    minutes: float,
    notes: str,
    reference_day: Union[date, datetime],
) -> WorkEntry:
    """Create a work entry lasting ``minutes`` from midnight of ``reference_day``."""
    return WorkEntry.from_minutes(project, minutes, notes, reference_day)


__all__ = [
    "ProjectDayTotal",
    "SessionError",
    "StorageError",
    "Summary",
    "SummaryAggregator",
    "TallysheetError",
    "ValidationError",
    "WorkEntry",
    "build_summary",
    "entry_from_minutes",
]
