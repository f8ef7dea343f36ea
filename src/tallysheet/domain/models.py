"""Domain models for work entries and timesheet summaries."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from .errors import ValidationError

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class WorkEntry:
    """One recorded work interval for one project."""

    project: str
    start: datetime
    end: datetime
    notes: str = ""

    @property
    def duration(self) -> timedelta:
        """Worked duration; negative when end precedes start."""
        return self.end - self.start

    @property
    def date_worked(self) -> date:
        """UTC calendar date the entry is attributed to (the start date)."""
        return self.start.astimezone(timezone.utc).date()

    @classmethod
    def from_minutes(
        cls,
        project: str,
        minutes: float,
        notes: str,
        reference_day: Union[date, datetime],
    ) -> "WorkEntry":
        """Build an entry starting at midnight that lasts ``minutes``.

        Negative minutes produce a zero-length interval. Fractional minutes
        are resolved to whole seconds by rounding.

        Args:
            project: Project name the entry is booked on
            minutes: Worked minutes, must be below one full day
            notes: Free-text notes
            reference_day: Day the work happened on

        Returns:
            New work entry

        Raises:
            ValidationError: If minutes is not finite or spans 24 hours or more
        """
        if not math.isfinite(minutes):
            raise ValidationError(f"Minutes must be a finite number, got {minutes!r}")
        if minutes >= MINUTES_PER_DAY:
            raise ValidationError(
                f"Minutes must be less than {MINUTES_PER_DAY}, got {minutes}"
            )

        if isinstance(reference_day, datetime):
            reference_day = reference_day.date()

        start = datetime.combine(reference_day, time(0, 0, 0), tzinfo=timezone.utc)
        end = start
        if minutes >= 0:
            whole_minutes = math.floor(minutes)
            # Half a second rounds up
            seconds = math.floor((minutes - whole_minutes) * 60 + 0.5)
            end = start + timedelta(
                hours=whole_minutes // 60,
                minutes=whole_minutes % 60,
                seconds=seconds,
            )

        return cls(project=project, start=start, end=end, notes=notes)


@dataclass(frozen=True)
class ProjectDayTotal:
    """Aggregated work for one project on one day."""

    hours_worked: timedelta = timedelta(0)
    notes: str = ""


@dataclass(frozen=True)
class Summary:
    """Immutable date x project view of aggregated work entries."""

    # Read-only mappings are not hashable
    __hash__ = None  # type: ignore[assignment]

    by_date_project: Mapping[date, Mapping[str, ProjectDayTotal]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    dates: tuple[date, ...] = ()
    projects: tuple[str, ...] = ()

    @classmethod
    def build(
        cls, entries: Iterable[WorkEntry], start_date: date, end_date: date
    ) -> "Summary":
        """Aggregate entries that started within the inclusive date window."""
        from ..aggregation.summary_aggregator import SummaryAggregator

        return SummaryAggregator().build(entries, start_date, end_date)

    @property
    def is_empty(self) -> bool:
        """True when no entry fell inside the window."""
        return not self.dates

    def cell(self, day: date, project: str) -> ProjectDayTotal:
        """Get the total for a date and project, empty when absent."""
        return self.by_date_project.get(day, {}).get(project, ProjectDayTotal())

    def hours_worked(self, day: date, project: str) -> timedelta:
        return self.cell(day, project).hours_worked

    def notes(self, day: date, project: str) -> str:
        return self.cell(day, project).notes

    def day_total(self, day: date) -> timedelta:
        """Sum of all projects worked on a date."""
        return sum(
            (cell.hours_worked for cell in self.by_date_project.get(day, {}).values()),
            timedelta(0),
        )

    def project_total(self, project: str) -> timedelta:
        """Sum of one project across all dates in the window."""
        return sum(
            (self.hours_worked(day, project) for day in self.dates), timedelta(0)
        )

    def total(self) -> timedelta:
        return sum((self.day_total(day) for day in self.dates), timedelta(0))
