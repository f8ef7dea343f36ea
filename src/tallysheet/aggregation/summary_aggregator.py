"""Aggregation of raw work entries into a date x project summary."""

import logging
from collections import defaultdict
from datetime import date, timedelta
from types import MappingProxyType
from typing import Dict, Iterable, List, Set

from ..domain.models import ProjectDayTotal, Summary, WorkEntry

logger = logging.getLogger(__name__)


class SummaryAggregator:
    """Group work entries by start date and project within a date window."""

    def build(
        self, entries: Iterable[WorkEntry], start_date: date, end_date: date
    ) -> Summary:
        """Build a summary of entries whose start date is in the window.

        Both bounds are inclusive. An entry crossing midnight is attributed
        entirely to its start date. Durations are summed as-is, so an entry
        ending before it starts reduces its cell total. Notes are joined one
        per line in the order the entries are given.

        Args:
            entries: Work entries in processing order
            start_date: First date of the window
            end_date: Last date of the window

        Returns:
            Immutable summary snapshot
        """
        durations: Dict[date, Dict[str, timedelta]] = defaultdict(
            lambda: defaultdict(timedelta)
        )
        notes: Dict[date, Dict[str, List[str]]] = defaultdict(
            lambda: defaultdict(list)
        )
        dates: Set[date] = set()
        projects: Set[str] = set()
        total = 0

        for entry in entries:
            total += 1
            date_worked = entry.date_worked
            if date_worked < start_date or date_worked > end_date:
                continue

            dates.add(date_worked)
            projects.add(entry.project)

            duration = entry.duration
            if duration < timedelta(0):
                logger.debug(
                    f"Entry for {entry.project} on {date_worked} has negative "
                    f"duration {duration}"
                )
            durations[date_worked][entry.project] += duration
            if entry.notes:
                notes[date_worked][entry.project].append(entry.notes)

        by_date_project = MappingProxyType(
            {
                day: MappingProxyType(
                    {
                        project: ProjectDayTotal(
                            hours_worked=worked,
                            notes="\n".join(notes[day][project]),
                        )
                        for project, worked in day_projects.items()
                    }
                )
                for day, day_projects in durations.items()
            }
        )

        logger.debug(
            f"Aggregated {total} entries into {len(dates)} dates and "
            f"{len(projects)} projects for {start_date}..{end_date}"
        )

        return Summary(
            by_date_project=by_date_project,
            dates=tuple(sorted(dates)),
            projects=tuple(sorted(projects)),
        )


def build_summary(
    entries: Iterable[WorkEntry], start_date: date, end_date: date
) -> Summary:
    """Aggregate entries into a summary for the inclusive date window."""
    return SummaryAggregator().build(entries, start_date, end_date)
