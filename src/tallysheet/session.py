"""In-progress work timer, kept apart from persisted entries."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from .domain.errors import SessionError, ValidationError
from .domain.models import WorkEntry

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TrackingSession:
    """Start/stop timer for a single project."""

    def __init__(self) -> None:
        self.selected_project: Optional[str] = None
        self.started_at: Optional[datetime] = None

    @property
    def is_running(self) -> bool:
        return self.started_at is not None

    def select(self, project: str) -> None:
        """Select the project the next interval is booked on."""
        if self.is_running:
            raise SessionError("Cannot change project while tracking")
        if not project.strip():
            raise ValidationError("Project name must not be empty")
        self.selected_project = project

    def start(self, now: Optional[datetime] = None) -> datetime:
        """Start tracking the selected project.

        Returns:
            Start timestamp
        """
        if self.selected_project is None:
            raise SessionError("Select a project before starting work")
        if self.is_running:
            raise SessionError(f"Already tracking {self.selected_project}")

        self.started_at = now or utc_now()
        logger.info(f"Started work on {self.selected_project} at {self.started_at}")
        return self.started_at

    def elapsed(self, now: Optional[datetime] = None) -> timedelta:
        """Time since start, zero when not running."""
        if self.started_at is None:
            return timedelta(0)
        return (now or utc_now()) - self.started_at

    def finish(self, notes: str = "", now: Optional[datetime] = None) -> WorkEntry:
        """Stop tracking and return the finished entry.

        The caller is responsible for storing the entry.
        """
        if self.started_at is None or self.selected_project is None:
            raise SessionError("No work in progress")

        entry = WorkEntry(
            project=self.selected_project,
            start=self.started_at,
            end=now or utc_now(),
            notes=notes,
        )
        self.started_at = None
        logger.info(f"Finished work on {entry.project} after {entry.duration}")
        return entry

    def cancel(self) -> None:
        """Discard the interval in progress."""
        if self.started_at is not None:
            logger.info(f"Cancelled work on {self.selected_project}")
        self.started_at = None
