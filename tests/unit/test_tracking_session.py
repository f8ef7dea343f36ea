"""Tests for the start/stop tracking session."""

from datetime import datetime, timedelta, timezone

import pytest

from tallysheet import SessionError, ValidationError
from tallysheet.session import TrackingSession

START = datetime(2022, 7, 12, 9, 0, tzinfo=timezone.utc)


class TestTrackingSession:
    """Test TrackingSession functionality."""

    def test_init(self):
        session = TrackingSession()
        assert session.selected_project is None
        assert not session.is_running
        assert session.elapsed() == timedelta(0)

    def test_start_and_finish(self):
        """Test a full start/finish cycle produces an entry."""
        session = TrackingSession()
        session.select("Meetings")
        assert session.start(now=START) == START
        assert session.is_running
        assert session.elapsed(now=START + timedelta(minutes=5)) == timedelta(minutes=5)

        entry = session.finish(notes="sprint review", now=START + timedelta(hours=1))

        assert entry.project == "Meetings"
        assert entry.start == START
        assert entry.duration == timedelta(hours=1)
        assert entry.notes == "sprint review"
        assert not session.is_running
        assert session.selected_project == "Meetings"

    def test_start_without_project(self):
        with pytest.raises(SessionError):
            TrackingSession().start()

    def test_start_twice(self):
        session = TrackingSession()
        session.select("Lunch")
        session.start(now=START)
        with pytest.raises(SessionError):
            session.start(now=START)

    def test_change_project_while_running(self):
        session = TrackingSession()
        session.select("Lunch")
        session.start(now=START)
        with pytest.raises(SessionError):
            session.select("Meetings")

    def test_select_empty_project(self):
        with pytest.raises(ValidationError):
            TrackingSession().select(" ")

    def test_finish_when_idle(self):
        session = TrackingSession()
        session.select("Lunch")
        with pytest.raises(SessionError):
            session.finish()

    def test_cancel(self):
        """Test that cancel discards the running interval."""
        session = TrackingSession()
        session.select("Lunch")
        session.start(now=START)
        session.cancel()
        assert not session.is_running
        with pytest.raises(SessionError):
            session.finish()

    def test_default_clock_is_utc(self):
        session = TrackingSession()
        session.select("Lunch")
        started = session.start()
        assert started.tzinfo is timezone.utc
