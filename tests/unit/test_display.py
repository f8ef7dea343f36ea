"""Tests for rich terminal output."""

from datetime import date, datetime, timedelta, timezone

from rich.console import Console

from tallysheet import WorkEntry, build_summary
from tallysheet.cli.display import TimesheetCLI


def make_cli():
    return TimesheetCLI(Console(record=True, width=160, color_system=None))


def make_entry(project, hour, hours, notes=""):
    start = datetime(2022, 7, 12, hour, tzinfo=timezone.utc)
    return WorkEntry(project, start, start + timedelta(hours=hours), notes)


class TestTimesheetCLI:
    """Test TimesheetCLI rendering."""

    def test_summary_grid(self):
        """Test that the grid shows projects, dates and totals."""
        entries = [
            make_entry("Lunch", 12, 1),
            make_entry("Meetings", 9, 1.5, notes="sprint review"),
        ]
        summary = build_summary(entries, date(2022, 7, 12), date(2022, 7, 12))
        cli = make_cli()

        cli.show_summary(summary, date(2022, 7, 12), date(2022, 7, 12))
        output = cli.console.export_text()

        assert "07/12" in output
        assert "Lunch" in output
        assert "Meetings" in output
        assert "1.50" in output
        assert "2.50" in output
        assert "sprint review" in output

    def test_empty_summary(self):
        cli = make_cli()
        summary = build_summary([], date(2022, 7, 12), date(2022, 7, 13))
        cli.show_summary(summary, date(2022, 7, 12), date(2022, 7, 13))
        assert "No entries for 2022-07-12..2022-07-13" in cli.console.export_text()

    def test_entries_table(self):
        cli = make_cli()
        cli.show_entries([(7, make_entry("Lunch", 12, 0.5, notes="pizza"))])
        output = cli.console.export_text()
        assert "7" in output
        assert "2022-07-12 12:00" in output
        assert "30m:0s" in output
        assert "pizza" in output

    def test_format_time_range(self):
        cli = make_cli()
        assert cli.format_time_range(date(2022, 7, 12), date(2022, 7, 12)) == "2022-07-12"
        assert (
            cli.format_time_range(date(2022, 7, 1), date(2022, 7, 31))
            == "2022-07-01..2022-07-31"
        )

    def test_validate_config(self):
        cli = make_cli()
        assert cli.validate_config([]) is True
        assert cli.validate_config(["storage.db_path is required"]) is False
        assert "storage.db_path is required" in cli.console.export_text()
