"""Terminal output for tallysheet using rich."""

from datetime import date, timedelta
from typing import List, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..domain.models import Summary, WorkEntry
from ..utils.durations import format_duration, format_duration_hours


class TimesheetCLI:
    """Minimal CLI interface with rich formatting."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def validate_config(self, errors: List[str]) -> bool:
        """Show configuration validation results."""
        if errors:
            self.console.print("❌ [red bold]Configuration Error[/red bold]")
            for error in errors:
                self.console.print(f"   • {error}", style="red")
            return False
        return True

    def show_error(self, error: str) -> None:
        """Show error message."""
        self.console.print(f"\n❌ [red bold]Error:[/red bold] {error}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"⚠️  [yellow]{message}[/yellow]")

    def show_success(self, message: str) -> None:
        self.console.print(f"✅ [green]{message}[/green]")

    def format_time_range(self, from_date: date, to_date: date) -> str:
        """Format time range for display."""
        if from_date == to_date:
            return from_date.isoformat()
        return f"{from_date.isoformat()}..{to_date.isoformat()}"

    def show_entries(self, rows: List[Tuple[int, WorkEntry]]) -> None:
        """Show stored entries with their IDs."""
        if not rows:
            self.console.print("[dim]No entries recorded yet[/dim]")
            return

        table = Table(show_header=True, box=None)
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Project")
        table.add_column("Start", style="dim")
        table.add_column("End", style="dim")
        table.add_column("Elapsed", justify="right", style="blue")
        table.add_column("Notes", overflow="ellipsis", max_width=50)

        for entry_id, entry in rows:
            table.add_row(
                str(entry_id),
                entry.project,
                entry.start.strftime("%Y-%m-%d %H:%M"),
                entry.end.strftime("%Y-%m-%d %H:%M"),
                format_duration(entry.duration),
                entry.notes,
            )

        self.console.print(table)

    def show_projects(self, projects: List[str]) -> None:
        if not projects:
            self.console.print("[dim]No projects registered[/dim]")
            return
        for name in projects:
            self.console.print(f"   • {name}")

    def build_summary_table(self, summary: Summary) -> Table:
        """Build the project x date grid with a totals row."""
        table = Table(show_header=True, show_footer=True, box=None)
        table.add_column("Project", style="magenta", footer="total")
        for day in summary.dates:
            table.add_column(
                day.strftime("%m/%d"),
                justify="right",
                footer=format_duration_hours(summary.day_total(day)),
            )
        table.add_column(
            "Total",
            justify="right",
            style="blue",
            footer=format_duration_hours(summary.total()),
        )

        for project in summary.projects:
            cells = []
            for day in summary.dates:
                hours = summary.hours_worked(day, project)
                text = format_duration_hours(hours) if hours != timedelta(0) else ""
                # Cells with notes are underlined, notes are listed below
                style = "underline" if summary.notes(day, project) else ""
                cells.append(Text(text, style=style))
            table.add_row(
                project,
                *cells,
                format_duration_hours(summary.project_total(project)),
            )

        return table

    def show_summary(self, summary: Summary, start_date: date, end_date: date) -> None:
        """Show the timesheet summary and any notes."""
        time_range = self.format_time_range(start_date, end_date)
        if summary.is_empty:
            self.console.print(f"[dim]No entries for {time_range}[/dim]")
            return

        self.console.print(
            Panel(
                self.build_summary_table(summary),
                border_style="green",
                title=f"Timesheet {time_range}",
            )
        )

        for day in summary.dates:
            for project in summary.projects:
                notes = summary.notes(day, project)
                if notes:
                    self.console.print(
                        f"[cyan]{day.isoformat()}[/cyan] [magenta]{project}[/magenta]"
                    )
                    for line in notes.splitlines():
                        self.console.print(f"   {line}", style="dim")

    def ask(self, message: str) -> str:
        return self.console.input(f"❓ {message}: ")
