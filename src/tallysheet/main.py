#!/usr/bin/env python3
"""Command line entrypoint for tallysheet."""

import argparse
import logging
import sys
from datetime import date, datetime, timezone
from typing import List, Optional

from tallysheet import build_summary, entry_from_minutes
from tallysheet.cli.display import TimesheetCLI
from tallysheet.config import Config
from tallysheet.domain.errors import TallysheetError, ValidationError
from tallysheet.session import TrackingSession
from tallysheet.store import EntryStore
from tallysheet.utils.date_parser import (
    default_window,
    parse_date,
    parse_date_range,
    parse_minutes,
)
from tallysheet.utils.logging import StructuredLogger, setup_console_logging

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tallysheet", description="Personal time tracking"
    )
    parser.add_argument("--config", default="config.json", help="Path to config.json")
    commands = parser.add_subparsers(dest="command", required=True)

    track = commands.add_parser("track", help="Start work on a project, Enter stops")
    track.add_argument("project")

    add = commands.add_parser("add", help="Back-fill an entry in minutes")
    add.add_argument("project")
    add.add_argument("minutes", help="Minutes worked (less than 1440)")
    add.add_argument("--date", help="Day worked (YYYY-MM-DD), defaults to today")
    add.add_argument("--notes", default="")

    commands.add_parser("entries", help="List recorded entries")

    delete = commands.add_parser("delete", help="Delete entries by ID")
    delete.add_argument("ids", nargs="+", type=int)

    projects = commands.add_parser("projects", help="Show or edit the project list")
    projects.add_argument("action", nargs="?", choices=["add", "remove"])
    projects.add_argument("name", nargs="?")

    summary = commands.add_parser("summary", help="Show hours per project and date")
    summary.add_argument(
        "--range",
        dest="date_range",
        help="'YYYY-MM-DD', 'YYYY-MM' or 'YYYY-MM-DD - YYYY-MM-DD'",
    )

    return parser


def cmd_track(
    args: argparse.Namespace,
    store: EntryStore,
    cli: TimesheetCLI,
    structured: StructuredLogger,
) -> int:
    if args.project not in store.get_projects():
        raise ValidationError(
            f"Unknown project '{args.project}', add it with 'projects add'"
        )

    session = TrackingSession()
    session.select(args.project)
    session.start()
    cli.console.print(f"⏳ Tracking [magenta]{args.project}[/magenta]...")

    try:
        cli.ask("Press Enter to finish")
    except (KeyboardInterrupt, EOFError):
        session.cancel()
        cli.show_warning("Tracking cancelled, nothing recorded")
        return 1

    cli.console.print(f"   Time elapsed: {session.elapsed()}")
    notes = cli.ask("Notes (optional)")
    entry = session.finish(notes=notes.strip())
    entry_id = store.add_entry(entry)
    structured.log_entry_recorded(entry_id, entry, source="track")
    cli.show_success(f"Recorded entry #{entry_id}")
    return 0


def cmd_add(
    args: argparse.Namespace,
    store: EntryStore,
    cli: TimesheetCLI,
    structured: StructuredLogger,
) -> int:
    if not args.project.strip() or not args.minutes.strip():
        raise ValidationError("Project and minutes are required")

    day = parse_date(args.date) if args.date else utc_today()
    entry = entry_from_minutes(args.project, parse_minutes(args.minutes), args.notes, day)
    entry_id = store.add_entry(entry)
    structured.log_entry_recorded(entry_id, entry, source="manual")
    cli.show_success(f"Recorded entry #{entry_id}")
    return 0


def cmd_delete(
    args: argparse.Namespace,
    store: EntryStore,
    cli: TimesheetCLI,
    structured: StructuredLogger,
) -> int:
    deleted = store.delete_entries(args.ids)
    structured.log_entries_deleted(list(args.ids), deleted)
    if deleted < len(set(args.ids)):
        cli.show_warning(f"Deleted {deleted} of {len(set(args.ids))} entries")
    else:
        cli.show_success(f"Deleted {deleted} entries")
    return 0


def cmd_projects(args: argparse.Namespace, store: EntryStore, cli: TimesheetCLI) -> int:
    if args.action is None:
        cli.show_projects(store.get_projects())
        return 0
    if not args.name:
        raise ValidationError(f"'projects {args.action}' needs a project name")

    if args.action == "add":
        if store.add_project(args.name):
            cli.show_success(f"Added project {args.name}")
        else:
            cli.show_warning(f"Project {args.name} already exists")
    else:
        if store.remove_project(args.name):
            cli.show_success(f"Removed project {args.name}")
        else:
            cli.show_warning(f"Project {args.name} not found")
    return 0


def cmd_summary(
    args: argparse.Namespace,
    config: Config,
    store: EntryStore,
    cli: TimesheetCLI,
    structured: StructuredLogger,
) -> int:
    if args.date_range:
        start_date, end_date = parse_date_range(args.date_range)
    else:
        start_date, end_date = default_window(
            utc_today(), days=config.summary.get("days", 14)
        )

    entries = store.get_entries()
    summary = build_summary(entries, start_date, end_date)
    structured.log_summary_built(start_date, end_date, summary, len(entries))
    cli.show_summary(summary, start_date, end_date)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    cli = TimesheetCLI()

    try:
        config = Config(args.config)
    except (OSError, ValueError) as e:
        cli.show_error(f"Failed to load configuration: {e}")
        return 1

    is_valid, errors = config.validate()
    if not is_valid:
        cli.validate_config(errors)
        return 1

    setup_console_logging(config.log.get("level", "INFO"))
    structured = StructuredLogger(config.log.get("log_dir", "logs"))

    try:
        store = EntryStore(config.storage["db_path"])
        store.seed_projects(config.projects)

        if args.command == "track":
            return cmd_track(args, store, cli, structured)
        if args.command == "add":
            return cmd_add(args, store, cli, structured)
        if args.command == "entries":
            cli.show_entries(store.get_entry_rows())
            return 0
        if args.command == "delete":
            return cmd_delete(args, store, cli, structured)
        if args.command == "projects":
            return cmd_projects(args, store, cli)
        return cmd_summary(args, config, store, cli, structured)
    except ValidationError as e:
        structured.log_validation_error([str(e)], operation=args.command)
        cli.show_error(str(e))
        return 1
    except TallysheetError as e:
        logger.error(f"{args.command} failed: {e}")
        cli.show_error(str(e))
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
