"""Structured logging setup for machine-readable logs."""

import json
import logging
import structlog
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Any, Optional

from ..domain.models import Summary, WorkEntry


class StructuredLogger:
    """Handles structured JSON logging for timesheet operations."""

    def __init__(self, log_dir: str = "logs"):
        self.log_dir = Path(log_dir)
        self.log_file = self.log_dir / "tallysheet.jsonl"

        # Ensure log directory exists
        self.log_dir.mkdir(parents=True, exist_ok=True)

        # Setup structlog
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="ISO"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer(),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        self.logger = structlog.get_logger("tallysheet")

    def log_summary_built(
        self,
        start_date: date,
        end_date: date,
        summary: Summary,
        entries_considered: int,
    ) -> None:
        """Log a summary build and append it to the JSONL file."""
        log_entry: Dict[str, Any] = {
            "operation": "summary",
            "time_range": {"from": start_date.isoformat(), "to": end_date.isoformat()},
            "results": {
                "entries_considered": entries_considered,
                "dates": len(summary.dates),
                "projects": list(summary.projects),
                "total_hours": round(summary.total().total_seconds() / 3600, 2),
            },
            "timestamp": datetime.now().isoformat(),
        }

        self.logger.info("summary_built", **log_entry)

        # Also write to file in JSONL format for easy parsing
        self._write_to_file(log_entry)

    def log_entry_recorded(self, entry_id: int, entry: WorkEntry, source: str) -> None:
        """Log a stored work entry."""
        self.logger.info(
            "entry_recorded",
            operation=source,
            entry_id=entry_id,
            project=entry.project,
            start=entry.start.isoformat(),
            duration_seconds=entry.duration.total_seconds(),
            timestamp=datetime.now().isoformat(),
        )

    def log_entries_deleted(self, requested: list, deleted: int) -> None:
        """Log entry deletion."""
        self.logger.info(
            "entries_deleted",
            operation="delete",
            requested=requested,
            deleted=deleted,
            timestamp=datetime.now().isoformat(),
        )

    def log_validation_error(self, errors: list, operation: Optional[str] = None) -> None:
        """Log rejected input or configuration."""
        self.logger.error(
            "validation_failed",
            operation=operation or "validation",
            errors=errors,
            timestamp=datetime.now().isoformat(),
        )

    def _write_to_file(self, log_entry: Dict[str, Any]) -> None:
        """Write log entry to JSONL file."""
        try:
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")
        except OSError as e:
            # Don't fail the command due to logging issues
            logging.getLogger(__name__).warning(f"Failed to write to log file: {e}")


def setup_console_logging(level: str) -> None:
    """Setup basic console logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
