import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from ..domain.errors import ValidationError

logger = logging.getLogger(__name__)


def parse_date(date_input: str) -> date:
    """Parse a single "YYYY-MM-DD" date."""
    try:
        return datetime.strptime(date_input.strip(), "%Y-%m-%d").date()
    except ValueError as e:
        raise ValidationError(f"Invalid date: '{date_input}'. Use 'YYYY-MM-DD'") from e


def parse_date_range(date_input: str) -> Tuple[date, date]:
    """
    Parse flexible date range input.

    Supported formats:
    - "YYYY-MM-DD - YYYY-MM-DD" (explicit range)
    - "YYYY-MM-DD" (single day)
    - "YYYY-MM" (entire month)

    Args:
        date_input: Date string in one of the supported formats

    Returns:
        Tuple of (start_date, end_date), both inclusive
    """
    date_input = date_input.strip()

    # Range format: "2022-07-01 - 2022-07-14"
    if " - " in date_input:
        start_str, end_str = date_input.split(" - ", 1)
        return parse_date(start_str), parse_date(end_str)

    # Month format: "2022-07"
    elif len(date_input) == 7 and date_input.count("-") == 1:
        year_str, month_str = date_input.split("-")
        try:
            year, month = int(year_str), int(month_str)
            _, last_day = calendar.monthrange(year, month)
        except ValueError as e:
            raise ValidationError(f"Invalid month: '{date_input}'") from e

        return date(year, month, 1), date(year, month, last_day)

    # Single day format: "2022-07-12"
    elif len(date_input) == 10 and date_input.count("-") == 2:
        day = parse_date(date_input)
        return day, day

    else:
        raise ValidationError(
            f"Invalid date format: '{date_input}'. "
            "Use 'YYYY-MM-DD', 'YYYY-MM', or 'YYYY-MM-DD - YYYY-MM-DD'"
        )


def default_window(today: Optional[date] = None, days: int = 14) -> Tuple[date, date]:
    """
    Get the default summary window.

    Args:
        today: First day of the window, defaults to today
        days: Number of days after the first day

    Returns:
        Tuple of (start_date, end_date)
    """
    start_date = today or date.today()
    return start_date, start_date + timedelta(days=days)


def parse_minutes(minutes_input: str) -> float:
    """
    Parse manually typed minutes.

    Text that is not a number counts as zero minutes.
    """
    try:
        return float(minutes_input.strip())
    except ValueError:
        logger.warning(f"Could not parse minutes '{minutes_input}', using 0")
        return 0.0
