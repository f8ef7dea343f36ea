"""Human-readable duration formatting."""

from datetime import timedelta


def format_duration(span: timedelta) -> str:
    """Format a duration with its two most significant units (e.g. 1h:30m)."""
    if span < timedelta(0):
        return "-" + format_duration(-span)

    seconds = int(span.total_seconds())
    days, remainder = divmod(seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    if days > 0:
        return f"{days}d:{hours}h"
    if hours > 0:
        return f"{hours}h:{minutes}m"
    if minutes > 0:
        return f"{minutes}m:{seconds}s"
    return f"{seconds}s"


def format_duration_hours(span: timedelta) -> str:
    """Format a duration as decimal hours (e.g. 1.50)."""
    return f"{span.total_seconds() / 3600:.2f}"
