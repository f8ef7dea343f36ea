"""Domain models and errors."""

from .errors import SessionError, StorageError, TallysheetError, ValidationError
from .models import ProjectDayTotal, Summary, WorkEntry

__all__ = [
    "ProjectDayTotal",
    "SessionError",
    "StorageError",
    "Summary",
    "TallysheetError",
    "ValidationError",
    "WorkEntry",
]
