"""Exception hierarchy for tallysheet."""


class TallysheetError(Exception):
    """Base class for all tallysheet errors."""


class ValidationError(TallysheetError):
    """Raised when caller-supplied input is rejected."""


class SessionError(TallysheetError):
    """Raised when the tracking session is used out of order."""


class StorageError(TallysheetError):
    """Raised when the entry store cannot read or write its database."""
