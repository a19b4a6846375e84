"""Exception hierarchy shared by every layer.

Only setup failures abort a run. Everything raised while handling a single
record is caught by the caller and reported as a per-record failure.
"""


class SharedError(Exception):
    """Base class for catalog pipeline errors."""


class FatalSetupError(SharedError):
    """Raised when a run cannot start at all."""


class DocumentNotFoundError(FatalSetupError):
    """A source document file is missing."""

    def __init__(self, path: str):
        super().__init__(f"document not found: {path}")
        self.path = path


class StoreUnavailableError(FatalSetupError):
    """The persistent store cannot be reached or is not configured."""


class RecordPersistenceError(SharedError):
    """A store or filesystem operation failed for one record."""

    def __init__(self, label: str, cause: Exception):
        super().__init__(f"{label}: {cause}")
        self.label = label
        self.cause = cause


__all__ = [
    "SharedError",
    "FatalSetupError",
    "DocumentNotFoundError",
    "StoreUnavailableError",
    "RecordPersistenceError",
]
