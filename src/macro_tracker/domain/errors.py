"""Errors raised while reading or mutating the macro log."""


class MacroTrackerError(Exception):
    """Base class for failures reported back to tool callers."""


class MalformedDocumentError(MacroTrackerError):
    """Stored content does not decode to a macro document."""


class RemoteUnavailableError(MacroTrackerError):
    """The contents API could not be reached or returned a failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteConflictError(MacroTrackerError):
    """The write was rejected because the version tag is stale."""


class EntryNotFoundError(MacroTrackerError):
    """No day log exists for the requested date."""


class IndexOutOfRangeError(MacroTrackerError):
    """The entry index is beyond the day's entry count."""


class InvalidInputError(MacroTrackerError):
    """Tool arguments do not match the declared input contract."""
