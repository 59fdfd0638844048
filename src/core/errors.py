"""
Error types raised while answering chat commands.

Every error derives from ForecastError; its message is meant to be posted
back to the chat channel as-is.
"""


class ForecastError(Exception):
    """Base class for errors that end a chat command."""


class ForecastAPIError(ForecastError):
    """A read against the Forecast API failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SubjectNotFoundError(ForecastError):
    """The search term matched neither a project nor a person."""

    def __init__(self, term: str):
        super().__init__(f"Unknown person/project matching term: {term}")
        self.term = term


class DanglingReferenceError(ForecastError):
    """An assignment or milestone points at an id Forecast did not return."""

    def __init__(self, kind: str, record_id):
        super().__init__(f"Unknown {kind} id referenced in schedule: {record_id}")
        self.kind = kind
        self.record_id = record_id


class UnknownCommandError(ForecastError):
    """Chat text that is not one of the supported commands."""

    def __init__(self, text: str):
        super().__init__(f"Unrecognised command: {text}")
        self.text = text


class DateRangeError(ForecastError):
    """The requested number of days runs past the calendar."""

    def __init__(self, days: int):
        super().__init__(f"Cannot show a {days} day schedule: that runs past the end of the calendar")
        self.days = days
