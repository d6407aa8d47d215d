"""Custom exception hierarchy."""

from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(CalendarError):
    """Failure reaching the calendar service.

    Raised for connection errors, timeouts and non-success HTTP statuses.
    A transport failure on any sub-range aborts the whole fetch.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(CalendarError):
    """Response document did not match the expected calendar schema."""

    def __init__(self, message: str, event_id: str | None = None) -> None:
        super().__init__(message)
        self.event_id = event_id
