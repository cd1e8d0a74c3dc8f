"""Source-agnostic data errors."""

from __future__ import annotations


class FetchFailure(Exception):
    """An upstream request failed or returned an unusable payload. UI catches only this."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class MalformedRecord(ValueError):
    """A single entry of an otherwise valid payload could not be normalized."""
