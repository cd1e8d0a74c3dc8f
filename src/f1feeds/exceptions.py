"""Custom exceptions for the f1feeds clients."""

from __future__ import annotations


class F1FeedError(Exception):
    """Base exception for all f1feeds client errors."""


class F1FeedConnectionError(F1FeedError):
    """Raised when the client cannot connect to the API."""


class F1FeedTimeoutError(F1FeedError):
    """Raised when a request to the API times out."""


class F1FeedAPIError(F1FeedError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class F1FeedValidationError(F1FeedError):
    """Raised when API response data fails model validation."""
