"""f1feeds — Typed Python clients for the OpenF1 and Jolpica (Ergast) APIs."""

from f1feeds.client import AsyncOpenF1Client, OpenF1Client
from f1feeds.exceptions import (
    F1FeedAPIError,
    F1FeedConnectionError,
    F1FeedError,
    F1FeedTimeoutError,
    F1FeedValidationError,
)
from f1feeds.jolpica import AsyncJolpicaClient, JolpicaClient

__all__ = [
    "AsyncJolpicaClient",
    "AsyncOpenF1Client",
    "F1FeedAPIError",
    "F1FeedConnectionError",
    "F1FeedError",
    "F1FeedTimeoutError",
    "F1FeedValidationError",
    "JolpicaClient",
    "OpenF1Client",
]

__version__ = "0.1.0"
