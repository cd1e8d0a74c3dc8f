"""API call logging for the F1 dashboard data and service layers."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.path.join(os.path.dirname(__file__), "..", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")
_LOGGER_NAME = "f1_dashboard.api"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        _logger = logging.getLogger(_LOGGER_NAME)
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    parts = [repr(a) for a in args]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(parts)


class _Outcome:
    """Holds the wrapped call's return value for the OK line."""

    result: Any = None


@contextmanager
def _logged(prefix: str, name: str, arg_str: str, count_items: bool) -> Iterator[_Outcome]:
    logger = get_logger()
    logger.info("%sCALL: %s(%s)", prefix, name, arg_str)
    outcome = _Outcome()
    start = time.monotonic()
    try:
        yield outcome
    except Exception as exc:
        logger.error(
            "%sFAIL: %s(%s) -> %s: %s (%.3fs)",
            prefix, name, arg_str, type(exc).__name__, exc, time.monotonic() - start,
        )
        raise
    elapsed = time.monotonic() - start
    if count_items:
        result = outcome.result
        count = len(result) if isinstance(result, list) else 1
        logger.info("%sOK: %s(%s) -> %d items (%.3fs)", prefix, name, arg_str, count, elapsed)
    else:
        logger.info("%sOK: %s -> %.3fs", prefix, name, elapsed)


def _instrument(fn: F, prefix: str, skip_self: bool) -> F:
    name = fn.__qualname__

    def _arg_str(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
        return _describe_args(args[1:] if skip_self else args, kwargs)

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _logged(prefix, name, _arg_str(args, kwargs), skip_self) as outcome:
                outcome.result = await fn(*args, **kwargs)
            return outcome.result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with _logged(prefix, name, _arg_str(args, kwargs), skip_self) as outcome:
            outcome.result = fn(*args, **kwargs)
        return outcome.result

    return wrapper  # type: ignore[return-value]


def log_api_call(fn: F) -> F:
    """Decorator that logs data-layer method calls to the API log file.

    Works on both plain and ``async def`` methods; ``self`` is left out of
    the logged arguments and the OK line reports how many items came back.
    """
    return _instrument(fn, "", skip_self=True)


def log_service_call(fn: F) -> F:
    """Decorator that logs module-level service functions, sync or async."""
    return _instrument(fn, "SERVICE ", skip_self=False)
