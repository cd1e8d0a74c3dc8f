"""Pydantic validation helpers shared by the API clients."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from f1feeds.exceptions import F1FeedValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def validate_list(model_type: type[T], data: Any) -> list[T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise F1FeedValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


def validate_each(model_type: type[T], data: Any) -> list[T]:
    """Validate records one by one, dropping those that fail.

    The payload itself must be a list; only individual entries may be bad.
    """
    if not isinstance(data, list):
        raise F1FeedValidationError(
            f"Expected a list of {model_type.__name__} records, got {type(data).__name__}"
        )
    adapter = TypeAdapter(model_type)
    records: list[T] = []
    for index, item in enumerate(data):
        try:
            records.append(adapter.validate_python(item))
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed %s record at index %d: %s",
                model_type.__name__, index, exc.error_count(),
            )
    return records


def unwrap(data: Any, *path: str) -> Any:
    """Walk nested dict keys, raising F1FeedValidationError on an unexpected shape."""
    node = data
    walked: list[str] = []
    for key in path:
        walked.append(key)
        if not isinstance(node, dict) or key not in node:
            raise F1FeedValidationError(
                f"Unrecognized payload: missing {'.'.join(walked)}"
            )
        node = node[key]
    return node
