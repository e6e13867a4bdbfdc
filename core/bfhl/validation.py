"""
core.bfhl.validation — Request shape and argument checks for /bfhl.

Every failure raises ValidationError carrying the message that goes back
to the client verbatim.
"""
from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Client input that cannot be dispatched."""


def require_single_key(body: Any) -> tuple[str, Any]:
    """Return the only (key, value) pair of a JSON object body."""
    if not isinstance(body, dict) or len(body) != 1:
        raise ValidationError('Exactly one key required')
    return next(iter(body.items()))


def as_int(value: Any) -> int | None:
    """Return ``value`` as an int if it is an integral JSON number, else None.

    Booleans are rejected even though bool subclasses int.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def require_non_negative_int(value: Any, message: str) -> int:
    n = as_int(value)
    if n is None or n < 0:
        raise ValidationError(message)
    return n


def require_int_list(value: Any, message: str, non_empty: bool = False) -> list[int]:
    if not isinstance(value, list):
        raise ValidationError(message)
    ints = [as_int(v) for v in value]
    if any(i is None for i in ints):
        raise ValidationError(message)
    if non_empty and not ints:
        raise ValidationError('value must be non-empty')
    return ints


def require_str(value: Any, message: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(message)
    return value
