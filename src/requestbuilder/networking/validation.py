"""Argument checks shared by the builder and the result wrapper."""

from __future__ import annotations

from typing import Any

from .errors import InvalidArgument


def not_none(value: Any, message: str) -> None:
    """Raise InvalidArgument if ``value`` is None."""
    if value is None:
        raise InvalidArgument(message)


def check_argument(condition: bool, message: str) -> None:
    """Raise InvalidArgument if ``condition`` does not hold."""
    if not condition:
        raise InvalidArgument(message)
