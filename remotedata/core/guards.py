"""Type guards over RemoteData.

Every guard is a discriminated ``isinstance`` check, so for any value exactly
one of ``is_not_asked``, ``is_loading``, ``is_success``, ``is_failure`` holds.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable
from typing import TypeGuard

from .variants import Failure, Loading, NotAsked, Success


def is_not_asked(value: object) -> TypeGuard[NotAsked]:
    return isinstance(value, NotAsked)


def is_loading(value: object) -> TypeGuard[Loading]:
    return isinstance(value, Loading)


def is_success(value: object) -> TypeGuard[Success[typing.Any]]:
    return isinstance(value, Success)


def is_failure(value: object) -> TypeGuard[Failure[typing.Any]]:
    return isinstance(value, Failure)


def is_success_all(values: Iterable[object]) -> bool:
    """
    True iff every element is a Success.

    Vacuously true for an empty iterable. Stops at the first non-Success.
    """
    return all(is_success(v) for v in values)


__all__ = (
    "is_failure",
    "is_loading",
    "is_not_asked",
    "is_success",
    "is_success_all",
)
