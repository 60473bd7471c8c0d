"""
Lowering RemoteData into plain values.

``ensure`` and ``investigate`` exist to assert a variant and raise
``UnwrapError`` otherwise. Use them in scripts and tests, not in code that
has to handle every state.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import NotSettledError, UnwrapError
from ..core import Failure, Loading, NotAsked, RemoteData, Success


def to_result[S, F](rd: RemoteData[S, F]) -> Result[S, F]:
    """
    Convert a settled value to kungfu Result.

    Raises NotSettledError for NotAsked and Loading.
    """
    match rd:
        case Success(data):
            return Ok(data)
        case Failure(error):
            return Error(error)
        case NotAsked() | Loading():
            raise NotSettledError(rd)
        case _ as unreachable:
            assert_never(unreachable)


def ensure[S, F](rd: RemoteData[S, F]) -> S:
    """Return the Success payload or raise UnwrapError."""
    if isinstance(rd, Success):
        return rd.data
    raise UnwrapError("Network error", rd)


def investigate[S, F](rd: RemoteData[S, F]) -> F:
    """Return the Failure payload or raise UnwrapError."""
    if isinstance(rd, Failure):
        return rd.error
    raise UnwrapError("Nothing to investigate", rd)


def with_default[S, F](rd: RemoteData[S, F], default: S) -> S:
    """Success payload, or ``default`` for any other variant."""
    match rd:
        case Success(data):
            return data
        case _:
            return default


__all__ = ("ensure", "investigate", "to_result", "with_default")
