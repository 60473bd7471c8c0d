"""
Transform
=========

Payload mapping and exhaustive elimination of RemoteData.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from .variants import Failure, Loading, NotAsked, RemoteData, Success


def map_success[S, F, U](rd: RemoteData[S, F], fn: Callable[[S], U], /) -> RemoteData[U, F]:
    """
    Apply ``fn`` to the Success payload, pass other variants through.

    Example:
        map_success(success(2), lambda x: x * 10)  # Success(data=20)
        map_success(loading, lambda x: x * 10)     # Loading
    """
    match rd:
        case Success(data):
            return Success(fn(data))
        case NotAsked() | Loading() | Failure():
            return rd
        case _ as unreachable:
            assert_never(unreachable)


def map_failure[S, F, G](rd: RemoteData[S, F], fn: Callable[[F], G], /) -> RemoteData[S, G]:
    """Apply ``fn`` to the Failure payload, pass other variants through."""
    match rd:
        case Failure(error):
            return Failure(fn(error))
        case NotAsked() | Loading() | Success():
            return rd
        case _ as unreachable:
            assert_never(unreachable)


def fold[S, F, R](
    rd: RemoteData[S, F],
    *,
    not_asked: Callable[[], R],
    loading: Callable[[], R],
    success: Callable[[S], R],
    failure: Callable[[F], R],
) -> R:
    """
    Eliminate RemoteData by handling every variant.

    All four handlers are required. A value that is not one of the four
    variants raises ``TypeError``.

    Example:
        label = fold(
            rd,
            not_asked=lambda: "idle",
            loading=lambda: "loading...",
            success=lambda user: user.name,
            failure=lambda err: f"error: {err}",
        )
    """
    match rd:
        case NotAsked():
            return not_asked()
        case Loading():
            return loading()
        case Success(data):
            return success(data)
        case Failure(error):
            return failure(error)
        case _:
            raise TypeError(f"Unknown remote data variant: {rd!r}")


__all__ = ("fold", "map_failure", "map_success")
