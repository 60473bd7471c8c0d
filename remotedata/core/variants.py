"""
Variants
========

The four states of a remote operation. Each state is a frozen dataclass with
a literal ``status`` tag, so values can be matched structurally::

    match rd:
        case NotAsked():
            ...
        case Loading():
            ...
        case Success(data):
            ...
        case Failure(error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal


@dataclass(frozen=True, slots=True)
class NotAsked:
    """No request has been initiated yet."""

    status: ClassVar[Literal["NotAsked"]] = "NotAsked"

    def __repr__(self) -> str:
        return "NotAsked"


@dataclass(frozen=True, slots=True)
class Loading:
    """A request is in flight."""

    status: ClassVar[Literal["Loading"]] = "Loading"

    def __repr__(self) -> str:
        return "Loading"


@dataclass(frozen=True, slots=True)
class Success[S]:
    """Request completed, value available."""

    data: S
    status: ClassVar[Literal["Success"]] = "Success"


@dataclass(frozen=True, slots=True)
class Failure[F]:
    """Request completed, error available."""

    error: F
    status: ClassVar[Literal["Failure"]] = "Failure"


type RemoteData[S, F] = NotAsked | Loading | Success[S] | Failure[F]

# Outcome of one completed attempt, never pending.
type RemoteDataResult[S, F] = Success[S] | Failure[F]

type Status = Literal["NotAsked", "Loading", "Success", "Failure"]

not_asked: NotAsked = NotAsked()
loading: Loading = Loading()


def success[S](data: S) -> Success[S]:
    """Wrap ``data`` as a Success."""
    return Success(data)


def failure[F](error: F) -> Failure[F]:
    """Wrap ``error`` as a Failure."""
    return Failure(error)


__all__ = (
    "Failure",
    "Loading",
    "NotAsked",
    "RemoteData",
    "RemoteDataResult",
    "Status",
    "Success",
    "failure",
    "loading",
    "not_asked",
    "success",
)
