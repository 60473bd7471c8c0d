"""Partition combinators

Split many RemoteData values into payloads and errors."""

from __future__ import annotations

from collections.abc import Iterable

from ..core import Failure, RemoteData, Success


def partition[S, F](values: Iterable[RemoteData[S, F]]) -> tuple[list[S], list[F]]:
    """Separate into (payloads, errors). NotAsked and Loading are skipped."""
    successes: list[S] = []
    failures: list[F] = []

    for v in values:
        match v:
            case Success(data):
                successes.append(data)
            case Failure(error):
                failures.append(error)
            case _:
                pass

    return successes, failures


__all__ = ("partition",)
