"""
Sequence combinators
====================

Flip structure: many RemoteData values into one.

Precedence, checked in order:
1. every value is Success -> Success of all payloads
2. any Failure            -> Failure of every error, in order
3. any Loading            -> loading
4. otherwise              -> not_asked
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..core import Failure, Loading, NotAsked, RemoteData, Success, loading, not_asked


def _unsettled[F](values: list[RemoteData[object, F]]) -> Failure[list[F]] | Loading | NotAsked:
    errors = [v.error for v in values if isinstance(v, Failure)]
    if errors:
        return Failure(errors)
    if any(isinstance(v, Loading) for v in values):
        return loading
    return not_asked


def sequence[S, F](values: Iterable[RemoteData[S, F]]) -> RemoteData[list[S], list[F]]:
    """
    [RemoteData[S, F]] -> RemoteData[[S], [F]].

    Example:
        sequence([success(1), success(2)])          # Success(data=[1, 2])
        sequence([success(1), failure("a"), loading])  # Failure(error=['a'])
        sequence([])                                # Success(data=[])
    """
    items = list(values)
    data: list[S] = []
    for item in items:
        if not isinstance(item, Success):
            return _unsettled(items)
        data.append(item.data)
    return Success(data)


def sequence_map[K, S, F](values: Mapping[K, RemoteData[S, F]]) -> RemoteData[dict[K, S], list[F]]:
    """
    {K: RemoteData[S, F]} -> RemoteData[{K: S}, [F]].

    Key order of the result follows the input mapping.
    """
    data: dict[K, S] = {}
    for key, item in values.items():
        if not isinstance(item, Success):
            return _unsettled(list(values.values()))
        data[key] = item.data
    return Success(data)


__all__ = ("sequence", "sequence_map")
