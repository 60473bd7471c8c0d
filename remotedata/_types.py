"""
Core type definitions for remotedata.

Aliases shared across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Mapping

from .core import RemoteData, RemoteDataResult

# ============================================================================
# Type aliases
# ============================================================================

# Operation = zero-arg async function producing one attempt's outcome
type Operation[S, F] = Callable[[], Awaitable[RemoteDataResult[S, F]]]

# Updater = optimistic local edit of a Success payload
type Updater[S] = Callable[[S], S]

# Listener = observer of controller state
type Listener[S, F] = Callable[[RemoteData[S, F]], None]

# Unsubscribe = handle returned by subscribe()
type Unsubscribe = Callable[[], None]

# ErrorNormalizer = exception -> Failure payload
type ErrorNormalizer[F] = Callable[[Exception], F]

# JSON payloads exchanged with a resource server
type JSON = dict[str, typing.Any]

# SearchParams = query parameters; sequences are sent as repeated keys
type SearchParams = Mapping[str, typing.Any]

__all__ = (
    "ErrorNormalizer",
    "JSON",
    "Listener",
    "Operation",
    "SearchParams",
    "Unsubscribe",
    "Updater",
)
