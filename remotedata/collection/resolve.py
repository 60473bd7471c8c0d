"""
Resolve combinators
===================

Await many remote calls concurrently, then collapse the outcomes with
``sequence`` / ``sequence_map``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Mapping, Sequence

from ..core import RemoteData, RemoteDataResult
from .sequence import sequence, sequence_map


async def resolve[S, F](
    awaitables: Sequence[Awaitable[RemoteDataResult[S, F]]],
) -> RemoteData[list[S], list[F]]:
    """
    Run all concurrently, succeed only if all succeed.

    Example:
        rd = await resolve([client.get(ref_a), client.get(ref_b)])
        # Success(data=[a, b]) or Failure(error=[...])
    """
    results: list[RemoteDataResult[S, F]] = await asyncio.gather(*awaitables)
    return sequence(results)


async def resolve_map[K, S, F](
    awaitables: Mapping[K, Awaitable[RemoteDataResult[S, F]]],
) -> RemoteData[dict[K, S], list[F]]:
    """Keyed variant of ``resolve``. Result keys follow the input mapping."""
    keys = list(awaitables.keys())
    results: list[RemoteDataResult[S, F]] = await asyncio.gather(*(awaitables[k] for k in keys))
    return sequence_map(dict(zip(keys, results, strict=True)))


__all__ = ("resolve", "resolve_map")
