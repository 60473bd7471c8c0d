"""
Lifting values into RemoteData.

Bridges kungfu ``Result`` / ``LazyCoroResult`` and Optional values to
``RemoteDataResult``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from ..core import Failure, RemoteDataResult, Success


def from_result[S, F](result: Result[S, F]) -> RemoteDataResult[S, F]:
    """
    Convert a settled kungfu Result.

    Example:
        from_result(Ok(42))          # Success(data=42)
        from_result(Error("boom"))   # Failure(error='boom')
    """
    match result:
        case Ok(value):
            return Success(value)
        case Error(err):
            return Failure(err)
        case _ as unreachable:
            assert_never(unreachable)


async def from_lazy[S, F](interp: LazyCoroResult[S, F]) -> RemoteDataResult[S, F]:
    """Run a LazyCoroResult and convert its outcome."""
    return from_result(await interp())


def from_optional[S, F](
    value: S | None,
    *,
    error: Callable[[], F],
) -> RemoteDataResult[S, F]:
    """
    None becomes Failure(error()).

    NOTE: error is a thunk so the payload is only built when needed.
    """
    if value is None:
        return Failure(error())
    return Success(value)


__all__ = ("from_lazy", "from_optional", "from_result")
