"""
Request wrapper
===============

The boundary where exceptions become data. Every function here performs
exactly one awaited call and turns any raised ``Exception`` into a Failure,
so an expected network or protocol error never escapes as an exception.

``asyncio.CancelledError`` is a ``BaseException`` and is not caught.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable
from functools import wraps

import httpx
import structlog
from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import ErrorNormalizer, Operation
from ..core import Failure, RemoteDataResult, Success

logger = structlog.get_logger(__name__)

UNKNOWN_ERROR = "unknown error"


def _response_body(response: typing.Any) -> typing.Any:
    if isinstance(response, httpx.Response):
        try:
            return response.json()
        except ValueError:
            return response.text or None
    return getattr(response, "data", None)


def normalize_error(exc: Exception) -> typing.Any:
    """
    Best-effort Failure payload for an exception.

    Order: transport response body (JSON, else text), then the exception
    message, then ``UNKNOWN_ERROR``.
    """
    response = getattr(exc, "response", None)
    if response is not None:
        body = _response_body(response)
        if body is not None:
            return body
    return str(exc) or UNKNOWN_ERROR


def _to_failure_payload[F](exc: Exception, on_error: ErrorNormalizer[F]) -> F | typing.Any:
    try:
        error = on_error(exc)
    except Exception:
        logger.exception("error_normalizer_failed", exc_type=type(exc).__name__)
        return normalize_error(exc)
    logger.warning("remote_call_failed", exc_type=type(exc).__name__, error=error)
    return error


async def service[S, F](
    thunk: Callable[[], Awaitable[S]],
    *,
    on_error: ErrorNormalizer[F] = normalize_error,  # type: ignore[assignment]
) -> RemoteDataResult[S, F]:
    """
    Await ``thunk()`` once and wrap the outcome.

    Example:
        rd = await service(lambda: client.get_json("/Patient/1"))
        match rd:
            case Success(patient): ...
            case Failure(error): ...
    """
    try:
        value = await thunk()
    except Exception as exc:
        return Failure(_to_failure_payload(exc, on_error))
    return Success(value)


async def attempt[S, F](
    operation: Operation[S, F],
    *,
    on_error: ErrorNormalizer[F] = normalize_error,  # type: ignore[assignment]
) -> RemoteDataResult[S, F]:
    """
    Await an operation that already returns RemoteDataResult.

    Same protection as ``service``: if the operation raises instead of
    returning a Failure, the exception is normalized.
    """
    try:
        return await operation()
    except Exception as exc:
        return Failure(_to_failure_payload(exc, on_error))


async def call[S, **P](
    func: Callable[P, Awaitable[S]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> RemoteDataResult[S, typing.Any]:
    """
    Call an exception-raising async function and wrap the outcome.

    Shorthand for ``service(lambda: func(*args, **kwargs))``.
    """
    return await service(lambda: func(*args, **kwargs))


def lifted[S, **P](
    func: Callable[P, Awaitable[S]],
) -> Callable[P, Awaitable[RemoteDataResult[S, typing.Any]]]:
    """
    Decorator: make an exception-raising coroutine function return RemoteDataResult.

    Example:
        @lifted
        async def fetch_patient(patient_id: str) -> dict:
            response = await http.get(f"/Patient/{patient_id}")
            response.raise_for_status()
            return response.json()

        rd = await fetch_patient("1")  # Success(...) or Failure(...)
    """
    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> RemoteDataResult[S, typing.Any]:
        return await service(lambda: func(*args, **kwargs))

    return wrapper


def catching_async[S, F](
    thunk: Callable[[], Awaitable[S]],
    *,
    on_error: ErrorNormalizer[F] = normalize_error,  # type: ignore[assignment]
) -> LazyCoroResult[S, F]:
    """
    Lazy kungfu variant of ``service`` for composing with Result pipelines.

    Nothing runs until the returned LazyCoroResult is awaited.
    """
    async def run() -> Result[S, F]:
        try:
            return Ok(await thunk())
        except Exception as exc:
            return Error(_to_failure_payload(exc, on_error))

    return LazyCoroResult(run)


__all__ = (
    "UNKNOWN_ERROR",
    "attempt",
    "call",
    "catching_async",
    "lifted",
    "normalize_error",
    "service",
)
