"""Tests for the request wrapper and lift conversions."""

from __future__ import annotations

import asyncio

import httpx
import pytest
from kungfu import Error, Ok, Result

from remotedata import (
    UNKNOWN_ERROR,
    NotSettledError,
    UnwrapError,
    attempt,
    call,
    catching_async,
    ensure,
    failure,
    investigate,
    lifted,
    loading,
    normalize_error,
    not_asked,
    service,
    success,
    to_result,
    with_default,
)
from remotedata import lift as L


def _unpack(result: Result[object, object]) -> tuple[str, object]:
    match result:
        case Ok(value):
            return "ok", value
        case Error(err):
            return "error", err
    raise AssertionError(result)


async def _value() -> int:
    return 42


async def _boom() -> int:
    raise RuntimeError("boom")


def _status_error(status: int, **kwargs: object) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "http://fhir.test/Patient/1")
    response = httpx.Response(status, request=request, **kwargs)  # type: ignore[arg-type]
    return httpx.HTTPStatusError("bad status", request=request, response=response)


class TestNormalizeError:
    def test_json_body_from_response(self) -> None:
        exc = _status_error(404, json={"resourceType": "OperationOutcome"})
        assert normalize_error(exc) == {"resourceType": "OperationOutcome"}

    def test_text_body_when_not_json(self) -> None:
        exc = _status_error(500, text="gateway down")
        assert normalize_error(exc) == "gateway down"

    def test_message_fallback(self) -> None:
        assert normalize_error(ValueError("bad")) == "bad"

    def test_unknown_error_marker(self) -> None:
        assert normalize_error(ValueError()) == UNKNOWN_ERROR


class TestService:
    @pytest.mark.asyncio
    async def test_resolving_operation(self) -> None:
        assert await service(_value) == success(42)

    @pytest.mark.asyncio
    async def test_rejecting_operation_becomes_failure(self) -> None:
        assert await service(_boom) == failure("boom")

    @pytest.mark.asyncio
    async def test_custom_error_normalizer(self) -> None:
        rd = await service(_boom, on_error=lambda exc: type(exc).__name__)
        assert rd == failure("RuntimeError")

    @pytest.mark.asyncio
    async def test_broken_normalizer_falls_back(self) -> None:
        def broken(exc: Exception) -> str:
            raise KeyError("nope")

        assert await service(_boom, on_error=broken) == failure("boom")

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self) -> None:
        async def cancelled() -> int:
            raise asyncio.CancelledError

        with pytest.raises(asyncio.CancelledError):
            await service(cancelled)

    @pytest.mark.asyncio
    async def test_performs_exactly_one_call(self) -> None:
        calls = 0

        async def counted() -> int:
            nonlocal calls
            calls += 1
            return calls

        await service(counted)
        assert calls == 1

    @pytest.mark.asyncio
    async def test_attempt_passes_through_results(self) -> None:
        async def op() -> object:
            return failure("protocol")

        assert await attempt(op) == failure("protocol")

    @pytest.mark.asyncio
    async def test_attempt_catches_raising_operation(self) -> None:
        async def op() -> object:
            raise ConnectionError("refused")

        assert await attempt(op) == failure("refused")

    @pytest.mark.asyncio
    async def test_call_and_lifted(self) -> None:
        async def add(a: int, b: int) -> int:
            return a + b

        assert await call(add, 1, 2) == success(3)
        assert await lifted(add)(2, 3) == success(5)
        assert await lifted(_boom)() == failure("boom")

    @pytest.mark.asyncio
    async def test_catching_async_is_lazy(self) -> None:
        calls = 0

        async def counted() -> int:
            nonlocal calls
            calls += 1
            return 7

        lazy = catching_async(counted)
        assert calls == 0
        assert _unpack(await lazy()) == ("ok", 7)
        assert _unpack(await catching_async(_boom)()) == ("error", "boom")


class TestUp:
    def test_from_result(self) -> None:
        assert L.up.from_result(Ok(42)) == success(42)
        assert L.up.from_result(Error("boom")) == failure("boom")

    def test_from_optional(self) -> None:
        assert L.up.from_optional(1, error=lambda: "missing") == success(1)
        assert L.up.from_optional(None, error=lambda: "missing") == failure("missing")

    @pytest.mark.asyncio
    async def test_from_lazy(self) -> None:
        assert await L.up.from_lazy(catching_async(_value)) == success(42)


class TestDown:
    def test_to_result(self) -> None:
        assert _unpack(to_result(success(1))) == ("ok", 1)
        assert _unpack(to_result(failure("e"))) == ("error", "e")

    @pytest.mark.parametrize("rd", [not_asked, loading])
    def test_to_result_pending_raises(self, rd: object) -> None:
        with pytest.raises(NotSettledError) as exc_info:
            to_result(rd)  # type: ignore[arg-type]
        assert exc_info.value.value is rd

    def test_ensure(self) -> None:
        assert ensure(success(5)) == 5
        with pytest.raises(UnwrapError):
            ensure(failure("e"))

    def test_investigate(self) -> None:
        assert investigate(failure("e")) == "e"
        with pytest.raises(UnwrapError):
            investigate(success(1))

    def test_with_default(self) -> None:
        assert with_default(success(1), 0) == 1
        assert with_default(loading, 0) == 0
