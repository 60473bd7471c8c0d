"""
httpx request function
======================

Default ``RequestService`` over ``httpx.AsyncClient``. Non-2xx responses and
transport errors become Failure values through ``lift.call.service``.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping
from types import TracebackType

import httpx
import structlog

from ..core import RemoteDataResult
from ..lift.call import service
from .descriptor import RequestDescriptor

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


class HttpxService:
    """
    Request function backed by httpx.

    Example:
        async with HttpxService("https://fhir.example.com/") as http:
            rd = await http(RequestDescriptor("GET", "/Patient/1"))

    A client passed in is borrowed: ``aclose`` only closes clients this
    instance created.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        client: httpx.AsyncClient | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            headers=dict(headers or {}),
            timeout=timeout,
        )

    async def __call__(self, request: RequestDescriptor) -> RemoteDataResult[typing.Any, typing.Any]:
        return await service(lambda: self._send(request))

    async def _send(self, request: RequestDescriptor) -> typing.Any:
        logger.debug("http_request", method=request.method, url=request.url)
        response = await self._client.request(
            request.method,
            request.url,
            params=dict(request.params) if request.params is not None else None,
            json=request.data,
            headers=dict(request.headers) if request.headers is not None else None,
        )
        logger.debug("http_response", method=request.method, url=request.url, status=response.status_code)
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ("DEFAULT_TIMEOUT", "HttpxService")
