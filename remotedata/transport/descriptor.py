"""
Request descriptors
===================

The only I/O seam of the library: a request function receives a
``RequestDescriptor`` and answers with a ``RemoteDataResult``. Nothing else in
the package opens a connection.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass

from ..core import RemoteDataResult

type Method = typing.Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Method, URL and optional query, body and headers of one request."""

    method: Method
    url: str
    params: Mapping[str, typing.Any] | None = None
    data: typing.Any = None
    headers: Mapping[str, str] | None = None


# RequestService = injected transport
type RequestService[S, F] = Callable[[RequestDescriptor], Awaitable[RemoteDataResult[S, F]]]


__all__ = ("Method", "RequestDescriptor", "RequestService")
