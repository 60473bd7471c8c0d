"""
Lift helpers with semantic namespaces.

Architecture:
- up.*    - values and kungfu Results into RemoteData
- call.*  - exception-raising calls into RemoteDataResult
- down.*  - RemoteData out into values and kungfu Results

Examples:
    from remotedata import lift as L

    rd = await L.call(fetch_patient, "1")
    rd = L.up.from_result(Ok(42))
    patient = L.down.ensure(rd)
"""

from __future__ import annotations

from . import call as call_ns
from . import down as down_ns
from . import up as up_ns

from .call import (
    UNKNOWN_ERROR,
    attempt,
    call,
    catching_async,
    lifted,
    normalize_error,
    service,
)
from .down import ensure, investigate, to_result, with_default
from .up import from_lazy, from_optional, from_result

# Namespace aliases: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "call_ns",
    "down",
    "up",
    # Call
    "UNKNOWN_ERROR",
    "attempt",
    "call",
    "catching_async",
    "lifted",
    "normalize_error",
    "service",
    # Up
    "from_lazy",
    "from_optional",
    "from_result",
    # Down
    "ensure",
    "investigate",
    "to_result",
    "with_default",
)
