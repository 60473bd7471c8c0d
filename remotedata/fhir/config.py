"""
Client configuration
====================

Inactive mapping and connection settings are plain values handed to the
client, so several independently configured clients can coexist.
"""

from __future__ import annotations

import os
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..transport.http import DEFAULT_TIMEOUT


@dataclass(frozen=True, slots=True)
class InactiveMappingItem:
    """How a resource type is soft-deleted and filtered out of searches."""

    search_field: str
    status_field: str
    value: typing.Any


type InactiveMapping = Mapping[str, InactiveMappingItem]

_ENTERED_IN_ERROR = InactiveMappingItem("status", "status", "entered-in-error")
_NOT_ACTIVE = InactiveMappingItem("active", "active", False)

DEFAULT_INACTIVE_MAPPING: InactiveMapping = MappingProxyType(
    {
        "DocumentReference": _ENTERED_IN_ERROR,
        "Observation": _ENTERED_IN_ERROR,
        "Location": InactiveMappingItem("status", "status", "inactive"),
        "Schedule": _NOT_ACTIVE,
        "Slot": _ENTERED_IN_ERROR,
        "Practitioner": _NOT_ACTIVE,
        "Patient": _NOT_ACTIVE,
        "User": _NOT_ACTIVE,
        "Note": _ENTERED_IN_ERROR,
        "EpisodeOfCare": _ENTERED_IN_ERROR,
    }
)

NO_INACTIVE_MAPPING: InactiveMapping = MappingProxyType({})


def _default_inactive_mapping() -> InactiveMapping:
    return DEFAULT_INACTIVE_MAPPING


def _no_headers() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """
    Settings of one FHIR client.

    Example:
        config = ClientConfig(
            base_url="https://fhir.example.com/",
            inactive_mapping={"Patient": InactiveMappingItem("active", "active", False)},
        )
    """

    base_url: str = ""
    timeout: float = DEFAULT_TIMEOUT
    headers: Mapping[str, str] = field(default_factory=_no_headers)
    inactive_mapping: InactiveMapping = field(default_factory=_default_inactive_mapping)

    def __post_init__(self) -> None:
        if self.timeout <= 0.0:
            raise ValueError("ClientConfig.timeout must be > 0")
        for resource_type, item in self.inactive_mapping.items():
            if not isinstance(item, InactiveMappingItem):
                raise ValueError(f"Inactive mapping for {resource_type} must be an InactiveMappingItem")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """
        Read REMOTEDATA_BASE_URL and REMOTEDATA_TIMEOUT.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        timeout = env.get("REMOTEDATA_TIMEOUT")
        try:
            parsed_timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ValueError(f"REMOTEDATA_TIMEOUT must be a number, got {timeout!r}") from exc
        return cls(base_url=env.get("REMOTEDATA_BASE_URL", ""), timeout=parsed_timeout)


__all__ = (
    "ClientConfig",
    "DEFAULT_INACTIVE_MAPPING",
    "InactiveMapping",
    "InactiveMappingItem",
    "NO_INACTIVE_MAPPING",
)
