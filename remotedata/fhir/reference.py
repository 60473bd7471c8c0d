"""
References and resources
========================

A value pointing at a resource is either a ``Reference`` (type and id, no
payload) or a ``Resource`` (the full payload). The variant is chosen when the
value is built and carried in ``kind``, never guessed from the fields present.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass
from typing import ClassVar, Literal, TypeGuard

from .._errors import InvalidReferenceError
from .._types import JSON


@dataclass(frozen=True, slots=True)
class Reference:
    """Pointer of the form ``<resourceType>/<id>``."""

    reference: str
    display: str | None = None
    kind: ClassVar[Literal["reference"]] = "reference"

    @property
    def resource_type(self) -> str | None:
        return parse_reference(self)[0]

    @property
    def id(self) -> str | None:
        return parse_reference(self)[1]

    def to_json(self) -> JSON:
        body: JSON = {"reference": self.reference}
        if self.display:
            body["display"] = self.display
        return body

    @classmethod
    def from_json(cls, body: JSON) -> Reference:
        return cls(body["reference"], body.get("display"))


@dataclass(frozen=True, slots=True)
class Resource:
    """Full resource payload as returned by the server."""

    data: JSON
    kind: ClassVar[Literal["resource"]] = "resource"

    @property
    def resource_type(self) -> str:
        return self.data["resourceType"]

    @property
    def id(self) -> str | None:
        return self.data.get("id")

    def reference(self, display: str | None = None) -> Reference:
        return get_reference(self.data, display)


type Target = Reference | Resource


def make_reference(resource_type: str, id: str, display: str | None = None) -> Reference:
    return Reference(f"{resource_type}/{id}", display)


def get_reference(resource: JSON, display: str | None = None) -> Reference:
    """Reference to a resource payload that already has an id."""
    return make_reference(resource["resourceType"], resource["id"], display)


def parse_reference(reference: Reference | str) -> tuple[str | None, str | None]:
    """
    Split into (resource type, id).

    Empty references give (None, None).
    """
    raw = reference.reference if isinstance(reference, Reference) else reference
    if not raw:
        return None, None
    resource_type, _, id = raw.partition("/")
    return resource_type or None, id or None


def require_type(reference: Reference) -> tuple[str, str | None]:
    """Like ``parse_reference`` but a missing type raises InvalidReferenceError."""
    resource_type, id = parse_reference(reference)
    if resource_type is None:
        raise InvalidReferenceError(reference)
    return resource_type, id


def is_reference(value: typing.Any) -> TypeGuard[Reference]:
    return isinstance(value, Reference)


def is_resource(value: typing.Any) -> TypeGuard[Resource]:
    return isinstance(value, Resource)


def to_reference(target: Target) -> Reference:
    match target:
        case Reference():
            return target
        case Resource():
            return target.reference()
        case _:
            raise TypeError(f"Expected Reference or Resource, got {target!r}")


__all__ = (
    "Reference",
    "Resource",
    "Target",
    "get_reference",
    "is_reference",
    "is_resource",
    "make_reference",
    "parse_reference",
    "require_type",
    "to_reference",
)
