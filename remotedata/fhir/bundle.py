"""
Bundle helpers
==============

Extraction of entries from search/transaction bundles and pagination links.
"""

from __future__ import annotations

from collections.abc import Mapping

from .._types import JSON
from .reference import Reference, parse_reference

type ResourcesMap = Mapping[str, list[JSON]]


def extract_bundle_resources(bundle: JSON) -> dict[str, list[JSON]]:
    """
    Group entry resources by ``resourceType``, keeping entry order.

    Query the result with ``get_resources_of_type`` so unseen types read
    as empty lists.
    """
    by_type: dict[str, list[JSON]] = {}
    for entry in bundle.get("entry") or []:
        resource = entry.get("resource")
        if resource is None:
            continue
        by_type.setdefault(resource["resourceType"], []).append(resource)
    return by_type


def get_resources_of_type(resources: ResourcesMap, resource_type: str) -> list[JSON]:
    """Resources of one type; ``[]`` for a type never seen."""
    return list(resources.get(resource_type, []))


def get_included_resource(resources: ResourcesMap, reference: Reference) -> JSON | None:
    """Resource the reference points at, or None."""
    resource_type, id = parse_reference(reference)
    if resource_type is None:
        return None
    for resource in get_resources_of_type(resources, resource_type):
        if resource.get("id") == id:
            return resource
    return None


def get_main_resources(bundle: JSON, resource_type: str) -> list[JSON]:
    """Entry resources of ``resource_type`` straight from the bundle."""
    return [
        entry["resource"]
        for entry in bundle.get("entry") or []
        if (entry.get("resource") or {}).get("resourceType") == resource_type
    ]


def find_link(bundle: JSON, relation: str) -> str | None:
    """URL of the link with the given relation (next, previous, first, last, self)."""
    for link in bundle.get("link") or []:
        if link.get("relation") == relation:
            return link.get("url")
    return None


__all__ = (
    "ResourcesMap",
    "extract_bundle_resources",
    "find_link",
    "get_included_resource",
    "get_main_resources",
    "get_resources_of_type",
)
