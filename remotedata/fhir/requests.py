"""
Request builders
================

Pure functions from resources and search parameters to
``RequestDescriptor`` values. They never perform I/O.

Usage errors (no id and no search parameters, unmapped soft delete, untyped
reference) raise instead of producing a Failure.
"""

from __future__ import annotations

import typing
from collections.abc import Sequence

import httpx

from .._errors import MissingInactiveMappingError, ResourceTargetError
from .._types import JSON, SearchParams
from ..transport import RequestDescriptor
from .config import NO_INACTIVE_MAPPING, InactiveMapping
from .reference import Reference, require_type

type BundleType = typing.Literal["transaction", "batch"]

# Conditional headers copied into transaction entries
CONDITIONAL_HEADERS = ("If-Modified-Since", "If-Match", "If-None-Match", "If-None-Exist")


def _version_id(resource: JSON) -> str | None:
    return (resource.get("meta") or {}).get("versionId")


def _resource_url(resource: JSON) -> str:
    if resource.get("id"):
        return f"/{resource['resourceType']}/{resource['id']}"
    return f"/{resource['resourceType']}"


def build_query_params(params: SearchParams) -> str:
    """
    URL-encode search parameters. Sequences become repeated keys and
    booleans are lowercased, as httpx sends them.
    """
    return str(httpx.QueryParams(dict(params)))


def inactive_search_params(resource_type: str, inactive_mapping: InactiveMapping) -> dict[str, list[typing.Any]]:
    """Search filter excluding soft-deleted records, ``{}`` for unmapped types."""
    item = inactive_mapping.get(resource_type)
    if item is None:
        return {}
    return {f"{item.search_field}:not": [item.value]}


def create(resource: JSON, search_params: SearchParams | None = None) -> RequestDescriptor:
    return RequestDescriptor("POST", f"/{resource['resourceType']}", params=search_params, data=resource)


def update(resource: JSON, search_params: SearchParams | None = None) -> RequestDescriptor:
    """
    Conditional update when search parameters are given, otherwise update
    by id with If-Match from ``meta.versionId``.
    """
    if search_params:
        return RequestDescriptor("PUT", f"/{resource['resourceType']}", params=search_params, data=resource)

    if resource.get("id"):
        version_id = _version_id(resource)
        return RequestDescriptor(
            "PUT",
            _resource_url(resource),
            data=resource,
            headers={"If-Match": version_id} if version_id else None,
        )

    raise ResourceTargetError(resource.get("resourceType"))


def get(reference: Reference) -> RequestDescriptor:
    return RequestDescriptor("GET", f"/{reference.reference}")


def list_resources(
    resource_type: str,
    search_params: SearchParams | None = None,
    extra_path: str | None = None,
    *,
    inactive_mapping: InactiveMapping = NO_INACTIVE_MAPPING,
) -> RequestDescriptor:
    url = f"/{resource_type}/{extra_path}" if extra_path else f"/{resource_type}"
    params = {**(search_params or {}), **inactive_search_params(resource_type, inactive_mapping)}
    return RequestDescriptor("GET", url, params=params)


def save(resource: JSON) -> RequestDescriptor:
    """PUT when the resource has an id, POST otherwise."""
    version_id = _version_id(resource)
    has_id = bool(resource.get("id"))
    return RequestDescriptor(
        "PUT" if has_id else "POST",
        _resource_url(resource),
        data=resource,
        headers={"If-Match": version_id} if has_id and version_id else None,
    )


def patch(resource: JSON, search_params: SearchParams | None = None) -> RequestDescriptor:
    if search_params:
        return RequestDescriptor("PATCH", f"/{resource['resourceType']}", params=search_params, data=resource)

    if resource.get("id"):
        return RequestDescriptor("PATCH", _resource_url(resource), data=resource)

    raise ResourceTargetError(resource.get("resourceType"))


def mark_as_deleted(reference: Reference, *, inactive_mapping: InactiveMapping) -> RequestDescriptor:
    """Soft delete: PATCH the mapped status field to its inactive value."""
    resource_type, id = require_type(reference)
    item = inactive_mapping.get(resource_type)
    if item is None:
        raise MissingInactiveMappingError(resource_type)
    return RequestDescriptor("PATCH", f"/{resource_type}/{id}", data={item.status_field: item.value})


def force_delete(resource_type: str, id_or_search_params: str | SearchParams) -> RequestDescriptor:
    if isinstance(id_or_search_params, str):
        return RequestDescriptor("DELETE", f"/{resource_type}/{id_or_search_params}")
    return RequestDescriptor("DELETE", f"/{resource_type}", params=id_or_search_params)


def get_concepts(value_set_id: str, search_params: SearchParams | None = None) -> RequestDescriptor:
    return RequestDescriptor("GET", f"/ValueSet/{value_set_id}/$expand", params=dict(search_params or {}))


def _header_key(header: str) -> str:
    # If-None-Exist -> ifNoneExist
    return (header[0].lower() + header[1:]).replace("-", "")


def transform_to_bundle_entry(request: RequestDescriptor) -> JSON | None:
    """
    Encode a request as a transaction/batch entry.

    Query parameters move into the entry URL and conditional headers into
    camel-cased entry request fields. Returns None without method or URL.
    """
    if not request.method or not request.url:
        return None

    url = request.url
    if request.params:
        url = f"{url}?{build_query_params(request.params)}"
    entry_request: JSON = {"method": request.method, "url": url}

    headers = request.headers or {}
    for header in CONDITIONAL_HEADERS:
        value = headers.get(header)
        if value:
            entry_request[_header_key(header)] = (
                build_query_params(value) if isinstance(value, dict) else value
            )

    entry: JSON = {"request": entry_request}
    if request.data:
        entry = {"resource": request.data, **entry}
    return entry


def bundle(requests: Sequence[RequestDescriptor], bundle_type: BundleType = "transaction") -> RequestDescriptor:
    """POST of a transaction/batch bundle with one entry per request."""
    entries = [entry for entry in map(transform_to_bundle_entry, requests) if entry is not None]
    return RequestDescriptor(
        "POST",
        "/",
        data={"resourceType": "Bundle", "type": bundle_type, "entry": entries},
    )


def save_many(resources: Sequence[JSON], bundle_type: BundleType = "transaction") -> RequestDescriptor:
    """Bundle of ``save`` requests, If-Match carried as ``ifMatch``."""
    return bundle([save(resource) for resource in resources], bundle_type)


__all__ = (
    "BundleType",
    "CONDITIONAL_HEADERS",
    "build_query_params",
    "bundle",
    "create",
    "force_delete",
    "get",
    "get_concepts",
    "inactive_search_params",
    "list_resources",
    "mark_as_deleted",
    "patch",
    "save",
    "save_many",
    "transform_to_bundle_entry",
    "update",
)
