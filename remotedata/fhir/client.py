"""
FHIR client
===========

Resource operations over an injected request function. Every method
performs exactly one request (``get_all`` one per page) and returns a
``RemoteDataResult``; only usage errors raise.
"""

from __future__ import annotations

import typing
from collections.abc import Sequence

import structlog

from .._types import JSON, SearchParams
from ..core import Failure, RemoteDataResult, failure, success
from ..lift.call import attempt
from ..transport import HttpxService, RequestDescriptor, RequestService
from . import requests
from .bundle import extract_bundle_resources, find_link, get_resources_of_type
from .config import ClientConfig
from .reference import Reference, Target, require_type, to_reference

logger = structlog.get_logger(__name__)

NO_RESOURCES_FOUND = "no_resources_found"
TOO_MANY_RESOURCES_FOUND = "too_many_resources_found"


class FHIRClient:
    """
    Example:
        client = FHIRClient(HttpxService("https://fhir.example.com/"))
        rd = await client.find("Patient", {"identifier": "mrn|42"})
        match rd:
            case Success(patient): ...
            case Failure({"error": "no_resources_found"}): ...
            case Failure(error): ...
    """

    def __init__(self, service: RequestService[typing.Any, typing.Any], *, config: ClientConfig | None = None) -> None:
        self.service = service
        self.config = config or ClientConfig()

    @classmethod
    def from_config(cls, config: ClientConfig) -> FHIRClient:
        """Client over a fresh ``HttpxService`` built from ``config``."""
        if not config.base_url:
            raise ValueError("ClientConfig.base_url is required to build an HttpxService")
        http = HttpxService(config.base_url, headers=config.headers, timeout=config.timeout)
        return cls(http, config=config)

    async def apply(self, request: RequestDescriptor) -> RemoteDataResult[typing.Any, typing.Any]:
        """Send any descriptor. A request function that raises still yields a Failure."""
        return await attempt(lambda: self.service(request))

    async def apply_many(
        self,
        requests_: Sequence[RequestDescriptor],
        bundle_type: requests.BundleType = "transaction",
    ) -> RemoteDataResult[JSON, typing.Any]:
        return await self.apply(requests.bundle(requests_, bundle_type))

    async def create(self, resource: JSON, search_params: SearchParams | None = None) -> RemoteDataResult[JSON, typing.Any]:
        return await self.apply(requests.create(resource, search_params))

    async def update(self, resource: JSON, search_params: SearchParams | None = None) -> RemoteDataResult[JSON, typing.Any]:
        return await self.apply(requests.update(resource, search_params))

    async def get(self, reference: Reference) -> RemoteDataResult[JSON, typing.Any]:
        return await self.apply(requests.get(reference))

    async def get_many(
        self,
        resource_type: str,
        search_params: SearchParams | None = None,
        extra_path: str | None = None,
    ) -> RemoteDataResult[JSON, typing.Any]:
        """Search; soft-deleted records are filtered out per the inactive mapping."""
        request = requests.list_resources(
            resource_type,
            search_params,
            extra_path,
            inactive_mapping=self.config.inactive_mapping,
        )
        return await self.apply(request)

    async def get_all(
        self,
        resource_type: str,
        search_params: SearchParams | None = None,
        extra_path: str | None = None,
    ) -> RemoteDataResult[JSON, typing.Any]:
        """
        Follow ``next`` links until exhausted.

        The result is the last page's bundle with the entries of every page
        concatenated. The first failing page is returned as is.
        """
        response = await self.get_many(resource_type, search_params, extra_path)
        if isinstance(response, Failure):
            return response

        result = response.data
        pages = 1
        while (next_url := find_link(result, "next")) is not None:
            page = await self.apply(RequestDescriptor("GET", next_url))
            if isinstance(page, Failure):
                return page
            result = {**page.data, "entry": [*(result.get("entry") or []), *(page.data.get("entry") or [])]}
            pages += 1

        logger.debug("fhir_get_all_done", resource_type=resource_type, pages=pages)
        return success(result)

    async def find(
        self,
        resource_type: str,
        search_params: SearchParams | None = None,
        extra_path: str | None = None,
    ) -> RemoteDataResult[JSON, typing.Any]:
        """Exactly one match, else a Failure with a machine-readable ``error`` code."""
        response = await self.get_many(resource_type, search_params, extra_path)
        if isinstance(response, Failure):
            return response

        resources = get_resources_of_type(extract_bundle_resources(response.data), resource_type)
        if len(resources) == 1:
            return success(resources[0])
        if not resources:
            return failure({"error": NO_RESOURCES_FOUND, "error_description": "No resources found"})
        return failure({"error": TOO_MANY_RESOURCES_FOUND, "error_description": "Too many resources found"})

    async def save(self, resource: JSON) -> RemoteDataResult[JSON, typing.Any]:
        return await self.apply(requests.save(resource))

    async def save_many(
        self,
        resources: Sequence[JSON],
        bundle_type: requests.BundleType = "transaction",
    ) -> RemoteDataResult[JSON, typing.Any]:
        return await self.apply(requests.save_many(resources, bundle_type))

    async def patch(self, resource: JSON, search_params: SearchParams | None = None) -> RemoteDataResult[JSON, typing.Any]:
        return await self.apply(requests.patch(resource, search_params))

    async def delete(self, target: Target) -> RemoteDataResult[JSON, typing.Any]:
        """Soft delete through the configured inactive mapping."""
        request = requests.mark_as_deleted(to_reference(target), inactive_mapping=self.config.inactive_mapping)
        return await self.apply(request)

    async def force_delete(self, target: Target | str, search_params: SearchParams | None = None) -> RemoteDataResult[JSON, typing.Any]:
        """
        Hard delete. Pass a Reference/Resource, or a resource type with
        search parameters for a conditional delete.
        """
        if isinstance(target, str):
            if search_params is None:
                raise ValueError("force_delete by resource type needs search parameters")
            return await self.apply(requests.force_delete(target, search_params))

        resource_type, id = require_type(to_reference(target))
        if id is None:
            raise ValueError(f"force_delete needs an id, got {target!r}")
        return await self.apply(requests.force_delete(resource_type, id))

    async def get_concepts(self, value_set_id: str, search_params: SearchParams | None = None) -> RemoteDataResult[JSON, typing.Any]:
        return await self.apply(requests.get_concepts(value_set_id, search_params))


__all__ = ("FHIRClient", "NO_RESOURCES_FOUND", "TOO_MANY_RESOURCES_FOUND")
