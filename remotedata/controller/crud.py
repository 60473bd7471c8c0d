"""
CRUD controller
===============

Load-or-default, save and soft-delete one resource, exposing the result as
RemoteData.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping, Sequence

from .._types import JSON
from ..core import Failure, RemoteDataResult, failure, loading, success
from ..fhir import FHIRClient, extract_bundle_resources, get_reference, get_resources_of_type, make_reference
from ._state import StateController

EMPTY_RESPONSE_ERROR = {"message": "empty response from server"}


class CRUDController(StateController[JSON, typing.Any]):
    def __init__(
        self,
        client: FHIRClient,
        resource_type: str,
        id: str | None = None,
        *,
        get_or_create: bool = False,
        default_resource: Mapping[str, typing.Any] | None = None,
    ) -> None:
        super().__init__()
        self.client = client
        self.resource_type = resource_type
        self.id = id
        self.get_or_create = get_or_create
        self.default_resource = dict(default_resource or {})

    def make_default_resource(self) -> JSON:
        resource: JSON = {"resourceType": self.resource_type}
        if self.id and self.get_or_create:
            resource["id"] = self.id
        return {**resource, **self.default_resource}

    def mount(self) -> None:
        self._spawn(self.load())

    async def load(self) -> RemoteDataResult[JSON, typing.Any]:
        """
        Fetch by id. A missing id, or a failed fetch with ``get_or_create``,
        gives the default resource.
        """
        if not self.id:
            result: RemoteDataResult[JSON, typing.Any] = success(self.make_default_resource())
            self._set_state(result)
            return result

        self._set_state(loading)
        result = await self.client.get(make_reference(self.resource_type, self.id))
        if isinstance(result, Failure) and self.get_or_create:
            result = success(self.make_default_resource())
        self._set_state(result)
        return result

    async def handle_save(
        self,
        resource: JSON,
        related_resources: Sequence[JSON] | None = None,
    ) -> RemoteDataResult[JSON, typing.Any]:
        """
        Save the resource, or save it with related resources in one
        transaction and pick it back out of the response bundle.
        """
        self._set_state(loading)
        if not related_resources:
            result = await self.client.save(resource)
            self._set_state(result)
            return result

        response = await self.client.save_many([resource, *related_resources], "transaction")
        if isinstance(response, Failure):
            self._set_state(response)
            return response

        saved = get_resources_of_type(extract_bundle_resources(response.data or {}), self.resource_type)
        result = success(saved[0]) if saved else failure(EMPTY_RESPONSE_ERROR)
        self._set_state(result)
        return result

    async def handle_delete(self, resource: JSON) -> RemoteDataResult[JSON, typing.Any]:
        """Soft delete through the client's inactive mapping."""
        self._set_state(loading)
        result = await self.client.delete(get_reference(resource))
        self._set_state(result)
        return result


__all__ = ("CRUDController", "EMPTY_RESPONSE_ERROR")
