"""
Pager
=====

Cursor over paginated search results. Tracks the page number, the search
parameters and the latest bundle; ``next`` / ``previous`` links of the
latest Success drive navigation.
"""

from __future__ import annotations

import typing

from .._types import JSON, SearchParams
from ..core import RemoteDataResult, Success, loading, success
from ..fhir import FHIRClient, find_link
from ..transport import RequestDescriptor
from ._state import StateController

DEFAULT_RESOURCES_ON_PAGE = 15


class Pager(StateController[JSON, typing.Any]):
    """
    Example:
        pager = Pager(client, "Patient", resources_on_page=20, initial_search_params={"name": "Smith"})
        async with pager:
            pass
        if pager.has_next:
            await pager.load_next()
        pager.current_page  # 2
    """

    def __init__(
        self,
        client: FHIRClient,
        resource_type: str,
        *,
        resources_on_page: int = DEFAULT_RESOURCES_ON_PAGE,
        initial_search_params: SearchParams | None = None,
        initial_page: int = 1,
    ) -> None:
        if resources_on_page < 1:
            raise ValueError("resources_on_page must be >= 1")
        super().__init__()
        self.client = client
        self.resource_type = resource_type
        self.resources_on_page = resources_on_page
        self.search_params: dict[str, typing.Any] = dict(initial_search_params or {})
        self.current_page = initial_page
        self.reloads_count = 0

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def _link(self, relation: str) -> str | None:
        if isinstance(self._state, Success):
            return find_link(self._state.data, relation)
        return None

    @property
    def next_url(self) -> str | None:
        return self._link("next")

    @property
    def previous_url(self) -> str | None:
        return self._link("previous")

    @property
    def has_next(self) -> bool:
        return self.next_url is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_url is not None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def _fetch(self, params: SearchParams) -> RemoteDataResult[JSON, typing.Any]:
        response = await self.client.get_many(
            self.resource_type,
            {**params, "_count": self.resources_on_page},
        )
        self._set_state(response)
        return response

    async def _load_resources(self, params: SearchParams) -> RemoteDataResult[JSON, typing.Any]:
        self._set_state(loading)
        return await self._fetch(params)

    def _schedule(self, params: SearchParams) -> None:
        self._set_state(loading)
        self._spawn(self._fetch(params))

    async def _follow(self, url: str) -> RemoteDataResult[JSON, typing.Any]:
        response = await self.client.apply(RequestDescriptor("GET", url))
        self._set_state(response)
        return response

    def mount(self) -> None:
        """First load with the initial search parameters."""
        self._schedule(self.search_params)

    async def load_next(self) -> RemoteDataResult[JSON, typing.Any] | None:
        """Request the literal ``next`` URL; no-op without one."""
        url = self.next_url
        if url is None:
            return None
        self.current_page += 1
        return await self._follow(url)

    async def load_previous(self) -> RemoteDataResult[JSON, typing.Any] | None:
        """Request the literal ``previous`` URL; no-op without one."""
        url = self.previous_url
        if url is None:
            return None
        self.current_page -= 1
        return await self._follow(url)

    async def load_page(self, page: int, params: SearchParams | None = None) -> RemoteDataResult[JSON, typing.Any]:
        """Fresh search for ``page`` with ``params`` merged over the current ones."""
        self.current_page = page
        self.search_params = {**self.search_params, **(params or {})}
        return await self._load_resources(self.search_params)

    def reload(self) -> None:
        """Re-run the current search in the background. Page is unchanged."""
        self.reloads_count += 1
        self._schedule(self.search_params)

    async def reload_async(self) -> RemoteDataResult[JSON, typing.Any]:
        self.reloads_count += 1
        return await self._load_resources(self.search_params)

    def set(self, bundle: JSON) -> None:
        """Replace the state with a caller-supplied bundle."""
        self._set_state(success(bundle))

    def set_search_params(self, params: SearchParams) -> None:
        """Store new search parameters and search again if they changed."""
        if dict(params) == self.search_params:
            return
        self.search_params = dict(params)
        self._schedule(self.search_params)


__all__ = ("DEFAULT_RESOURCES_ON_PAGE", "Pager")
