"""Tests for the Pager cursor."""

from __future__ import annotations

import pytest
from conftest import FakeService, make_bundle

from remotedata import FHIRClient, Pager, failure, is_success, loading, success

FIRST = make_bundle({"resourceType": "Patient", "id": "1"}, links={"self": "http://fhir.test/Patient?page=1"})
MIDDLE = make_bundle(
    {"resourceType": "Patient", "id": "2"},
    links={
        "self": "http://fhir.test/Patient?page=2",
        "next": "http://fhir.test/Patient?page=3",
        "previous": "http://fhir.test/Patient?page=1",
    },
)
LAST = make_bundle({"resourceType": "Patient", "id": "3"}, links={"previous": "http://fhir.test/Patient?page=2"})


class TestLinks:
    @pytest.mark.asyncio
    async def test_self_only_has_no_navigation(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient", success(FIRST))
        async with Pager(client, "Patient") as pager:
            assert pager.state is loading
            assert not pager.has_next
        assert pager.state == success(FIRST)
        assert not pager.has_next
        assert not pager.has_previous

    @pytest.mark.asyncio
    async def test_next_and_previous(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient", success(MIDDLE))
        async with Pager(client, "Patient") as pager:
            pass
        assert pager.has_next
        assert pager.has_previous

    @pytest.mark.asyncio
    async def test_failure_reports_no_links(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient", failure("down"))
        async with Pager(client, "Patient") as pager:
            pass
        assert not pager.has_next
        assert not pager.has_previous

    def test_not_asked_reports_no_links(self, client: FHIRClient) -> None:
        pager = Pager(client, "Patient")
        assert not pager.has_next
        assert not pager.has_previous


class TestNavigation:
    @pytest.mark.asyncio
    async def test_first_request_carries_page_size(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient", success(FIRST))
        async with Pager(client, "Patient", resources_on_page=20, initial_search_params={"name": "Smith"}):
            pass
        request = fake_service.requests[0]
        assert request.params is not None
        assert request.params["name"] == "Smith"
        assert request.params["_count"] == 20
        assert request.params["active:not"] == [False]

    @pytest.mark.asyncio
    async def test_load_next_follows_literal_url(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient", success(MIDDLE))
        fake_service.route("http://fhir.test/Patient?page=3", success(LAST))
        async with Pager(client, "Patient", initial_page=2) as pager:
            pass

        result = await pager.load_next()
        assert result == success(LAST)
        assert fake_service.requests[-1].url == "http://fhir.test/Patient?page=3"
        assert fake_service.requests[-1].method == "GET"
        assert pager.current_page == 3
        assert pager.state == success(LAST)
        assert not pager.has_next
        assert pager.has_previous

    @pytest.mark.asyncio
    async def test_load_previous(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient", success(MIDDLE))
        fake_service.route("http://fhir.test/Patient?page=1", success(FIRST))
        async with Pager(client, "Patient", initial_page=2) as pager:
            pass

        await pager.load_previous()
        assert pager.current_page == 1
        assert pager.state == success(FIRST)

    @pytest.mark.asyncio
    async def test_load_next_without_link_is_noop(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient", success(FIRST))
        async with Pager(client, "Patient") as pager:
            pass

        assert await pager.load_next() is None
        assert await pager.load_previous() is None
        assert pager.current_page == 1
        assert len(fake_service.requests) == 1

    @pytest.mark.asyncio
    async def test_load_page_merges_params(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient", success(FIRST))
        pager = Pager(client, "Patient", initial_search_params={"name": "Smith", "_sort": "name"})

        await pager.load_page(4, {"_sort": "-birthdate", "_page": 4})
        assert pager.current_page == 4
        assert pager.search_params == {"name": "Smith", "_sort": "-birthdate", "_page": 4}
        params = fake_service.requests[-1].params
        assert params is not None
        assert params["_sort"] == "-birthdate"
        assert params["name"] == "Smith"

    @pytest.mark.asyncio
    async def test_reload_keeps_page_and_counts(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient", success(MIDDLE))
        async with Pager(client, "Patient", initial_page=2) as pager:
            pass

        pager.reload()
        assert pager.state is loading
        await pager.settled()
        assert pager.reloads_count == 1
        assert pager.current_page == 2
        assert len(fake_service.requests) == 2

        await pager.reload_async()
        assert pager.reloads_count == 2
        assert len(fake_service.requests) == 3

    @pytest.mark.asyncio
    async def test_set_search_params_reloads_on_change(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient", success(FIRST))
        pager = Pager(client, "Patient", initial_search_params={"name": "Smith"})

        pager.set_search_params({"name": "Smith"})
        await pager.settled()
        assert fake_service.requests == []

        pager.set_search_params({"name": "Jones"})
        await pager.settled()
        assert len(fake_service.requests) == 1
        assert is_success(pager.state)

    def test_set_replaces_state(self, client: FHIRClient) -> None:
        pager = Pager(client, "Patient")
        pager.set(MIDDLE)
        assert pager.state == success(MIDDLE)
        assert pager.has_next

    def test_rejects_empty_pages(self, client: FHIRClient) -> None:
        with pytest.raises(ValueError):
            Pager(client, "Patient", resources_on_page=0)
