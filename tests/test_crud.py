"""Tests for CRUDController flows."""

from __future__ import annotations

import pytest
from conftest import FakeService, make_bundle

from remotedata import CRUDController, FHIRClient, failure, loading, success
from remotedata.controller import EMPTY_RESPONSE_ERROR

PATIENT = {"resourceType": "Patient", "id": "1", "active": True}


class TestLoad:
    @pytest.mark.asyncio
    async def test_load_by_id(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient/1", success(PATIENT))
        controller = CRUDController(client, "Patient", "1")
        assert await controller.load() == success(PATIENT)
        assert controller.state == success(PATIENT)

    @pytest.mark.asyncio
    async def test_context_manager_loads(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient/1", success(PATIENT))
        async with CRUDController(client, "Patient", "1") as controller:
            pass
        assert controller.state == success(PATIENT)

    @pytest.mark.asyncio
    async def test_missing_resource_without_get_or_create(self, client: FHIRClient) -> None:
        controller = CRUDController(client, "Patient", "404")
        await controller.load()
        assert controller.state == failure({"error": "not_found", "url": "/Patient/404"})

    @pytest.mark.asyncio
    async def test_get_or_create_falls_back_to_default(self, client: FHIRClient) -> None:
        controller = CRUDController(
            client,
            "Patient",
            "404",
            get_or_create=True,
            default_resource={"active": True},
        )
        await controller.load()
        assert controller.state == success({"resourceType": "Patient", "id": "404", "active": True})

    @pytest.mark.asyncio
    async def test_no_id_gives_default_without_request(self, fake_service: FakeService, client: FHIRClient) -> None:
        controller = CRUDController(client, "Patient", default_resource={"gender": "unknown"})
        await controller.load()
        assert controller.state == success({"resourceType": "Patient", "gender": "unknown"})
        assert fake_service.requests == []


class TestSave:
    @pytest.mark.asyncio
    async def test_save_single(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient/1", success(PATIENT))
        controller = CRUDController(client, "Patient", "1")
        seen: list[object] = []
        controller.subscribe(seen.append)

        assert await controller.handle_save(PATIENT) == success(PATIENT)
        assert seen == [loading, success(PATIENT)]
        assert fake_service.requests[-1].method == "PUT"

    @pytest.mark.asyncio
    async def test_save_with_related_picks_resource_from_bundle(
        self, fake_service: FakeService, client: FHIRClient
    ) -> None:
        encounter = {"resourceType": "Encounter", "id": "e1"}
        fake_service.route("/", success(make_bundle(encounter, PATIENT)))
        controller = CRUDController(client, "Patient", "1")

        assert await controller.handle_save(PATIENT, [encounter]) == success(PATIENT)
        body = fake_service.requests[-1].data
        assert body["type"] == "transaction"
        assert [e["request"]["url"] for e in body["entry"]] == ["/Patient/1", "/Encounter/e1"]

    @pytest.mark.asyncio
    async def test_save_with_related_empty_bundle(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/", success(make_bundle()))
        controller = CRUDController(client, "Patient", "1")

        result = await controller.handle_save(PATIENT, [{"resourceType": "Encounter"}])
        assert result == failure(EMPTY_RESPONSE_ERROR)
        assert controller.state == failure(EMPTY_RESPONSE_ERROR)

    @pytest.mark.asyncio
    async def test_save_with_related_transport_failure(self, client: FHIRClient) -> None:
        controller = CRUDController(client, "Patient", "1")
        result = await controller.handle_save(PATIENT, [{"resourceType": "Encounter"}])
        assert result == failure({"error": "not_found", "url": "/"})


class TestDelete:
    @pytest.mark.asyncio
    async def test_soft_delete(self, fake_service: FakeService, client: FHIRClient) -> None:
        fake_service.route("/Patient/1", success({**PATIENT, "active": False}))
        controller = CRUDController(client, "Patient", "1")

        await controller.handle_delete(PATIENT)
        request = fake_service.requests[-1]
        assert request.method == "PATCH"
        assert request.data == {"active": False}
        assert controller.state == success({**PATIENT, "active": False})
