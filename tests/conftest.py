"""Shared fixtures: an in-memory request function and a client over it."""

from __future__ import annotations

import typing
from dataclasses import dataclass, field

import pytest

from remotedata import RemoteDataResult, RequestDescriptor, failure
from remotedata.fhir import ClientConfig, FHIRClient


def _no_requests() -> list[RequestDescriptor]:
    return []


def _no_routes() -> dict[str, list[RemoteDataResult[typing.Any, typing.Any]]]:
    return {}


@dataclass(slots=True)
class FakeService:
    """Answers by URL; queued answers for one URL are returned in order."""

    routes: dict[str, list[RemoteDataResult[typing.Any, typing.Any]]] = field(default_factory=_no_routes)
    requests: list[RequestDescriptor] = field(default_factory=_no_requests)

    def route(self, url: str, *answers: RemoteDataResult[typing.Any, typing.Any]) -> None:
        self.routes.setdefault(url, []).extend(answers)

    async def __call__(self, request: RequestDescriptor) -> RemoteDataResult[typing.Any, typing.Any]:
        self.requests.append(request)
        answers = self.routes.get(request.url)
        if not answers:
            return failure({"error": "not_found", "url": request.url})
        if len(answers) == 1:
            return answers[0]
        return answers.pop(0)


def make_bundle(*resources: dict[str, typing.Any], links: dict[str, str] | None = None) -> dict[str, typing.Any]:
    return {
        "resourceType": "Bundle",
        "type": "searchset",
        "entry": [{"resource": r} for r in resources],
        "link": [{"relation": rel, "url": url} for rel, url in (links or {}).items()],
    }


@pytest.fixture
def fake_service() -> FakeService:
    return FakeService()


@pytest.fixture
def client(fake_service: FakeService) -> FHIRClient:
    return FHIRClient(fake_service, config=ClientConfig(base_url="http://fhir.test/"))
