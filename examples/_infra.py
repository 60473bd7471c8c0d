from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Callable, Coroutine
from pathlib import Path

import httpx

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

BASE_URL = "http://fhir.local/"

PATIENTS = [
    {"resourceType": "Patient", "id": str(i), "name": [{"family": f"Smith-{i}"}], "active": True}
    for i in range(1, 8)
]


def _page(request: httpx.Request) -> httpx.Response:
    count = int(request.url.params.get("_count", "3"))
    page = int(request.url.params.get("page", "1"))
    chunk = PATIENTS[(page - 1) * count : page * count]
    links = [{"relation": "self", "url": str(request.url)}]
    if page * count < len(PATIENTS):
        links.append({"relation": "next", "url": f"{BASE_URL}Patient?_count={count}&page={page + 1}"})
    if page > 1:
        links.append({"relation": "previous", "url": f"{BASE_URL}Patient?_count={count}&page={page - 1}"})
    return httpx.Response(
        200,
        json={"resourceType": "Bundle", "type": "searchset", "entry": [{"resource": p} for p in chunk], "link": links},
    )


def fake_fhir(request: httpx.Request) -> httpx.Response:
    """In-memory FHIR server: paged Patient search, read and soft delete."""
    parts = request.url.path.strip("/").split("/")
    if parts == ["Patient"] and request.method == "GET":
        return _page(request)
    if len(parts) == 2 and parts[0] == "Patient":
        patient = next((p for p in PATIENTS if p["id"] == parts[1]), None)
        if patient is None:
            return httpx.Response(404, json={"resourceType": "OperationOutcome", "text": "not found"})
        if request.method == "PATCH":
            patient.update(json.loads(request.content))
        return httpx.Response(200, json=patient)
    return httpx.Response(400, text="unsupported")


def fake_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(fake_fhir))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
