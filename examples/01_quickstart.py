from __future__ import annotations

from _infra import banner, fake_client, run

from remotedata import HttpxService, fold, lift as L
from remotedata.fhir import FHIRClient, make_reference


async def main() -> None:
    banner("01_quickstart: request -> RemoteData -> fold")

    async with HttpxService(client=fake_client()) as http:
        client = FHIRClient(http)

        for patient_id in ("1", "404"):
            rd = await client.get(make_reference("Patient", patient_id))
            print(
                fold(
                    rd,
                    not_asked=lambda: "idle",
                    loading=lambda: "loading...",
                    success=lambda patient: f"hello, {patient['name'][0]['family']}",
                    failure=lambda error: f"error: {error}",
                )
            )

        found = await client.find("Patient", {"_count": 1})
        print(L.down.with_default(found, {"id": "nobody"}))


if __name__ == "__main__":
    run(main)
