from __future__ import annotations

from _infra import banner, fake_client, run

from remotedata import HttpxService, ServiceController
from remotedata.fhir import FHIRClient, make_reference


async def main() -> None:
    banner("02_service_controller: reload, soft reload, optimistic set")

    async with HttpxService(client=fake_client()) as http:
        client = FHIRClient(http)
        controller = ServiceController(lambda: client.get(make_reference("Patient", "2")))
        controller.subscribe(lambda rd: print(f"  -> {rd.status}"))

        async with controller:
            pass

        controller.set(lambda patient: {**patient, "active": False})
        print(f"optimistic: {controller.state}")

        await controller.soft_reload_async()
        print(f"server: {controller.state}")


if __name__ == "__main__":
    run(main)
