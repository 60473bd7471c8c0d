from __future__ import annotations

from _infra import banner, fake_client, run

from remotedata import HttpxService, Pager, is_success
from remotedata.fhir import FHIRClient, extract_bundle_resources, get_resources_of_type


async def main() -> None:
    banner("03_pager: walk every page via next links")

    async with HttpxService(client=fake_client()) as http:
        async with Pager(FHIRClient(http), "Patient", resources_on_page=3) as pager:
            pass

        while True:
            if is_success(pager.state):
                patients = get_resources_of_type(extract_bundle_resources(pager.state.data), "Patient")
                print(f"page {pager.current_page}: {[p['id'] for p in patients]}")
            if not pager.has_next:
                break
            await pager.load_next()


if __name__ == "__main__":
    run(main)
