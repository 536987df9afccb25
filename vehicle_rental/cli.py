"""Command that shows the sample storage before and after adding a rent."""

from __future__ import annotations

import argparse
from datetime import datetime, timedelta
from typing import Optional, Sequence

from vehicle_rental.rent import Rent
from vehicle_rental.storage import StorageContainer


def _print_reports(storage: StorageContainer) -> None:
    print(storage.client_repository.report())
    print(storage.vehicle_repository.report())
    print(storage.rent_repository.report())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build the sample storage, add a rent and print the reports."""
    parser = argparse.ArgumentParser(
        description="Print reports of the sample rental storage."
    )
    parser.parse_args(argv)

    now = datetime.now().replace(microsecond=0)

    storage = StorageContainer()
    storage.initialize_test_data()

    _print_reports(storage)

    client = storage.client_repository.get(0)
    vehicle = storage.vehicle_repository.get(0)
    new_rent = Rent(2, now, now + timedelta(hours=24), client, vehicle)
    storage.rent_repository.add(new_rent)

    if client is not None:
        client.add_rent(new_rent)

    _print_reports(storage)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())