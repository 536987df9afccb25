"""A container holding the client, vehicle and rent repositories."""

from __future__ import annotations

from datetime import datetime, timedelta

from vehicle_rental.address import Address
from vehicle_rental.client import Client
from vehicle_rental.client_types import Default
from vehicle_rental.rent import Rent
from vehicle_rental.repositories import Repository
from vehicle_rental.vehicles import Vehicle


class StorageContainer:
    """Repositories of clients, vehicles and rents, seeded with sample data."""

    def __init__(self) -> None:
        self._clients: Repository[Client] = Repository()
        self._vehicles: Repository[Vehicle] = Repository()
        self._rents: Repository[Rent] = Repository()
        self.initialize_test_data()

    @property
    def client_repository(self) -> Repository[Client]:
        return self._clients

    @property
    def vehicle_repository(self) -> Repository[Vehicle]:
        return self._vehicles

    @property
    def rent_repository(self) -> Repository[Rent]:
        return self._rents

    def initialize_test_data(self) -> None:
        """Add one sample client, vehicle and a one-day rent linking them."""
        address = Address("Lodz", "Aleja Politechniki", "20/4")
        client = Client("Jan", "Kowal", "1", address, Default())
        self._clients.add(client)

        vehicle = Vehicle("TEST 001", 10)
        self._vehicles.add(vehicle)

        now = datetime.now().replace(microsecond=0)
        rent = Rent(1, now, now + timedelta(hours=24), client, vehicle)
        self._rents.add(rent)

        client.add_rent(rent)