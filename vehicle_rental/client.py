"""Rental clients."""

from __future__ import annotations

from typing import Optional, Protocol

from vehicle_rental.address import Address
from vehicle_rental.client_types import ClientType


class _Describable(Protocol):
    def info(self) -> str: ...


class Client:
    """A client with personal data, an address, a category and current rents."""

    def __init__(
        self,
        first_name: str,
        last_name: str,
        personal_id: str,
        address: Optional[Address],
        client_type: Optional[ClientType],
    ) -> None:
        self._first_name = first_name
        self._last_name = last_name
        self._personal_id = personal_id
        self._address = address
        self._client_type = client_type
        self._current_rents: list[_Describable] = []

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        if value:
            self._first_name = value

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        if value:
            self._last_name = value

    @property
    def personal_id(self) -> str:
        return self._personal_id

    @property
    def address(self) -> Optional[Address]:
        return self._address

    @address.setter
    def address(self, value: Optional[Address]) -> None:
        if value is not None:
            self._address = value

    @property
    def client_type(self) -> Optional[ClientType]:
        return self._client_type

    @client_type.setter
    def client_type(self, value: Optional[ClientType]) -> None:
        if value is not None:
            self._client_type = value

    @property
    def current_rents(self) -> list:
        """A copy of the client's current rents."""
        return list(self._current_rents)

    def add_rent(self, rent: _Describable) -> None:
        """Record a rent as current."""
        self._current_rents.append(rent)

    def remove_rent(self, rent: _Describable) -> None:
        """Drop every occurrence of the given rent from the current rents."""
        self._current_rents = [r for r in self._current_rents if r is not rent]

    def _require_type(self) -> ClientType:
        if self._client_type is None:
            raise ValueError("client has no client type")
        return self._client_type

    def max_vehicles(self) -> int:
        """Return how many vehicles this client may rent at once."""
        return self._require_type().max_vehicles()

    def apply_discount(self, price: float) -> float:
        """Return the price after this client's discount."""
        return self._require_type().apply_discount(price)

    def info(self) -> str:
        """Return a human readable description of the client."""
        parts = [
            f"Client:\n First name: {self._first_name}, last name: {self._last_name}, "
            f"personal ID: {self._personal_id}"
        ]
        if self._address is not None:
            parts.append(self._address.info())
        if self._current_rents:
            parts.append("\nCurrent rentals:\n")
            parts.extend(rent.info() + "\n" for rent in self._current_rents)
        else:
            parts.append("\nNo current rentals.")
        parts.append("\nClient type: " + self._require_type().info())
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"Client({self._first_name!r}, {self._last_name!r}, "
            f"{self._personal_id!r})"
        )