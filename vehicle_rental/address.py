"""Postal address of a client."""

from __future__ import annotations


class Address:
    """A city, street and house number; empty strings never replace a value."""

    def __init__(self, city: str, street: str, number: str) -> None:
        self._city = city
        self._street = street
        self._number = number

    @property
    def city(self) -> str:
        return self._city

    @city.setter
    def city(self, value: str) -> None:
        if value:
            self._city = value

    @property
    def street(self) -> str:
        return self._street

    @street.setter
    def street(self, value: str) -> None:
        if value:
            self._street = value

    @property
    def number(self) -> str:
        return self._number

    @number.setter
    def number(self, value: str) -> None:
        if value:
            self._number = value

    def info(self) -> str:
        """Return a human readable description of the address."""
        return (
            f" Address:\n City: {self._city}, street: {self._street}, "
            f"number: {self._number}"
        )

    def __repr__(self) -> str:
        return f"Address({self._city!r}, {self._street!r}, {self._number!r})"