"""Vehicles available for rent and their pricing rules."""

from __future__ import annotations

import enum


class SegmentType(enum.Enum):
    """Car market segment; each carries a price factor."""

    A = 1.0
    B = 1.1
    C = 1.2
    D = 1.3
    E = 1.5

    @property
    def factor(self) -> float:
        return self.value


class Vehicle:
    """A rentable vehicle with a plate number and a daily base price."""

    def __init__(self, plate_number: str, base_price: int) -> None:
        self._plate_number = plate_number
        self.base_price = base_price
        self.rented = False

    @property
    def plate_number(self) -> str:
        return self._plate_number

    @plate_number.setter
    def plate_number(self, value: str) -> None:
        if value:
            self._plate_number = value

    def actual_rental_price(self) -> float:
        """Return the daily rental price."""
        return float(self.base_price)

    def info(self) -> str:
        """Return a human readable description of the vehicle."""
        return (
            f"Vehicle:\n plate number: {self._plate_number}, "
            f"base price: {self.base_price}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._plate_number!r}, {self.base_price!r})"


class Bicycle(Vehicle):
    """A bicycle, rented at its base price."""

    def actual_rental_price(self) -> float:
        return float(self.base_price)

    def info(self) -> str:
        return super().info() + ", type: Bicycle"


class MotorVehicle(Vehicle):
    """A vehicle with an engine; larger engines cost more."""

    def __init__(
        self, plate_number: str, base_price: int, engine_displacement: int
    ) -> None:
        super().__init__(plate_number, base_price)
        self.engine_displacement = engine_displacement

    def actual_rental_price(self) -> float:
        displacement = self.engine_displacement
        if displacement < 1000:
            factor = 1.0
        elif displacement <= 2000:
            factor = 1.0 + 0.5 * (float(displacement) - 1000) / 1000
        else:
            factor = 1.5
        return self.base_price * factor

    def info(self) -> str:
        return (
            super().info()
            + f", type: Motor Vehicle, engine displacement: {self.engine_displacement}"
        )


class Moped(MotorVehicle):
    """A moped, priced like any motor vehicle."""

    def actual_rental_price(self) -> float:
        return super().actual_rental_price()

    def info(self) -> str:
        return super().info() + ", type: Moped"


class Car(MotorVehicle):
    """A car whose price also depends on its segment."""

    def __init__(
        self,
        plate_number: str,
        base_price: int,
        engine_displacement: int,
        segment: SegmentType,
    ) -> None:
        super().__init__(plate_number, base_price, engine_displacement)
        self.segment = segment

    def actual_rental_price(self) -> float:
        return super().actual_rental_price() * self.segment.factor

    def info(self) -> str:
        return (
            super().info()
            + f", type: Car, segment: {self.segment.name}"
            + f", engine displacement: {self.engine_displacement}"
        )