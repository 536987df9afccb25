"""Rentals of a vehicle by a client."""

from __future__ import annotations

import weakref
from datetime import datetime, timedelta
from typing import Optional

from vehicle_rental.client import Client
from vehicle_rental.vehicles import Vehicle

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


def _format_time(moment: Optional[datetime]) -> str:
    """Format a moment as YYYY-Mmm-DD HH:MM:SS, or mark it as unset."""
    if moment is None:
        return "not-a-date-time"
    text = (
        f"{moment.year:04d}-{_MONTHS[moment.month - 1]}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += f".{moment.microsecond:06d}"
    return text


class Rent:
    """A vehicle rented by a client from a begin time until an end time."""

    def __init__(
        self,
        rent_id: int,
        begin_time: Optional[datetime],
        end_time: Optional[datetime],
        client: Optional[Client],
        vehicle: Optional[Vehicle],
    ) -> None:
        self._id = rent_id
        self._begin_time = begin_time if begin_time is not None else _now()
        self._end_time = end_time
        self._rent_cost = 0
        self._client_ref = weakref.ref(client) if client is not None else None
        self._vehicle = vehicle
        if vehicle is not None:
            vehicle.rented = True

    @property
    def id(self) -> int:
        return self._id

    @property
    def begin_time(self) -> datetime:
        return self._begin_time

    @property
    def end_time(self) -> Optional[datetime]:
        return self._end_time

    @property
    def client(self) -> Optional[Client]:
        """The renting client, or None if it no longer exists."""
        return self._client_ref() if self._client_ref is not None else None

    @property
    def vehicle(self) -> Optional[Vehicle]:
        return self._vehicle

    @property
    def rent_cost(self) -> int:
        return self._rent_cost

    def rent_days(self) -> int:
        """Return the number of started days of the rent, 0 if it has not ended."""
        if self._end_time is None or self._end_time < self._begin_time:
            return 0
        elapsed = self._end_time - self._begin_time
        if elapsed < timedelta(minutes=1):
            return 0
        return (elapsed // timedelta(hours=1)) // 24 + 1

    def end_rent(self, end_time: Optional[datetime] = None) -> None:
        """Finish the rent, compute its cost and release the vehicle."""
        if end_time is None:
            self._end_time = _now()
        elif end_time < self._begin_time:
            self._end_time = self._begin_time
        else:
            self._end_time = end_time

        days = self.rent_days()
        if days > 0 and self._vehicle is not None:
            self._rent_cost = days * self._vehicle.base_price
        else:
            self._rent_cost = 0

        if self._vehicle is not None:
            self._vehicle.rented = False
        client = self.client
        if client is not None:
            client.remove_rent(self)

    def info(self) -> str:
        """Return a human readable description of the rent."""
        text = f"Rent ID: {self._id}\n"
        client = self.client
        if client is not None and self._vehicle is not None:
            text += (
                f"Begin time: {_format_time(self._begin_time)}\n"
                f"End time: {_format_time(self._end_time)}\n"
                f"Rent cost: {self._rent_cost}\n"
                f"Client: {client.first_name} {client.last_name}\n"
                f"Vehicle Plate Number: {self._vehicle.plate_number}"
            )
        return text

    def __repr__(self) -> str:
        return f"Rent({self._id!r})"