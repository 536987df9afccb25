"""Client categories with their rental limits and discounts."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ClientType(ABC):
    """Base for client categories."""

    @abstractmethod
    def max_vehicles(self) -> int:
        """Return how many vehicles the client may rent at once."""

    @abstractmethod
    def apply_discount(self, price: float) -> float:
        """Return the price after this category's discount."""

    @abstractmethod
    def info(self) -> str:
        """Return the category name."""


class Default(ClientType):
    def max_vehicles(self) -> int:
        return 1

    def apply_discount(self, price: float) -> float:
        return price

    def info(self) -> str:
        return "Default"


class Bronze(ClientType):
    def max_vehicles(self) -> int:
        return 2

    def apply_discount(self, price: float) -> float:
        return price - 3

    def info(self) -> str:
        return "Bronze"


class Silver(ClientType):
    def max_vehicles(self) -> int:
        return 3

    def apply_discount(self, price: float) -> float:
        return price - 6

    def info(self) -> str:
        return "Silver"


class Gold(ClientType):
    def max_vehicles(self) -> int:
        return 4

    def apply_discount(self, price: float) -> float:
        return price * 0.95

    def info(self) -> str:
        return "Gold"


class Platinum(ClientType):
    def max_vehicles(self) -> int:
        return 5

    def apply_discount(self, price: float) -> float:
        return price * 0.90

    def info(self) -> str:
        return "Platinum"


class Diamond(ClientType):
    def max_vehicles(self) -> int:
        return 10

    def apply_discount(self, price: float) -> float:
        if price <= 125:
            return price * 0.90
        if price <= 250:
            return price * 0.80
        if price <= 500:
            return price * 0.70
        return price * 0.60

    def info(self) -> str:
        return "Diamond"