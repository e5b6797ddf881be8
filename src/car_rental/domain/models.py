"""Domain dataclasses and enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VehicleStatus(str, Enum):
    AVAILABLE = "available"
    RENTED = "rented"


class NamePolicy(str, Enum):
    STRICT = "strict"
    SIMPLE = "simple"


@dataclass(slots=True)
class Vehicle:
    vehicle_id: str
    brand: str
    model: str
    daily_rate: float
    available: bool = True

    @property
    def status(self) -> VehicleStatus:
        return VehicleStatus.AVAILABLE if self.available else VehicleStatus.RENTED

    @property
    def display_name(self) -> str:
        return f"{self.brand} {self.model}"

    def calculate_price(self, days: int) -> float:
        return self.daily_rate * days

    def matches(self, vehicle_id: str) -> bool:
        """Case-insensitive identifier comparison."""
        return self.vehicle_id.casefold() == vehicle_id.strip().casefold()


@dataclass(slots=True)
class Customer:
    customer_id: str
    name: str
    created_at: str | None = None


@dataclass(slots=True)
class Rental:
    vehicle_id: str
    customer_id: str
    days: int
    total_price: float
    started_at: str | None = None


@dataclass(frozen=True, slots=True)
class RentalReceipt:
    """Quote shown to the customer before confirmation, and after commit."""

    customer_id: str
    customer_name: str
    vehicle_id: str
    brand: str
    model: str
    days: int
    daily_rate: float
    total_price: float

    @property
    def vehicle_name(self) -> str:
        return f"{self.brand} {self.model}"
