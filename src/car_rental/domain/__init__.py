"""Domain models for CarRental."""

from car_rental.domain.models import (
    Customer,
    NamePolicy,
    Rental,
    RentalReceipt,
    Vehicle,
    VehicleStatus,
)

__all__ = [
    "Customer",
    "NamePolicy",
    "Rental",
    "RentalReceipt",
    "Vehicle",
    "VehicleStatus",
]
