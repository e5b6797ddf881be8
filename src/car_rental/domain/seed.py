"""Fixed vehicle catalog loaded at startup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from car_rental.domain.models import Vehicle

if TYPE_CHECKING:
    from car_rental.services.rental_ledger import RentalLedger


@dataclass(frozen=True)
class VehicleSeed:
    vehicle_id: str
    brand: str
    model: str
    daily_rate: float

    def to_vehicle(self) -> Vehicle:
        return Vehicle(
            vehicle_id=self.vehicle_id,
            brand=self.brand,
            model=self.model,
            daily_rate=self.daily_rate,
        )


SEED_CATALOG: tuple[VehicleSeed, ...] = (
    VehicleSeed("ID_001", "BMW", "BMW X3", 2600.0),
    VehicleSeed("ID_002", "AUDI", "AUDI Q3", 2400.0),
    VehicleSeed("ID_003", "Mahindra", "Thar", 1200.0),
    VehicleSeed("ID_004", "Suzuki", "Brezza", 450.0),
    VehicleSeed("ID_005", "Hyundai", "I 10", 600.0),
)


def load_seed_catalog(
    ledger: "RentalLedger", seeds: Iterable[VehicleSeed] = SEED_CATALOG
) -> int:
    """Add the seed vehicles to the ledger and return how many were added."""
    count = 0
    for seed in seeds:
        ledger.add_vehicle(seed.to_vehicle())
        count += 1
    return count
