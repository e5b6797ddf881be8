"""In-memory ledger of vehicles, customers and active rentals."""

from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from datetime import datetime
from typing import Optional

from car_rental.config import CUSTOMER_ID_PREFIX
from car_rental.domain.models import (
    Customer,
    NamePolicy,
    Rental,
    RentalReceipt,
    Vehicle,
)
from car_rental.logging_config import get_logger
from car_rental.services.errors import (
    DuplicateVehicleId,
    NotFoundError,
    VehicleNotRented,
    VehicleUnavailable,
)
from car_rental.services.validation import (
    parse_day_count,
    validate_customer_name,
    validate_daily_rate,
    validate_vehicle_id,
)


def _now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


def _key(vehicle_id: str) -> str:
    return vehicle_id.strip().casefold()


class RentalLedger:
    """Owns the vehicle catalog, the customer registry and active rentals.

    A vehicle is unavailable exactly when one active rental references it.
    Every public method runs under a single re-entrant lock, so the
    check-then-mutate steps of commit and return are atomic.

    Query methods hand out copies; mutating them never changes the ledger.
    """

    def __init__(self, name_policy: NamePolicy = NamePolicy.STRICT) -> None:
        self._name_policy = NamePolicy(name_policy)
        self._vehicles: dict[str, Vehicle] = {}
        self._customers: dict[str, Customer] = {}
        self._rentals: list[Rental] = []
        self._customer_ids = itertools.count(1)
        self._lock = threading.RLock()
        self._logger = get_logger(self.__class__.__name__)

    @property
    def name_policy(self) -> NamePolicy:
        return self._name_policy

    # Catalog -------------------------------------------------------------

    def add_vehicle(self, vehicle: Vehicle) -> None:
        vehicle_id = validate_vehicle_id(vehicle.vehicle_id)
        daily_rate = validate_daily_rate(vehicle.daily_rate)
        with self._lock:
            key = _key(vehicle_id)
            if key in self._vehicles:
                raise DuplicateVehicleId(vehicle_id)
            self._vehicles[key] = replace(
                vehicle, vehicle_id=vehicle_id, daily_rate=daily_rate, available=True
            )
        self._logger.info(
            "Vehicle added: %s (%s %s)", vehicle_id, vehicle.brand, vehicle.model
        )

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        """Return a copy of the vehicle with this id, whatever its status."""
        with self._lock:
            vehicle = self._vehicles.get(_key(vehicle_id or ""))
            return replace(vehicle) if vehicle else None

    def find_available_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        with self._lock:
            vehicle = self._find_available(vehicle_id)
            return replace(vehicle) if vehicle else None

    def find_rented_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        with self._lock:
            vehicle = self._find_rented(vehicle_id)
            return replace(vehicle) if vehicle else None

    def _find_available(self, vehicle_id: str) -> Optional[Vehicle]:
        for vehicle in self._vehicles.values():
            if vehicle.available and vehicle.matches(vehicle_id or ""):
                return vehicle
        return None

    def _find_rented(self, vehicle_id: str) -> Optional[Vehicle]:
        for rental in self._rentals:
            vehicle = self._vehicles.get(_key(rental.vehicle_id))
            if vehicle is not None and vehicle.matches(vehicle_id or ""):
                return vehicle
        return None

    # Customers -----------------------------------------------------------

    def register_customer(self, name: str) -> Customer:
        cleaned = validate_customer_name(name, self._name_policy)
        with self._lock:
            customer_id = f"{CUSTOMER_ID_PREFIX}{next(self._customer_ids)}"
            customer = Customer(
                customer_id=customer_id, name=cleaned, created_at=_now_iso()
            )
            self._customers[customer_id] = customer
        self._logger.info("Customer registered: %s (%s)", customer_id, cleaned)
        return replace(customer)

    def get_customer(self, customer_id: str) -> Customer:
        with self._lock:
            customer = self._customers.get(customer_id)
            if customer is None:
                raise NotFoundError(f"Customer {customer_id} not found.")
            return replace(customer)

    def list_customers(self) -> list[Customer]:
        with self._lock:
            return [replace(customer) for customer in self._customers.values()]

    # Rentals -------------------------------------------------------------

    @staticmethod
    def calculate_price(daily_rate: float, days: int) -> float:
        return daily_rate * days

    def start_rental(
        self, vehicle_id: str, customer_name: str, days: int | str
    ) -> RentalReceipt:
        """Validate a rental request, register the customer and quote a price.

        Nothing besides the customer registry changes here; the caller
        confirms with the customer and then calls ``commit_rental``.
        """
        name = validate_customer_name(customer_name, self._name_policy)
        vehicle_id = validate_vehicle_id(vehicle_id)
        day_count = parse_day_count(days)
        with self._lock:
            vehicle = self._find_available(vehicle_id)
            if vehicle is None:
                self._logger.info("Rental refused, %s is not available", vehicle_id)
                raise VehicleUnavailable()
            customer = self.register_customer(name)
            return self._receipt(vehicle, customer, day_count)

    def commit_rental(
        self,
        vehicle: Vehicle | str,
        customer: Customer | str,
        days: int | str,
    ) -> RentalReceipt:
        """Mark the vehicle rented and record the rental.

        Availability is checked again here because it may have changed
        since the quote was issued.
        """
        vehicle_id = vehicle.vehicle_id if isinstance(vehicle, Vehicle) else vehicle
        customer_id = (
            customer.customer_id if isinstance(customer, Customer) else customer
        )
        day_count = parse_day_count(days)
        with self._lock:
            stored_vehicle = self._vehicles.get(_key(vehicle_id or ""))
            if stored_vehicle is None or not stored_vehicle.available:
                self._logger.warning(
                    "Commit refused, vehicle %s is not available", vehicle_id
                )
                raise VehicleUnavailable()
            stored_customer = self._customers.get(customer_id)
            if stored_customer is None:
                raise NotFoundError(f"Customer {customer_id} not found.")
            stored_vehicle.available = False
            self._rentals.append(
                Rental(
                    vehicle_id=stored_vehicle.vehicle_id,
                    customer_id=stored_customer.customer_id,
                    days=day_count,
                    total_price=stored_vehicle.calculate_price(day_count),
                    started_at=_now_iso(),
                )
            )
            receipt = self._receipt(stored_vehicle, stored_customer, day_count)
        self._logger.info(
            "Rental committed: %s -> %s for %s day(s), total %.2f",
            receipt.vehicle_id,
            receipt.customer_id,
            day_count,
            receipt.total_price,
        )
        return receipt

    def commit_quote(self, receipt: RentalReceipt) -> RentalReceipt:
        """Commit a quote previously returned by ``start_rental``."""
        return self.commit_rental(receipt.vehicle_id, receipt.customer_id, receipt.days)

    def return_vehicle(self, vehicle_id: str) -> Rental:
        with self._lock:
            vehicle = self._find_rented(vehicle_id)
            if vehicle is None:
                self._logger.warning("Return refused, %s is not rented", vehicle_id)
                raise VehicleNotRented()
            vehicle.available = True
            rental = next(
                item for item in self._rentals if item.vehicle_id == vehicle.vehicle_id
            )
            self._rentals.remove(rental)
        self._logger.info("Vehicle returned: %s", vehicle.vehicle_id)
        return replace(rental)

    def list_available_vehicles(self) -> list[Vehicle]:
        with self._lock:
            return [
                replace(vehicle)
                for vehicle in self._vehicles.values()
                if vehicle.available
            ]

    def list_all_vehicles(self) -> list[Vehicle]:
        with self._lock:
            return [replace(vehicle) for vehicle in self._vehicles.values()]

    def list_active_rentals(self) -> list[Rental]:
        with self._lock:
            return [replace(rental) for rental in self._rentals]

    def rentals_for_customer(self, customer_id: str) -> list[Rental]:
        with self._lock:
            return [
                replace(rental)
                for rental in self._rentals
                if rental.customer_id == customer_id
            ]

    def _receipt(
        self, vehicle: Vehicle, customer: Customer, days: int
    ) -> RentalReceipt:
        return RentalReceipt(
            customer_id=customer.customer_id,
            customer_name=customer.name,
            vehicle_id=vehicle.vehicle_id,
            brand=vehicle.brand,
            model=vehicle.model,
            days=days,
            daily_rate=vehicle.daily_rate,
            total_price=self.calculate_price(vehicle.daily_rate, days),
        )
