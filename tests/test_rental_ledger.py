from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from car_rental.domain.models import Vehicle, VehicleStatus
from car_rental.services.errors import (
    DuplicateVehicleId,
    InvalidCustomerName,
    InvalidDayCount,
    MissingVehicleId,
    NotFoundError,
    ServiceError,
    ValidationError,
    VehicleNotRented,
    VehicleUnavailable,
)
from car_rental.services.rental_ledger import RentalLedger


def _assert_consistent(ledger: RentalLedger) -> None:
    rented_ids = [rental.vehicle_id for rental in ledger.list_active_rentals()]
    for vehicle in ledger.list_all_vehicles():
        count = rented_ids.count(vehicle.vehicle_id)
        if vehicle.available:
            assert count == 0
        else:
            assert count == 1


def test_seed_catalog_order(ledger):
    ids = [vehicle.vehicle_id for vehicle in ledger.list_all_vehicles()]
    assert ids == ["ID_001", "ID_002", "ID_003", "ID_004", "ID_005"]
    assert all(vehicle.available for vehicle in ledger.list_all_vehicles())
    assert ledger.list_active_rentals() == []


def test_add_vehicle_rejects_duplicate_id_case_insensitive(ledger):
    with pytest.raises(DuplicateVehicleId):
        ledger.add_vehicle(Vehicle("id_001", "Kia", "Picanto", 300.0))
    assert len(ledger.list_all_vehicles()) == 5


def test_add_vehicle_rejects_empty_id_and_negative_rate():
    ledger = RentalLedger()
    with pytest.raises(MissingVehicleId):
        ledger.add_vehicle(Vehicle("  ", "Kia", "Picanto", 300.0))
    with pytest.raises(ValidationError):
        ledger.add_vehicle(Vehicle("ID_010", "Kia", "Picanto", -1.0))
    assert ledger.list_all_vehicles() == []


def test_add_vehicle_always_starts_available():
    ledger = RentalLedger()
    ledger.add_vehicle(Vehicle("ID_010", "Kia", "Picanto", 300.0, available=False))
    assert ledger.find_available_vehicle("ID_010") is not None


def test_calculate_price_is_exact_multiplication():
    assert RentalLedger.calculate_price(450.0, 3) == 1350.0


def test_find_available_vehicle_is_case_insensitive():
    ledger = RentalLedger()
    ledger.add_vehicle(Vehicle("ID_004", "Suzuki", "Brezza", 450.0))
    vehicle = ledger.find_available_vehicle("id_004")
    assert vehicle is not None
    assert vehicle.vehicle_id == "ID_004"


def test_find_available_vehicle_unknown_returns_none(ledger):
    assert ledger.find_available_vehicle("ID_999") is None


def test_find_rented_vehicle_only_matches_rented(ledger):
    assert ledger.find_rented_vehicle("ID_002") is None
    quote = ledger.start_rental("ID_002", "Jane Doe", 1)
    ledger.commit_quote(quote)
    vehicle = ledger.find_rented_vehicle("id_002")
    assert vehicle is not None
    assert vehicle.status == VehicleStatus.RENTED
    assert ledger.find_available_vehicle("ID_002") is None


def test_register_customer_generates_unique_ids(ledger):
    first = ledger.register_customer("Jane Doe")
    second = ledger.register_customer("Jane Doe")
    assert first.customer_id != second.customer_id
    assert [c.name for c in ledger.list_customers()] == ["Jane Doe", "Jane Doe"]


def test_register_customer_trims_name(ledger):
    customer = ledger.register_customer("  O'Neil-Smith  ")
    assert customer.name == "O'Neil-Smith"
    assert ledger.get_customer(customer.customer_id).name == "O'Neil-Smith"


@pytest.mark.parametrize("name", ["", "   ", "R2D2", "Jane_Doe"])
def test_register_customer_invalid_name_registers_nothing(ledger, name):
    with pytest.raises(InvalidCustomerName):
        ledger.register_customer(name)
    assert ledger.list_customers() == []


def test_simple_policy_accepts_any_non_empty_name(simple_ledger):
    customer = simple_ledger.register_customer("R2D2")
    assert customer.name == "R2D2"
    with pytest.raises(InvalidCustomerName):
        simple_ledger.register_customer(" ")


def test_get_customer_unknown(ledger):
    with pytest.raises(NotFoundError):
        ledger.get_customer("CUS42")


def test_rent_and_return_scenario(ledger):
    quote = ledger.start_rental("ID_003", "Jane Doe", 5)
    assert quote.total_price == 6000.0
    assert quote.vehicle_name == "Mahindra Thar"
    assert ledger.find_available_vehicle("ID_003") is not None

    receipt = ledger.commit_quote(quote)
    assert receipt == quote
    assert ledger.get_vehicle("ID_003").available is False
    rentals = ledger.list_active_rentals()
    assert [rental.vehicle_id for rental in rentals] == ["ID_003"]
    assert rentals[0].customer_id == quote.customer_id
    assert rentals[0].days == 5

    with pytest.raises(VehicleUnavailable):
        ledger.start_rental("ID_003", "Bob", 2)

    returned = ledger.return_vehicle("ID_003")
    assert returned.vehicle_id == "ID_003"
    assert ledger.get_vehicle("ID_003").available is True
    assert ledger.list_active_rentals() == []
    _assert_consistent(ledger)


def test_round_trip_restores_catalog_and_keeps_customers(ledger):
    customer = ledger.register_customer("Jane Doe")
    vehicles_before = ledger.list_all_vehicles()
    customers_before = ledger.list_customers()

    vehicle = ledger.find_available_vehicle("ID_001")
    ledger.commit_rental(vehicle, customer, 2)
    ledger.return_vehicle(vehicle.vehicle_id)

    assert ledger.list_all_vehicles() == vehicles_before
    assert ledger.list_customers() == customers_before
    assert ledger.list_active_rentals() == []


def test_commit_rental_on_unavailable_vehicle_leaves_state_unchanged(ledger):
    first = ledger.start_rental("ID_001", "Jane", 1)
    second = ledger.start_rental("ID_001", "Bob", 3)
    ledger.commit_quote(first)
    rentals_before = ledger.list_active_rentals()
    vehicles_before = ledger.list_all_vehicles()

    with pytest.raises(VehicleUnavailable):
        ledger.commit_quote(second)

    assert ledger.list_active_rentals() == rentals_before
    assert ledger.list_all_vehicles() == vehicles_before
    _assert_consistent(ledger)


def test_commit_rental_unknown_vehicle(ledger):
    customer = ledger.register_customer("Jane")
    with pytest.raises(VehicleUnavailable):
        ledger.commit_rental("ID_404", customer, 1)


def test_commit_rental_unknown_customer_leaves_vehicle_available(ledger):
    with pytest.raises(NotFoundError):
        ledger.commit_rental("ID_001", "CUS99", 1)
    assert ledger.get_vehicle("ID_001").available is True
    assert ledger.list_active_rentals() == []


def test_commit_rental_revalidates_days(ledger):
    customer = ledger.register_customer("Jane")
    with pytest.raises(InvalidDayCount):
        ledger.commit_rental("ID_001", customer, 0)
    assert ledger.get_vehicle("ID_001").available is True


def test_return_available_vehicle_fails(ledger):
    with pytest.raises(VehicleNotRented):
        ledger.return_vehicle("ID_002")
    with pytest.raises(VehicleNotRented):
        ledger.return_vehicle("ID_404")
    with pytest.raises(VehicleNotRented):
        ledger.return_vehicle("")


def test_return_is_case_insensitive(ledger):
    ledger.commit_quote(ledger.start_rental("ID_005", "Jane", 2))
    ledger.return_vehicle("id_005")
    assert ledger.get_vehicle("ID_005").available is True


@pytest.mark.parametrize("days", [0, -2, "0", "-2"])
def test_start_rental_non_positive_days(ledger, days):
    with pytest.raises(InvalidDayCount) as excinfo:
        ledger.start_rental("ID_001", "Jane", days)
    assert excinfo.value.reason == InvalidDayCount.NOT_POSITIVE
    assert ledger.list_customers() == []


@pytest.mark.parametrize(
    "days", ["abc", "", "2.5", "1_0", "\u0663", "99999999999", "-99999999999"]
)
def test_start_rental_non_numeric_days(ledger, days):
    with pytest.raises(InvalidDayCount) as excinfo:
        ledger.start_rental("ID_001", "Jane", days)
    assert excinfo.value.reason == InvalidDayCount.NOT_A_NUMBER
    assert ledger.list_customers() == []


def test_start_rental_accepts_numeric_text(ledger):
    quote = ledger.start_rental("id_004", "Jane", " 3 ")
    assert quote.days == 3
    assert quote.total_price == 1350.0
    assert quote.vehicle_id == "ID_004"


def test_start_rental_validation_order(ledger):
    with pytest.raises(InvalidCustomerName):
        ledger.start_rental("", "", "abc")
    with pytest.raises(MissingVehicleId):
        ledger.start_rental("  ", "Jane", "abc")
    with pytest.raises(InvalidDayCount):
        ledger.start_rental("ID_404", "Jane", "abc")
    with pytest.raises(VehicleUnavailable):
        ledger.start_rental("ID_404", "Jane", 1)
    assert ledger.list_customers() == []


def test_start_rental_registers_customer_without_renting(ledger):
    quote = ledger.start_rental("ID_001", "Jane", 1)
    assert [c.customer_id for c in ledger.list_customers()] == [quote.customer_id]
    assert ledger.list_active_rentals() == []
    assert ledger.get_vehicle("ID_001").available is True


def test_customers_persist_after_return(ledger):
    quote = ledger.start_rental("ID_001", "Jane", 1)
    ledger.commit_quote(quote)
    ledger.return_vehicle("ID_001")
    assert ledger.get_customer(quote.customer_id).name == "Jane"
    assert ledger.rentals_for_customer(quote.customer_id) == []


def test_rentals_for_customer(ledger):
    customer = ledger.register_customer("Jane")
    ledger.commit_rental("ID_001", customer, 1)
    ledger.commit_rental("ID_002", customer.customer_id, 2)
    ledger.commit_quote(ledger.start_rental("ID_003", "Bob", 1))
    rentals = ledger.rentals_for_customer(customer.customer_id)
    assert [rental.vehicle_id for rental in rentals] == ["ID_001", "ID_002"]
    assert rentals[1].total_price == 4800.0


def test_listings_are_snapshots(ledger):
    vehicles = ledger.list_all_vehicles()
    vehicles[0].available = False
    vehicles.clear()
    assert len(ledger.list_all_vehicles()) == 5
    assert ledger.get_vehicle("ID_001").available is True

    ledger.commit_quote(ledger.start_rental("ID_002", "Jane", 1))
    rentals = ledger.list_active_rentals()
    rentals[0].days = 99
    rentals.clear()
    assert ledger.list_active_rentals()[0].days == 1


def test_list_available_vehicles_excludes_rented(ledger):
    ledger.commit_quote(ledger.start_rental("ID_002", "Jane", 1))
    ids = [vehicle.vehicle_id for vehicle in ledger.list_available_vehicles()]
    assert ids == ["ID_001", "ID_003", "ID_004", "ID_005"]
    _assert_consistent(ledger)


def test_ledger_logs_rental_events(ledger, caplog):
    caplog.set_level(logging.INFO)
    ledger.commit_quote(ledger.start_rental("ID_003", "Jane Doe", 5))
    ledger.return_vehicle("ID_003")
    messages = [record.getMessage() for record in caplog.records]
    assert any("Rental committed: ID_003" in message for message in messages)
    assert any("Vehicle returned: ID_003" in message for message in messages)


def _run_concurrently(func, args_list):
    """Run func once per args tuple, all threads released together."""
    barrier = threading.Barrier(len(args_list))

    def call(args):
        barrier.wait()
        try:
            return func(*args)
        except ServiceError as exc:
            return exc

    with ThreadPoolExecutor(max_workers=len(args_list)) as pool:
        return list(pool.map(call, args_list))


def test_concurrent_commits_rent_a_vehicle_once(ledger):
    quotes = [
        ledger.start_rental("ID_001", f"Customer {chr(65 + i)}", 1) for i in range(20)
    ]

    results = _run_concurrently(ledger.commit_quote, [(quote,) for quote in quotes])

    committed = [result for result in results if not isinstance(result, ServiceError)]
    refused = [result for result in results if isinstance(result, VehicleUnavailable)]
    assert len(committed) == 1
    assert len(refused) == 19
    assert [rental.vehicle_id for rental in ledger.list_active_rentals()] == ["ID_001"]
    _assert_consistent(ledger)


def test_concurrent_returns_release_a_vehicle_once(ledger):
    ledger.commit_quote(ledger.start_rental("ID_002", "Jane", 3))

    results = _run_concurrently(ledger.return_vehicle, [("ID_002",)] * 20)

    returned = [result for result in results if not isinstance(result, ServiceError)]
    refused = [result for result in results if isinstance(result, VehicleNotRented)]
    assert len(returned) == 1
    assert len(refused) == 19
    assert ledger.list_active_rentals() == []
    assert ledger.get_vehicle("ID_002").available is True
    _assert_consistent(ledger)
