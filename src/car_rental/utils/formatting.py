"""Text formatting for receipts, vehicles and rentals."""

from __future__ import annotations

from car_rental.config import DEFAULT_CURRENCY_SYMBOL
from car_rental.domain.models import Rental, RentalReceipt, Vehicle


def format_currency(value: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    return f"{symbol}{value:.2f}"


def format_receipt(receipt: RentalReceipt, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    lines = [
        f"Customer ID: {receipt.customer_id}",
        f"Customer Name: {receipt.customer_name}",
        f"Car: {receipt.vehicle_name}",
        f"Rental Days: {receipt.days}",
        f"Total Price: {format_currency(receipt.total_price, symbol)}",
    ]
    return "\n".join(lines)


def format_vehicle(vehicle: Vehicle, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    return (
        f"{vehicle.vehicle_id} - {vehicle.display_name} "
        f"({format_currency(vehicle.daily_rate, symbol)}/day, {vehicle.status.value})"
    )


def format_rental(rental: Rental, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    return (
        f"{rental.vehicle_id} rented by {rental.customer_id} for {rental.days} day(s)"
        f" - {format_currency(rental.total_price, symbol)}"
    )
