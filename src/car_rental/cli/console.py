"""Interactive console view over the rental ledger."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

from car_rental.cli import strings
from car_rental.domain.models import RentalReceipt
from car_rental.logging_config import get_logger
from car_rental.services.errors import ServiceError
from car_rental.services.rental_ledger import RentalLedger
from car_rental.utils.formatting import (
    format_receipt,
    format_rental,
    format_vehicle,
)
from car_rental.utils.pdf_generator import build_receipt_filename, generate_receipt_pdf
from car_rental.utils.settings import LedgerSettings


class RentalConsole:
    """Collects raw strings from the user and drives the ledger.

    The console owns the confirmation step; the ledger only validates and
    quotes until ``commit_quote`` is called.
    """

    def __init__(
        self,
        ledger: RentalLedger,
        settings: LedgerSettings | None = None,
        *,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        receipts_dir: Optional[Path] = None,
    ) -> None:
        self._ledger = ledger
        self._settings = settings or LedgerSettings()
        self._input = input_func
        self._output = output_func
        self._receipts_dir = receipts_dir
        self._logger = get_logger(self.__class__.__name__)
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.rent_car,
            "2": self.return_car,
            "3": self.show_available_cars,
            "4": self.show_all_cars,
            "5": self.show_active_rentals,
        }

    def run(self) -> int:
        while True:
            self._print_menu()
            try:
                choice = self._input(strings.PROMPT_CHOICE).strip()
            except EOFError:
                choice = "0"
            if choice == "0":
                self._output(strings.MSG_GOODBYE)
                return 0
            action = self._actions.get(choice)
            if action is None:
                self._output(strings.MSG_INVALID_OPTION)
                continue
            try:
                action()
            except EOFError:
                self._output(strings.MSG_GOODBYE)
                return 0

    def rent_car(self) -> None:
        customer_name = self._input(strings.PROMPT_CUSTOMER_NAME)
        vehicle_id = self._input(strings.PROMPT_CAR_ID)
        days = self._input(strings.PROMPT_RENTAL_DAYS)
        try:
            quote = self._ledger.start_rental(vehicle_id, customer_name, days)
        except ServiceError as exc:
            self._output(exc.message)
            return

        self._output(format_receipt(quote, self._settings.currency_symbol))
        answer = self._input(strings.PROMPT_CONFIRM).strip().lower()
        if answer not in strings.YES_ANSWERS:
            self._logger.info("Rental of %s canceled by user", quote.vehicle_id)
            self._output(strings.MSG_RENTAL_CANCELED)
            return

        try:
            receipt = self._ledger.commit_quote(quote)
        except ServiceError as exc:
            self._output(exc.message)
            return
        self._output(strings.MSG_RENTED.format(vehicle=receipt.vehicle_name))
        if self._settings.export_receipts and self._receipts_dir is not None:
            self._export_receipt(receipt)

    def return_car(self) -> None:
        vehicle_id = self._input(strings.PROMPT_CAR_ID).strip()
        if not vehicle_id:
            self._output(strings.MSG_ENTER_RETURN_CAR_ID)
            return
        try:
            rental = self._ledger.return_vehicle(vehicle_id)
        except ServiceError as exc:
            self._output(exc.message)
            return
        vehicle = self._ledger.get_vehicle(rental.vehicle_id)
        self._output(strings.MSG_RETURNED.format(vehicle=vehicle.display_name))

    def show_available_cars(self) -> None:
        self._print_lines(
            format_vehicle(vehicle, self._settings.currency_symbol)
            for vehicle in self._ledger.list_available_vehicles()
        )

    def show_all_cars(self) -> None:
        self._print_lines(
            format_vehicle(vehicle, self._settings.currency_symbol)
            for vehicle in self._ledger.list_all_vehicles()
        )

    def show_active_rentals(self) -> None:
        lines = [
            format_rental(rental, self._settings.currency_symbol)
            for rental in self._ledger.list_active_rentals()
        ]
        if not lines:
            self._output(strings.MSG_NO_RENTALS)
            return
        self._print_lines(lines)

    def _export_receipt(self, receipt: RentalReceipt) -> None:
        path = self._receipts_dir / build_receipt_filename(receipt)
        try:
            generate_receipt_pdf(
                receipt, path, currency_symbol=self._settings.currency_symbol
            )
        except OSError:
            self._logger.exception("Failed to write receipt %s", path)
            self._output(strings.MSG_RECEIPT_FAILED)
            return
        self._output(strings.MSG_RECEIPT_SAVED.format(path=path))

    def _print_lines(self, lines: Iterable[str]) -> None:
        printed = False
        for line in lines:
            self._output(line)
            printed = True
        if not printed:
            self._output(strings.MSG_NO_CARS)

    def _print_menu(self) -> None:
        self._output("")
        self._output(strings.MENU_TITLE)
        for key, label in strings.MENU_OPTIONS:
            self._output(f"  {key}. {label}")
