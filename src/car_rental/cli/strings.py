"""Centralized console strings for consistent communication."""

from __future__ import annotations

MENU_TITLE = "Car Rental System"
MENU_OPTIONS = (
    ("1", "Rent a car"),
    ("2", "Return a car"),
    ("3", "List available cars"),
    ("4", "List all cars"),
    ("5", "List active rentals"),
    ("0", "Quit"),
)
PROMPT_CHOICE = "Choose an option: "
PROMPT_CUSTOMER_NAME = "Customer Name: "
PROMPT_CAR_ID = "Car ID: "
PROMPT_RENTAL_DAYS = "Rental Days: "
PROMPT_CONFIRM = "Confirm rental? [y/N]: "

MSG_INVALID_OPTION = "Invalid option."
MSG_ENTER_RETURN_CAR_ID = "Please enter a car ID to return."
MSG_RENTAL_CANCELED = "Rental canceled."
MSG_RENTED = "Car rented successfully: {vehicle}"
MSG_RETURNED = "Car returned successfully: {vehicle}"
MSG_RECEIPT_SAVED = "Receipt saved to {path}"
MSG_RECEIPT_FAILED = "Could not save the receipt PDF."
MSG_NO_CARS = "No cars to show."
MSG_NO_RENTALS = "No active rentals."
MSG_GOODBYE = "Goodbye."

YES_ANSWERS = frozenset({"y", "yes"})
