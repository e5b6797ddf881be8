"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass

from car_rental.version import __app_name__, __company__

APP_NAME = __app_name__
APP_DATA_DIRNAME = "CarRental"
LOGS_DIRNAME = "logs"
LOG_FILENAME = "app.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3
RECEIPTS_DIRNAME = "receipts"
CONFIG_FILENAME = "config.json"

CUSTOMER_ID_PREFIX = "CUS"
DEFAULT_CURRENCY_SYMBOL = "$"


@dataclass(frozen=True)
class ReceiptIssuerInfo:
    """Issuer information for rental receipts."""

    name: str
    phone: str
    address: str


RECEIPT_ISSUER = ReceiptIssuerInfo(
    name="Car Rental System",
    phone="+1 555 0100",
    address="1 Example Street",
)


@dataclass(frozen=True)
class AppConfig:
    """Static configuration values for CarRental."""

    app_name: str = APP_NAME
    organization_name: str = __company__
