"""Application entry point."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from car_rental.cli.console import RentalConsole
from car_rental.config import AppConfig
from car_rental.domain.models import NamePolicy
from car_rental.domain.seed import load_seed_catalog
from car_rental.logging_config import configure_logging, get_logger
from car_rental.paths import get_config_path, get_receipts_dir
from car_rental.services.rental_ledger import RentalLedger
from car_rental.utils.settings import load_ledger_settings


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Car rental console")
    parser.add_argument(
        "--simple-names",
        action="store_true",
        help="Accept any non-empty customer name",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start with an empty vehicle catalog",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (the log file always records INFO)",
    )
    return parser.parse_args(argv)


def build_ledger(name_policy: NamePolicy, seed: bool = True) -> RentalLedger:
    ledger = RentalLedger(name_policy=name_policy)
    if seed:
        load_seed_catalog(ledger)
    return ledger


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the CarRental console."""
    args = _parse_args(argv)
    configure_logging(console_level=getattr(logging, args.log_level))

    config = AppConfig()
    logger = get_logger(__name__)
    logger.info("Starting %s", config.app_name)

    settings = load_ledger_settings(get_config_path())
    name_policy = NamePolicy.SIMPLE if args.simple_names else settings.name_policy
    ledger = build_ledger(name_policy, seed=not args.no_seed)

    console = RentalConsole(
        ledger,
        settings,
        receipts_dir=get_receipts_dir() if settings.export_receipts else None,
    )
    return console.run()


if __name__ == "__main__":
    raise SystemExit(main())
