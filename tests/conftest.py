from __future__ import annotations

import logging
import sys

import pytest

from car_rental.domain.models import NamePolicy
from car_rental.domain.seed import load_seed_catalog
from car_rental.services.rental_ledger import RentalLedger


@pytest.fixture
def ledger() -> RentalLedger:
    rental_ledger = RentalLedger()
    load_seed_catalog(rental_ledger)
    return rental_ledger


@pytest.fixture
def simple_ledger() -> RentalLedger:
    rental_ledger = RentalLedger(name_policy=NamePolicy.SIMPLE)
    load_seed_catalog(rental_ledger)
    return rental_ledger


@pytest.fixture
def app_home(tmp_path, monkeypatch):
    """Point the app data directory at tmp_path and undo logging changes."""
    monkeypatch.setenv("APPDATA", str(tmp_path))
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield tmp_path
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
