"""Persisted ledger and console settings stored in config.json."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from car_rental.config import DEFAULT_CURRENCY_SYMBOL
from car_rental.domain.models import NamePolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerSettings:
    """User settings read from config.json."""

    name_policy: NamePolicy = NamePolicy.STRICT
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    export_receipts: bool = False


def _read_config(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.warning("Ignoring unreadable config file %s", config_path)
        return {}
    return data if isinstance(data, dict) else {}


def load_ledger_settings(config_path: Path) -> LedgerSettings:
    """Load settings from disk, falling back to defaults for bad values."""
    data = _read_config(config_path)
    raw_policy = data.get("name_policy", NamePolicy.STRICT.value)
    try:
        name_policy = NamePolicy(raw_policy)
    except ValueError:
        logger.warning("Unknown name_policy %r in %s, using strict", raw_policy, config_path)
        name_policy = NamePolicy.STRICT
    currency_symbol = data.get("currency_symbol", DEFAULT_CURRENCY_SYMBOL)
    if not isinstance(currency_symbol, str):
        currency_symbol = DEFAULT_CURRENCY_SYMBOL
    return LedgerSettings(
        name_policy=name_policy,
        currency_symbol=currency_symbol,
        export_receipts=bool(data.get("export_receipts", False)),
    )


def save_ledger_settings(config_path: Path, settings: LedgerSettings) -> None:
    """Save settings to disk, keeping keys this module does not own."""
    payload = _read_config(config_path)
    payload.update(
        name_policy=settings.name_policy.value,
        currency_symbol=settings.currency_symbol,
        export_receipts=settings.export_receipts,
    )
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8"
    )
