"""Input validation for rental requests."""

from __future__ import annotations

import math
import re

from car_rental.domain.models import NamePolicy
from car_rental.services.errors import (
    InvalidCustomerName,
    InvalidDayCount,
    MissingVehicleId,
    ValidationError,
)

# Letters (any script), spaces, hyphens and apostrophes.
_STRICT_NAME_RE = re.compile(r"(?:[^\W\d_]|[ '\-])+")
_LETTER_RE = re.compile(r"[^\W\d_]")
_DAY_COUNT_RE = re.compile(r"[+-]?[0-9]+")

# Day counts are 32-bit signed integers.
MAX_DAY_COUNT = 2**31 - 1
MIN_DAY_COUNT = -(2**31)


def validate_customer_name(name: str | None, policy: NamePolicy = NamePolicy.STRICT) -> str:
    """Return the trimmed name or raise InvalidCustomerName."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidCustomerName()
    if policy == NamePolicy.STRICT:
        if not _STRICT_NAME_RE.fullmatch(cleaned) or not _LETTER_RE.search(cleaned):
            raise InvalidCustomerName(
                "Customer name may only contain letters, spaces, hyphens and apostrophes."
            )
    return cleaned


def validate_vehicle_id(vehicle_id: str | None) -> str:
    cleaned = (vehicle_id or "").strip()
    if not cleaned:
        raise MissingVehicleId()
    return cleaned


def parse_day_count(raw: int | str | None) -> int:
    """Parse a rental day count from an int or numeric text.

    Non-numeric text raises InvalidDayCount with reason ``not_a_number``;
    zero and negative values raise it with reason ``not_positive``.
    """
    if isinstance(raw, bool):
        raise InvalidDayCount(InvalidDayCount.NOT_A_NUMBER)
    if isinstance(raw, int):
        days = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not _DAY_COUNT_RE.fullmatch(text):
            raise InvalidDayCount(InvalidDayCount.NOT_A_NUMBER)
        days = int(text)
    else:
        raise InvalidDayCount(InvalidDayCount.NOT_A_NUMBER)
    if not MIN_DAY_COUNT <= days <= MAX_DAY_COUNT:
        raise InvalidDayCount(InvalidDayCount.NOT_A_NUMBER)
    if days <= 0:
        raise InvalidDayCount(InvalidDayCount.NOT_POSITIVE)
    return days


def validate_daily_rate(daily_rate: float) -> float:
    if isinstance(daily_rate, bool):
        raise ValidationError("Daily rate must be a number.")
    try:
        rate = float(daily_rate)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Daily rate must be a number.") from exc
    if not math.isfinite(rate):
        raise ValidationError("Daily rate must be a finite number.")
    if rate < 0:
        raise ValidationError("Daily rate cannot be negative.")
    return rate
