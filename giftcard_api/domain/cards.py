"""Domain helpers for gift card codes, statuses and prices."""
from __future__ import annotations

import math
import re
from datetime import datetime, timezone

CODE_PATTERN = re.compile(r"[A-Z0-9]{1,25}")

STATUS_PENDING = "pending"
STATUS_ACCEPTED = "accepted"
STATUS_DECLINED = "declined"
STATUSES = (STATUS_PENDING, STATUS_ACCEPTED, STATUS_DECLINED)

DEFAULT_CURRENCY = "USD"


def is_valid_code(value) -> bool:
    """Return True when value is 1-25 uppercase letters/digits."""
    if not isinstance(value, str) or not value:
        return False
    return bool(CODE_PATTERN.fullmatch(value))


def is_valid_status(value) -> bool:
    return isinstance(value, str) and value in STATUSES


def is_valid_amount(value) -> bool:
    """Non-negative finite JSON number; bools and numeric strings do not count."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value) and value >= 0
    except OverflowError:
        return False


def is_valid_currency(value) -> bool:
    return isinstance(value, str) and value != ""


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
