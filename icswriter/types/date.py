"""Library for encoding DATE values."""

from __future__ import annotations

import datetime

ATTR_VALUE_DATE = ";VALUE=DATE"


def encode_date(value: datetime.date) -> str:
    """Serialize a date as an rfc5545 DATE value e.g. 20140406.

    The year is always four digits, unlike `strftime("%Y")` on some platforms.
    """
    return value.isoformat().replace("-", "")


def format_date_field(key: str, value: datetime.date) -> tuple[str, str]:
    """Return a whole day property e.g. "DTEND;VALUE=DATE:20140406"."""
    if isinstance(value, datetime.datetime):
        value = value.date()
    return key + ATTR_VALUE_DATE, encode_date(value)
