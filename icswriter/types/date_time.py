"""Library for encoding DATE-TIME values."""

from __future__ import annotations

import datetime
import logging

_LOGGER = logging.getLogger(__name__)

ATTR_VALUE_DATE_TIME = ";VALUE=DATE-TIME"
UTC_SUFFIX = "Z"


def encode_date_time(value: datetime.datetime) -> str:
    """Serialize the wall clock time of a datetime e.g. 20120901T130000.

    Sub-second precision and any timezone are dropped.
    """
    result = value.replace(tzinfo=None).isoformat(timespec="seconds")
    return result.replace("-", "").replace(":", "")


def format_date_time_field(key: str, value: datetime.datetime) -> tuple[str, str]:
    """Return a floating time property.

    For example "X-MYDATETIME;VALUE=DATE-TIME:20120901T130000".
    """
    return key + ATTR_VALUE_DATE_TIME, encode_date_time(value)


def format_date_time(key: str, value: datetime.datetime) -> tuple[str, str]:
    """Return a UTC time property e.g. "DTSTART:19980119T070000Z".

    A naive datetime is interpreted as system local time. Values within a day
    of `datetime.min` or `datetime.max` may not be representable once shifted
    to UTC, and raise a ValueError.
    """
    try:
        utc_value = value.astimezone(datetime.timezone.utc)
    except (OverflowError, ValueError) as err:
        raise ValueError(
            f"Date time {value.isoformat()} is out of range when converted to UTC"
        ) from err
    _LOGGER.debug("Converted %s to UTC %s", value, utc_value)
    return key, encode_date_time(utc_value) + UTC_SUFFIX
