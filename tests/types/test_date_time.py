"""Tests for DATE-TIME values."""

import datetime
import zoneinfo

import pytest

from icswriter.types.date_time import format_date_time, format_date_time_field


def test_format_date_time_field() -> None:
    """Test formatting a floating date time."""
    value = datetime.datetime(2012, 9, 1, 13, 0, 0)
    assert format_date_time_field("X-MYDATETIME", value) == (
        "X-MYDATETIME;VALUE=DATE-TIME",
        "20120901T130000",
    )


def test_format_date_time_field_keeps_wall_clock() -> None:
    """Test a floating date time ignores the timezone and sub-seconds."""
    value = datetime.datetime(
        2012, 9, 1, 13, 0, 5, 123456, tzinfo=zoneinfo.ZoneInfo("America/New_York")
    )
    assert format_date_time_field("DTSTART", value) == (
        "DTSTART;VALUE=DATE-TIME",
        "20120901T130005",
    )


def test_format_date_time_field_minimum() -> None:
    """Test years are always formatted with four digits."""
    assert format_date_time_field("DTSTART", datetime.datetime.min) == (
        "DTSTART;VALUE=DATE-TIME",
        "00010101T000000",
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (
            datetime.datetime(2024, 3, 1, 9, 0, 0, tzinfo=datetime.timezone.utc),
            "20240301T090000Z",
        ),
        (
            datetime.datetime(
                2024,
                3,
                1,
                11,
                0,
                0,
                tzinfo=datetime.timezone(datetime.timedelta(hours=2)),
            ),
            "20240301T090000Z",
        ),
        (
            datetime.datetime(
                1998, 1, 19, 2, 0, 0, tzinfo=zoneinfo.ZoneInfo("America/New_York")
            ),
            "19980119T070000Z",
        ),
        (
            datetime.datetime(
                2024, 1, 1, 1, 30, 0, 999999, tzinfo=zoneinfo.ZoneInfo("Europe/Berlin")
            ),
            "20240101T003000Z",
        ),
    ],
)
def test_format_date_time(value: datetime.datetime, expected: str) -> None:
    """Test formatting a date time converted to UTC."""
    assert format_date_time("DTSTART", value) == ("DTSTART", expected)


def test_format_date_time_local() -> None:
    """Test a naive date time is treated as local time."""
    value = datetime.datetime(2024, 3, 1, 9, 0, 0)
    utc_value = value.astimezone(datetime.timezone.utc)
    assert format_date_time("DTSTAMP", value) == (
        "DTSTAMP",
        utc_value.strftime("%Y%m%dT%H%M%SZ"),
    )


def test_format_date_time_minimum() -> None:
    """Test the earliest UTC date time is formatted with a four digit year."""
    value = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)
    assert format_date_time("DTSTART", value) == ("DTSTART", "00010101T000000Z")


@pytest.mark.parametrize(
    "value",
    [
        datetime.datetime.min.replace(
            tzinfo=datetime.timezone(datetime.timedelta(hours=5))
        ),
        datetime.datetime.max.replace(
            tzinfo=datetime.timezone(datetime.timedelta(hours=-5))
        ),
    ],
)
def test_format_date_time_out_of_range(value: datetime.datetime) -> None:
    """Test a date time that can't be represented in UTC."""
    with pytest.raises(ValueError, match="out of range when converted to UTC"):
        format_date_time("DTSTART", value)
