"""Libraries for formatting rfc5545 property values."""

from .date import format_date_field
from .date_time import format_date_time, format_date_time_field
from .recur import format_recur_field
from .text import escape_text

__all__ = [
    "escape_text",
    "format_date_field",
    "format_date_time",
    "format_date_time_field",
    "format_recur_field",
]
