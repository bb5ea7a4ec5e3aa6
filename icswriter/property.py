"""Library for encoding rfc5545 content lines for a single property.

A property is just a "contentline" attached to a component, for example:

  DTSTART;VALUE=DATE:20070501

The key may already carry property parameters, as produced by the
formatting functions in `icswriter.types`.
"""

from __future__ import annotations

from .const import CRLF
from .types.text import escape_text


def write_string_field(key: str, value: str, escape: bool = True) -> str:
    """Return the content line for a property, including the line terminator."""
    if escape:
        value = escape_text(value)
    return f"{key.upper()}:{value}{CRLF}"
