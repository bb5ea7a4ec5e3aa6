"""Library for encoding TEXT values."""

# Applied in a single pass, so an inserted backslash is never escaped again
_TEXT_ESCAPES = str.maketrans({"\\": "\\\\", ";": "\\;", ",": "\\,", "\n": "\\n"})


def escape_text(value: str) -> str:
    """Escape the characters with special meaning in an rfc5545 TEXT value."""
    return value.translate(_TEXT_ESCAPES)
