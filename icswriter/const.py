"""Constants for the rfc5545 encoding library."""

# Related to rfc5545 text encoding
CRLF = "\r\n"
FOLD_INDENT = " "
FOLD_LEN = 75
ATTR_BEGIN = "BEGIN"
ATTR_END = "END"

# Recurrence rule values contain list separators that must not be escaped
PROPERTY_RRULE = "RRULE"
