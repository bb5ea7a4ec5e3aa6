"""Library for encoding RECUR values.

The rule itself is produced by `dateutil.rrule`, or supplied directly as a
string, and is passed through without validation. This is an example of
adding a weekly recurrence to an event:

```python
from dateutil import rrule

rule = rrule.rrule(rrule.WEEKLY, count=3, dtstart=datetime.datetime(2022, 8, 29, 9))
event.add_property(*format_recur_field(rule))
```

The value is not escaped when written since the `;` and `,` separators are
part of the rule syntax.
"""

from __future__ import annotations

from dateutil import rrule

from ..const import PROPERTY_RRULE

RRULE_PREFIX = f"{PROPERTY_RRULE}:"


def encode_recur(rule: rrule.rrule | str) -> str:
    """Return the RRULE value for a dateutil rule or rule string."""
    # dateutil renders the DTSTART on a separate line from the rule
    lines = [line.strip() for line in str(rule).splitlines() if line.strip()]
    for line in lines:
        if line.startswith(RRULE_PREFIX):
            return line[len(RRULE_PREFIX) :]
    if isinstance(rule, str) and len(lines) == 1:
        return lines[0]
    raise ValueError(f"Recurrence rule has no RRULE content: {rule!r}")


def format_recur_field(rule: rrule.rrule | str) -> tuple[str, str]:
    """Return a recurrence property e.g. "RRULE:FREQ=DAILY;COUNT=5"."""
    return PROPERTY_RRULE, encode_recur(rule)
