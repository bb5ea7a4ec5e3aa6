"""
Library for encoding rfc5545 iCalendar content.

Build a tree of `component.Component` objects holding formatted property
values, then write it as folded ics content with `encoder.IcsEncoder`:

```python
from icswriter.component import Component
from icswriter.encoder import encode_ics

calendar = Component("VCALENDAR")
calendar.add_property("VERSION", "2.0")
content = encode_ics(calendar)
```
"""

__all__ = [
    "component",
    "const",
    "encoder",
    "exceptions",
    "property",
    "types",
]
