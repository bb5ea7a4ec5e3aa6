"""Library for building rfc5545 components.

An iCalendar object consists of one or more components, that may have
properties or sub-components. An example of a component might be the
calendar itself, an event, a to-do, a journal entry, an alarm, etc.

Components created here have no semantic meaning, they hold the already
formatted property values and the nesting of sub-components needed to
write the object as ics content. The caller builds the tree and hands it
to an `IcsEncoder`, which only reads it.

```python
from icswriter.component import Component
from icswriter.types import format_date_time

event = Component("VEVENT")
event.add_property("UID", "20240301-1@example.com")
event.add_property(*format_date_time("DTSTART", start))
calendar = Component("VCALENDAR")
calendar.add_property("VERSION", "2.0")
calendar.add_component(event)
```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .const import ATTR_BEGIN, ATTR_END, CRLF, PROPERTY_RRULE
from .exceptions import CalendarEncodeError
from .property import write_string_field

if TYPE_CHECKING:
    from .encoder import IcsEncoder

_LOGGER = logging.getLogger(__name__)


class ComponentEmitter(Protocol):
    """An object that can produce the root component for encoding."""

    def __encode_component_root__(self) -> Component:
        """Return the root of the component tree to encode."""


@dataclass
class Component:
    """An rfc5545 component."""

    name: str = ""
    properties: dict[str, str] = field(default_factory=dict)
    components: list[Component] = field(default_factory=list)

    def add_property(self, key: str, value: str) -> None:
        """Set a property, replacing any existing value for the key.

        Keys are case insensitive and are stored upper case.
        """
        self.properties[key.upper()] = value

    def add_component(self, component: Component) -> None:
        """Append a sub-component."""
        self.components.append(component)

    def write(self, encoder: IcsEncoder) -> None:
        """Write the component and all sub-components to the encoder."""
        if not self.name:
            raise CalendarEncodeError(
                "Component name must be set before encoding",
                detailed_error=str(sorted(self.properties)),
            )
        _LOGGER.debug("Writing component %s", self.name)
        encoder.write_line(f"{ATTR_BEGIN}:{self.name}{CRLF}")
        # Keys differing only in case are the same property, last one wins
        properties = {key.upper(): value for key, value in self.properties.items()}
        for key in sorted(properties):
            escape = key != PROPERTY_RRULE
            encoder.write_line(write_string_field(key, properties[key], escape))
        for component in self.components:
            component.write(encoder)
        encoder.write_line(f"{ATTR_END}:{self.name}{CRLF}")

    def __encode_component_root__(self) -> Component:
        """Encode the component itself as the root."""
        return self
