"""Library for writing a component tree as rfc5545 iCalendar content.

The encoder walks a `Component` tree and writes every content line to a
binary stream, folding long lines so that no physical line is longer than
the configured limit in bytes. Continuation lines begin with a single space.

This is an example of writing a calendar to a file:

```python
from pathlib import Path
from icswriter.encoder import IcsEncoder

filename = Path("/tmp/output.ics")
with filename.open(mode="wb") as ics_file:
    IcsEncoder(ics_file).encode(calendar)
```

Folding is done on the encoded bytes, so a multi-byte character may be
split across a fold.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .component import ComponentEmitter
from .const import CRLF, FOLD_INDENT, FOLD_LEN
from .exceptions import CalendarEncodeError, CalendarWriteError

_LOGGER = logging.getLogger(__name__)

ENCODING = "utf-8"
_CRLF = CRLF.encode(ENCODING)
_FOLD_INDENT = FOLD_INDENT.encode(ENCODING)

# Each fragment needs room for the indent, the terminator and some content
MIN_LINE_SIZE = len(_FOLD_INDENT) + len(_CRLF) + 1


class EncoderConfig(BaseModel):
    """Configuration for an IcsEncoder."""

    model_config = ConfigDict(frozen=True)

    line_size: int = Field(default=FOLD_LEN, ge=MIN_LINE_SIZE)
    """Maximum length of a physical line in bytes, including the CRLF."""


def fold_line(line: bytes, line_size: int = FOLD_LEN) -> list[bytes]:
    """Split an encoded content line into physical lines.

    The line includes its own terminator, which is split along with the rest
    of the line and so ends up in the final fragment. Lines that fit within
    `line_size` are returned unmodified.
    """
    if len(line) <= line_size:
        return [line]

    # The first line does not begin with a space.
    first_size = line_size - len(_CRLF)
    fragments = [line[:first_size] + _CRLF]

    # Reserve room for the indent and CRLF on each continuation line.
    size = line_size - len(_FOLD_INDENT) - len(_CRLF)
    chunks = [line[i : i + size] for i in range(first_size, len(line), size)]
    if len(chunks) > 1 and chunks[-1] == b"\n" and chunks[-2].endswith(b"\r"):
        # Keep the CR and LF of the terminator on the same line
        chunks[-2:] = [chunks[-2][:-1], _CRLF] if len(chunks[-2]) > 1 else [_CRLF]
    for chunk in chunks[:-1]:
        fragments.append(_FOLD_INDENT + chunk + _CRLF)
    # This is the last line, which already carries the terminator.
    fragments.append(_FOLD_INDENT + chunks[-1])
    return fragments


class IcsEncoder:
    """Writes component trees to a binary stream as folded ics content."""

    def __init__(self, stream: BinaryIO, line_size: int = FOLD_LEN) -> None:
        """Initialize IcsEncoder."""
        try:
            self._config = EncoderConfig(line_size=line_size)
        except ValidationError as err:
            raise CalendarEncodeError(
                f"Invalid encoder line size: {line_size}", detailed_error=str(err)
            ) from err
        self._stream = stream
        self._failed = False

    @property
    def config(self) -> EncoderConfig:
        """Return the encoder configuration."""
        return self._config

    def encode(self, emitter: ComponentEmitter) -> None:
        """Write the component tree produced by the emitter."""
        component = emitter.__encode_component_root__()
        _LOGGER.debug("Encoding component %s", component.name)
        component.write(self)

    def write_line(self, line: str) -> None:
        """Write a content line, folding it to the configured line size.

        The line is expected to include its CRLF terminator.
        """
        data = line.encode(ENCODING)
        fragments = fold_line(data, self._config.line_size)
        if len(fragments) > 1:
            _LOGGER.debug(
                "Folded %d byte line into %d lines", len(data), len(fragments)
            )
        for fragment in fragments:
            self._write(fragment)

    def _write(self, data: bytes) -> None:
        if self._failed:
            raise CalendarWriteError(
                "Stream is unusable after a previous write failed"
            )
        try:
            self._stream.write(data)
        except (OSError, ValueError) as err:
            self._failed = True
            _LOGGER.debug("Failed to write to stream: %s", err)
            raise CalendarWriteError(
                f"Failed to write calendar content: {err}", detailed_error=repr(data)
            ) from err


def encode_ics(emitter: ComponentEmitter, line_size: int = FOLD_LEN) -> bytes:
    """Encode the component tree produced by the emitter as ics content."""
    buf = io.BytesIO()
    IcsEncoder(buf, line_size=line_size).encode(emitter)
    return buf.getvalue()
