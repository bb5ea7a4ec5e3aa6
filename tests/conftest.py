"""Test fixtures."""

from collections.abc import Generator
import io

import pytest

from icswriter.encoder import IcsEncoder


@pytest.fixture
def stream() -> Generator[io.BytesIO, None, None]:
    """Fixture for an in memory output stream."""
    with io.BytesIO() as buf:
        yield buf


@pytest.fixture
def encoder(stream: io.BytesIO) -> IcsEncoder:
    """Fixture for an encoder writing to the in memory stream."""
    return IcsEncoder(stream)
