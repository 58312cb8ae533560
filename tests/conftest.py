"""Shared test fixtures for projgen tests."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import orjson
import pytest

TEST_USER = "alice"

WriteJson = Callable[[Path, object], Path]


@pytest.fixture
def mock_logger() -> MagicMock:
    """Create a mock logger for testing."""
    return MagicMock()


@pytest.fixture
def identity() -> Callable[[], str]:
    """Return an identity provider with a fixed user name."""
    return lambda: TEST_USER


@pytest.fixture
def write_json() -> WriteJson:
    """Return a function that writes a JSON document to a path."""

    def _write(path: Path, document: object) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(orjson.dumps(document))
        return path

    return _write
