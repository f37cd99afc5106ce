"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_table() -> list[list[str | None]]:
    """Sample table with text, empty rows and nulls."""
    return [["A", "B", "Hello", "Word"], [], ["C", None, "D"]]


@pytest.fixture
def sample_rsv() -> bytes:
    """RSV encoding of sample_table."""
    return b"A\xffB\xffHello\xffWord\xff\xfd\xfdC\xff\xfe\xffD\xff\xfd"


@pytest.fixture
def unicode_rsv() -> bytes:
    """RSV data with multi-byte text, an empty row, a null and an empty string."""
    return b"Hello\xff" + "🌎".encode("utf-8") + b"\xff\xfd\xfd\xfe\xff\xff\xfd"
