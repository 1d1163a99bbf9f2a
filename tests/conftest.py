"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_bytes() -> bytes:
    """Sample 16-byte value for testing."""
    return bytes.fromhex("0123456789abcdef0123456789abcdef")


@pytest.fixture
def sample_hex() -> str:
    """Hex rendering of sample_bytes."""
    return "0123456789abcdef0123456789abcdef"


@pytest.fixture
def sample_base64() -> str:
    """Base64 rendering of sample_bytes."""
    return "ASNFZ4mrze8BI0VniavN7w=="
