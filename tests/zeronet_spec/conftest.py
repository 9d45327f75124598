"""
Shared pytest fixtures for all zeronet_spec tests.

Provides core fixtures used across multiple test modules.
"""

from __future__ import annotations

import pytest

from zeronet_spec.types import Address


@pytest.fixture
def hello_address() -> Address:
    """A well-known 34-character ZeroNet site address."""
    return Address.from_string("1HeLLo4uzjaLetFx6NH3PMwFP3qbRbTf3D")


@pytest.fixture
def placeholder_address() -> Address:
    """The "Test" placeholder address."""
    return Address.from_string("Test")
