"""Shared test fixtures"""

import pytest

from tests.fakes import FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    """Fake clock starting at zero"""
    return FakeClock()
