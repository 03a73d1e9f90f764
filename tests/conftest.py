"""Test fixtures and utilities"""

import pytest

from planar.geometry import Point, create


#################################################################
# Fixtures
#################################################################
@pytest.fixture
def origin() -> Point:
    return create(0, 0)


@pytest.fixture
def unit_x() -> Point:
    return create(1, 0)


#################################################################
# Other helpers
#################################################################
def within_tolerance(observed: float, expected: float, *, tolerance: float = 1e-9) -> bool:
    """Compare floats with a tolerance that scales with magnitude once the values exceed 1."""
    return abs(observed - expected) <= tolerance * max(1.0, abs(observed), abs(expected))
