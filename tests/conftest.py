"""Shared fixtures for the whitted test suite."""

import math

import pytest

from whitted.core.color import Color
from whitted.core.ray import Ray
from whitted.core.tuples import point, vector
from whitted.geometry.world import default_world


@pytest.fixture
def world():
    """The two-sphere world used by most shading tests."""
    return default_world()


@pytest.fixture
def outer_sphere(world):
    return world.objects[0]


@pytest.fixture
def inner_sphere(world):
    return world.objects[1]


@pytest.fixture
def forward_ray():
    """A ray from (0, 0, -5) travelling along +z."""
    return Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))


@pytest.fixture
def approx_color():
    """Compare a Color against expected components with a loose tolerance."""
    def _approx(color: Color, red: float, green: float, blue: float, abs: float = 1e-4) -> bool:
        return (math.isclose(color.red, red, abs_tol=abs)
                and math.isclose(color.green, green, abs_tol=abs)
                and math.isclose(color.blue, blue, abs_tol=abs))
    return _approx
