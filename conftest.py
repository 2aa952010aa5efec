import pytest

from worldtile.geo.geometry import new_polygon, rectangle, rectangle_coords
from worldtile.geo.tests.fixtures import polygon_fixtures


@pytest.fixture
def unit_square():
    return rectangle(0, 1)


@pytest.fixture
def square_with_hole():
    """3x3 square with a 1x1 hole in the middle."""
    return new_polygon(rectangle_coords(0, 3), [rectangle_coords(1, 2)])


@pytest.fixture
def quantized_spikes():
    return polygon_fixtures.quantized_spikes()


@pytest.fixture
def quantized_complex_hole():
    return polygon_fixtures.quantized_complex_hole()
