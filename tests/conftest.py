import pytest

from polytangent.geometry import MultiPolygon, Point2D, Polygon


def ring(*coords):
    return [Point2D(x, y) for x, y in coords]


@pytest.fixture
def square():
    """4x4 square, counter-clockwise, closed by repeating (0, 0)."""
    return Polygon(outer=ring((0, 0), (4, 0), (4, 4), (0, 4), (0, 0)))


@pytest.fixture
def notched():
    """U shape with a notch opening upwards between x=2 and x=4."""
    return Polygon(outer=ring(
        (0, 0), (6, 0), (6, 6), (4, 6), (4, 2), (2, 2), (2, 6), (0, 6), (0, 0)
    ))


@pytest.fixture
def two_squares():
    """Two disjoint 2x2 squares side by side."""
    return MultiPolygon(polygons=[
        Polygon(outer=ring((0, 0), (2, 0), (2, 2), (0, 2), (0, 0))),
        Polygon(outer=ring((10, 0), (12, 0), (12, 2), (10, 2), (10, 0))),
    ])


@pytest.fixture
def square_geojson():
    return {
        "type": "Polygon",
        "coordinates": [[[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]]],
    }
