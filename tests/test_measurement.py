import pytest

from polytangent.geometry import (
    BoundingBox,
    MultiPolygon,
    Point2D,
    Polygon,
    all_vertices,
    bounding_box,
    nearest_vertex,
)

from conftest import ring


@pytest.fixture
def holed():
    return Polygon(
        outer=ring((0, 0), (10, 0), (10, 10), (0, 10), (0, 0)),
        holes=[ring((4, 4), (6, 4), (6, 6), (4, 6), (4, 4))],
    )


def test_polygon_normalises_lists_to_tuples(holed):
    assert isinstance(holed.outer, tuple)
    assert isinstance(holed.holes, tuple)
    assert isinstance(holed.holes[0], tuple)
    assert holed.rings == (holed.outer, holed.holes[0])


def test_point_from_sequence_drops_extra_ordinates():
    assert Point2D.from_sequence([1, 2, 300]) == Point2D(1.0, 2.0)


def test_bounding_box_invariant():
    with pytest.raises(ValueError, match="min_x"):
        BoundingBox(min_x=5, min_y=0, max_x=1, max_y=1)
    with pytest.raises(ValueError, match="min_y"):
        BoundingBox(min_x=0, min_y=5, max_x=1, max_y=1)


def test_bounding_box_of_polygon(square):
    assert bounding_box(square) == BoundingBox(0, 0, 4, 4)


def test_bounding_box_of_multipolygon(two_squares):
    assert bounding_box(two_squares).to_list() == [0, 0, 12, 2]


def test_strictly_contains_excludes_edges(square):
    bbox = bounding_box(square)
    assert bbox.strictly_contains(Point2D(2, 2))
    assert not bbox.strictly_contains(Point2D(4, 2))
    assert not bbox.strictly_contains(Point2D(2, 0))
    assert not bbox.strictly_contains(Point2D(8, 2))


def test_all_vertices_keeps_closing_duplicates_and_order(holed):
    vertices = all_vertices(holed)
    assert len(vertices) == 10
    assert vertices[0] == vertices[4] == Point2D(0, 0)
    assert vertices[5] == Point2D(4, 4)


def test_all_vertices_without_holes(holed, two_squares):
    assert all_vertices(holed, include_holes=False) == list(holed.outer)
    vertices = all_vertices(two_squares, include_holes=False)
    assert len(vertices) == 10
    assert vertices[5] == Point2D(10, 0)


def test_all_vertices_rejects_other_types():
    with pytest.raises(TypeError):
        all_vertices([Point2D(0, 0)])


def test_nearest_vertex_breaks_ties_by_first_occurrence(square):
    nearest = nearest_vertex(Point2D(2, 2), all_vertices(square))
    assert nearest.index == 0
    assert nearest.vertex == Point2D(0, 0)
    assert nearest.distance == pytest.approx(8 ** 0.5)


def test_nearest_vertex_picks_closest():
    vertices = ring((0, 0), (5, 5), (1, 9))
    nearest = nearest_vertex(Point2D(4, 6), vertices)
    assert nearest.index == 1
    assert nearest.vertex == Point2D(5, 5)


def test_nearest_vertex_requires_vertices():
    with pytest.raises(ValueError):
        nearest_vertex(Point2D(0, 0), [])


def test_multipolygon_outer_rings(two_squares):
    assert len(two_squares.outer_rings) == 2
    assert two_squares.outer_rings[1][0] == Point2D(10, 0)
    assert isinstance(MultiPolygon(polygons=[]).polygons, tuple)
