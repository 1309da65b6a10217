"""
Geometry Measurement Module
===========================

Stateless queries over a geometry's vertices: extent, flattening and
nearest-vertex search.

Design:
- numpy for the vectorised min/max and distance passes
- Deterministic traversal order (polygons in input order, outer ring then
  holes, closing duplicates kept)
- Ties resolved by first occurrence in that order
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from polytangent.geometry.shapes import (
    BoundingBox,
    Geometry,
    MultiPolygon,
    Point2D,
    Polygon,
    Ring,
)


@dataclass(frozen=True)
class NearestVertex:
    """
    Result of a nearest-vertex search.

    Attributes:
        vertex: Closest vertex
        index: Position of the vertex in the searched sequence
        distance: Euclidean distance to the query point
    """

    vertex: Point2D
    index: int
    distance: float


def _rings(geometry: Geometry, include_holes: bool = True) -> List[Ring]:
    if isinstance(geometry, Polygon):
        polygons = (geometry,)
    elif isinstance(geometry, MultiPolygon):
        polygons = geometry.polygons
    else:
        raise TypeError(f"Expected Polygon or MultiPolygon, got {type(geometry).__name__}")

    rings: List[Ring] = []
    for polygon in polygons:
        rings.extend(polygon.rings if include_holes else (polygon.outer,))
    return rings


def _as_array(points: Sequence[Point2D]) -> np.ndarray:
    return np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)


def all_vertices(geometry: Geometry, include_holes: bool = True) -> List[Point2D]:
    """
    Flatten every ring of a geometry into one vertex list.

    Order: polygons in input order; within a polygon the outer ring first,
    then its holes. Closing duplicates are kept, so indices line up with the
    stored rings.

    Args:
        geometry: Polygon or MultiPolygon
        include_holes: Include interior rings (default: True)

    Returns:
        Flattened vertices
    """
    return [vertex for ring in _rings(geometry, include_holes) for vertex in ring]


def bounding_box(geometry: Geometry) -> BoundingBox:
    """
    Compute the axis-aligned extent of a geometry (holes included).

    Raises:
        ValueError: If the geometry has no vertices
    """
    coords = _as_array(all_vertices(geometry))
    if len(coords) == 0:
        raise ValueError("Cannot compute bounding box of an empty geometry")

    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)
    return BoundingBox(
        min_x=float(min_x),
        min_y=float(min_y),
        max_x=float(max_x),
        max_y=float(max_y),
    )


def nearest_vertex(point: Point2D, vertices: Sequence[Point2D]) -> NearestVertex:
    """
    Find the vertex closest to a point.

    Args:
        point: Query point
        vertices: Candidate vertices

    Returns:
        NearestVertex with the first closest vertex and its index

    Raises:
        ValueError: If vertices is empty
    """
    if len(vertices) == 0:
        raise ValueError("nearest_vertex requires at least one vertex")

    coords = _as_array(vertices)
    distances = np.hypot(coords[:, 0] - point.x, coords[:, 1] - point.y)

    # argmin returns the first index among equal minima
    index = int(np.argmin(distances))
    return NearestVertex(
        vertex=vertices[index],
        index=index,
        distance=float(distances[index]),
    )
