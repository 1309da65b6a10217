"""
Geometry Layer
==============

Bounded Context: Pure geometric values and vertex queries.

Responsibilities:
- Value types (Point2D, BoundingBox, Polygon, MultiPolygon)
- Orientation predicate (left / right / collinear)
- Bounding box, vertex flattening, nearest vertex
- NO tangent logic, NO I/O

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Zero side effects
"""

from polytangent.geometry.shapes import (
    Point2D,
    Ring,
    BoundingBox,
    Polygon,
    MultiPolygon,
    Geometry,
)
from polytangent.geometry.orientation import orientation, is_above, is_below
from polytangent.geometry.measurement import (
    NearestVertex,
    all_vertices,
    bounding_box,
    nearest_vertex,
)

__all__ = [
    "Point2D",
    "Ring",
    "BoundingBox",
    "Polygon",
    "MultiPolygon",
    "Geometry",
    "orientation",
    "is_above",
    "is_below",
    "NearestVertex",
    "all_vertices",
    "bounding_box",
    "nearest_vertex",
]
