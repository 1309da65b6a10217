"""
polytangent
===========

Bounded Context: Tangent vertices of a (Multi)Polygon seen from an external
point.

Architecture:

    polytangent/
    ├── geometry/          # Pure values and predicates (immutable, stateless)
    │   ├── shapes.py      # Point2D, BoundingBox, Polygon, MultiPolygon
    │   ├── orientation.py # orientation, is_above, is_below
    │   └── measurement.py # bounding_box, all_vertices, nearest_vertex
    │
    ├── tangents/          # Tangent algorithm
    │   ├── sweep.py       # SweepState, sweep_ring
    │   └── resolver.py    # polygon_tangents (orchestration)
    │
    ├── schemas/           # GeoJSON in, TangentResult out
    ├── logging/           # Structured JSON logging
    └── config.py          # YAML query configuration

Usage:

    from polytangent import polygon_tangents

    polygon = {
        "type": "Polygon",
        "coordinates": [[[11, 0], [22, 4], [31, 0], [31, 11],
                         [21, 15], [11, 11], [11, 0]]],
    }
    result = polygon_tangents([61, 5], polygon)
    result.right, result.left          # Point2D(21, 15), Point2D(31, 0)
    result.to_feature_collection()     # GeoJSON FeatureCollection
"""

# Geometry Layer (immutable, stateless)
from polytangent.geometry import (
    Point2D,
    BoundingBox,
    Polygon,
    MultiPolygon,
    orientation,
    is_above,
    is_below,
    bounding_box,
    all_vertices,
    nearest_vertex,
)

# Schemas
from polytangent.schemas import GeometryError, TangentResult, parse_point, parse_geometry

# Tangents
from polytangent.tangents import SweepState, sweep_ring, polygon_tangents

__all__ = [
    # Geometry
    "Point2D",
    "BoundingBox",
    "Polygon",
    "MultiPolygon",
    "orientation",
    "is_above",
    "is_below",
    "bounding_box",
    "all_vertices",
    "nearest_vertex",
    # Schemas
    "GeometryError",
    "TangentResult",
    "parse_point",
    "parse_geometry",
    # Tangents
    "SweepState",
    "sweep_ring",
    "polygon_tangents",
]

__version__ = "1.0.0"
