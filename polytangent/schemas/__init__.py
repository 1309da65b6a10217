"""
polytangent Schemas
===================

Bounded Context: Data crossing the library boundary.

Public API
----------
Input:
    parse_point, parse_geometry, GeometryError

Output:
    TangentResult, point_feature, feature_collection
"""

from .geojson import (
    GeometryError,
    parse_point,
    parse_geometry,
    point_feature,
    feature_collection,
)
from .result import TangentResult

__all__ = [
    'GeometryError',
    'parse_point',
    'parse_geometry',
    'point_feature',
    'feature_collection',
    'TangentResult',
]
