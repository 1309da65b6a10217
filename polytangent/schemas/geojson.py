"""
GeoJSON Input Schema
====================

Bounded Context: Input validation at the system boundary.

Turns caller input (GeoJSON geometries, Features, coordinate pairs) into the
typed values the tangent core consumes. All validation lives here; the core
itself never raises for malformed shapes.

Accepted point input:
    Point2D, [x, y], (x, y), numpy array,
    {"type": "Point", "coordinates": [x, y]},
    {"type": "Feature", "geometry": {"type": "Point", ...}}

Accepted geometry input:
    Polygon, MultiPolygon,
    {"type": "Polygon", "coordinates": [[[x, y], ...], ...]},
    {"type": "MultiPolygon", "coordinates": [[[[x, y], ...], ...], ...]},
    {"type": "Feature", "geometry": <Polygon | MultiPolygon>}
"""

import math
from typing import Any, Dict, Mapping, Optional, Sequence

import numpy as np

from polytangent.geometry.shapes import (
    Geometry,
    MultiPolygon,
    Point2D,
    Polygon,
    Ring,
)


class GeometryError(ValueError):
    """Raised when a point or geometry cannot be used for a tangent query."""
    pass


MIN_RING_POSITIONS = 3


def _unwrap_feature(obj: Any, what: str) -> Any:
    if obj is None:
        raise GeometryError(f"{what} is required")
    if isinstance(obj, Mapping) and obj.get("type") == "Feature":
        geometry = obj.get("geometry")
        if geometry is None:
            raise GeometryError(f"{what} Feature has no geometry")
        return geometry
    return obj


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple, np.ndarray))


def _parse_position(coords: Any) -> Point2D:
    if not _is_sequence(coords) or len(coords) < 2:
        raise GeometryError(f"Position must have at least 2 coordinates, got {coords!r}")

    values = []
    for value in coords[:2]:
        if isinstance(value, bool):
            raise GeometryError(f"Coordinate must be a number, got {value!r}")
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise GeometryError(f"Coordinate must be a number, got {value!r}") from e
        if not math.isfinite(number):
            raise GeometryError(f"Coordinate must be finite, got {value!r}")
        values.append(number)

    return Point2D(x=values[0], y=values[1])


def _parse_ring(coords: Any) -> Ring:
    if not _is_sequence(coords):
        raise GeometryError(f"Ring must be a list of positions, got {type(coords).__name__}")
    if len(coords) < MIN_RING_POSITIONS:
        raise GeometryError(
            f"Ring must have at least {MIN_RING_POSITIONS} positions, got {len(coords)}"
        )
    return tuple(_parse_position(position) for position in coords)


def _parse_polygon(coords: Any) -> Polygon:
    if not _is_sequence(coords) or len(coords) == 0:
        raise GeometryError("Polygon must have at least one ring")
    rings = [_parse_ring(ring) for ring in coords]
    return Polygon(outer=rings[0], holes=tuple(rings[1:]))


def parse_point(obj: Any) -> Point2D:
    """
    Parse a point-like value.

    Args:
        obj: Point2D, coordinate pair, GeoJSON Point, or Point Feature

    Returns:
        Point2D

    Raises:
        GeometryError: If obj is missing, not a Point, or has bad coordinates
    """
    obj = _unwrap_feature(obj, "Point")

    if isinstance(obj, Point2D):
        return obj

    if isinstance(obj, Mapping):
        geom_type = obj.get("type")
        if geom_type != "Point":
            raise GeometryError(f"Expected Point geometry, got {geom_type!r}")
        if "coordinates" not in obj:
            raise GeometryError("Point geometry has no coordinates")
        return _parse_position(obj["coordinates"])

    return _parse_position(obj)


def parse_geometry(obj: Any) -> Geometry:
    """
    Parse a polygon-like value.

    Args:
        obj: Polygon/MultiPolygon, GeoJSON geometry, or Feature wrapping one

    Returns:
        Polygon or MultiPolygon

    Raises:
        GeometryError: If obj is missing, of another type, or malformed
    """
    obj = _unwrap_feature(obj, "Geometry")

    if isinstance(obj, (Polygon, MultiPolygon)):
        return obj

    if not isinstance(obj, Mapping):
        raise GeometryError(
            f"Expected GeoJSON Polygon or MultiPolygon, got {type(obj).__name__}"
        )

    geom_type = obj.get("type")
    if geom_type not in ("Polygon", "MultiPolygon"):
        raise GeometryError(
            f"Invalid geometry type: {geom_type!r}. Must be 'Polygon' or 'MultiPolygon'"
        )
    if "coordinates" not in obj:
        raise GeometryError(f"{geom_type} geometry has no coordinates")
    coords = obj["coordinates"]

    if geom_type == "Polygon":
        return _parse_polygon(coords)

    if not _is_sequence(coords) or len(coords) == 0:
        raise GeometryError("MultiPolygon must have at least one polygon")
    return MultiPolygon(polygons=tuple(_parse_polygon(p) for p in coords))


def point_feature(point: Point2D, properties: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Build a GeoJSON Point Feature."""
    return {
        "type": "Feature",
        "properties": dict(properties or {}),
        "geometry": {"type": "Point", "coordinates": point.to_list()},
    }


def feature_collection(features: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """Build a GeoJSON FeatureCollection."""
    return {"type": "FeatureCollection", "features": list(features)}
