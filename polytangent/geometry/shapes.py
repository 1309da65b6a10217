"""
Geometric Shapes Module
========================

Pure value types for tangent queries - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Named coordinates (Point2D) instead of bare tuples
- Rings keep their closing duplicate exactly as stored
- Polygon / MultiPolygon form the geometry variant dispatched by the resolver
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union


@dataclass(frozen=True)
class Point2D:
    """
    Immutable 2D point.

    Compared and hashed by value, never by identity.

    Attributes:
        x: Horizontal coordinate (longitude for GeoJSON input)
        y: Vertical coordinate (latitude for GeoJSON input)
    """

    x: float
    y: float

    @classmethod
    def from_sequence(cls, coords: Sequence[float]) -> "Point2D":
        """
        Build a point from a coordinate sequence.

        Extra ordinates (altitude, measure) are ignored.

        Args:
            coords: Sequence with at least two numbers

        Returns:
            Point2D instance
        """
        return cls(x=float(coords[0]), y=float(coords[1]))

    def to_list(self) -> list:
        """Serialize to a GeoJSON position."""
        return [self.x, self.y]


Ring = Tuple[Point2D, ...]


def _as_ring(points: Sequence[Point2D]) -> Ring:
    return tuple(points)


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned extent of a geometry.

    Invariants:
        - min_x <= max_x
        - min_y <= max_y
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        """Validate invariants."""
        if self.min_x > self.max_x:
            raise ValueError(f"min_x ({self.min_x}) must be <= max_x ({self.max_x})")
        if self.min_y > self.max_y:
            raise ValueError(f"min_y ({self.min_y}) must be <= max_y ({self.max_y})")

    def strictly_contains(self, point: Point2D) -> bool:
        """
        Check if a point lies strictly inside the box on both axes.

        Points on an edge are outside.
        """
        return (
            self.min_x < point.x < self.max_x
            and self.min_y < point.y < self.max_y
        )

    def to_list(self) -> list:
        """Serialize as [min_x, min_y, max_x, max_y] (GeoJSON bbox order)."""
        return [self.min_x, self.min_y, self.max_x, self.max_y]


@dataclass(frozen=True)
class Polygon:
    """
    Polygon with one outer ring and optional holes.

    Only the outer ring is swept for tangents. Holes take part in the
    bounding box but are never tangent candidates.

    Attributes:
        outer: Outer boundary ring
        holes: Interior rings
    """

    outer: Ring
    holes: Tuple[Ring, ...] = ()

    def __post_init__(self):
        """Normalise rings to tuples (callers may pass lists)."""
        object.__setattr__(self, "outer", _as_ring(self.outer))
        object.__setattr__(self, "holes", tuple(_as_ring(h) for h in self.holes))

    @property
    def rings(self) -> Tuple[Ring, ...]:
        """Outer ring followed by holes."""
        return (self.outer,) + self.holes


@dataclass(frozen=True)
class MultiPolygon:
    """
    Ordered collection of polygons.

    Attributes:
        polygons: Member polygons in input order
    """

    polygons: Tuple[Polygon, ...]

    def __post_init__(self):
        object.__setattr__(self, "polygons", tuple(self.polygons))

    @property
    def outer_rings(self) -> Tuple[Ring, ...]:
        """Outer ring of every polygon, in input order."""
        return tuple(polygon.outer for polygon in self.polygons)


Geometry = Union[Polygon, MultiPolygon]
