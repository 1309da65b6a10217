"""
Tangent Result Schema
=====================

Immutable tangent pair with JSON / GeoJSON serialization.

Design:
- Frozen dataclass (value object)
- to_dict() / from_dict() for labeled points
- to_feature_collection() for GeoJSON consumers: [right, left]
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from polytangent.geometry.shapes import Point2D
from polytangent.schemas.geojson import feature_collection, point_feature


@dataclass(frozen=True)
class TangentResult:
    """
    Tangent vertices of a (Multi)Polygon seen from a reference point.

    Both points are vertices of the input geometry, never interpolated.

    Attributes:
        right: Right tangent vertex
        left: Left tangent vertex

    Example:
        >>> result = TangentResult(right=Point2D(4, 4), left=Point2D(4, 0))
        >>> result.to_dict()
        {'right': [4, 4], 'left': [4, 0]}
    """

    right: Point2D
    left: Point2D

    def as_tuple(self) -> Tuple[Point2D, Point2D]:
        """(right, left)."""
        return self.right, self.left

    def to_dict(self) -> Dict[str, list]:
        """Serialize to JSON-compatible dict."""
        return {'right': self.right.to_list(), 'left': self.left.to_list()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'TangentResult':
        """
        Deserialize from dict.

        Args:
            data: Dictionary with keys: right, left (each [x, y])

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(
                right=Point2D.from_sequence(data['right']),
                left=Point2D.from_sequence(data['left']),
            )
        except KeyError as e:
            raise ValueError(f"Missing required TangentResult field: {e}")
        except (TypeError, ValueError, IndexError) as e:
            raise ValueError(f"Invalid TangentResult data: {e}")

    def to_feature_collection(
        self,
        properties: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Serialize as a GeoJSON FeatureCollection of two Point features.

        Args:
            properties: Properties copied onto both features

        Returns:
            FeatureCollection with features [right, left]
        """
        return feature_collection([
            point_feature(self.right, properties),
            point_feature(self.left, properties),
        ])
