"""
Tangent Resolver Module
=======================

Entry point for tangent queries: seeds the sweep state and dispatches to
single-ring or multi-ring sweeping.

Pipeline:
    point + geometry
      -> bounding box test
      -> (point strictly inside bbox) nearest outer-ring vertex
      -> seed SweepState
      -> sweep outer ring(s)
      -> TangentResult

When the reference point falls strictly inside the geometry's bounding box it
may sit in a concave notch, where seeding from the first vertex picks the
wrong tangents. In that case the sweep is seeded from the nearest vertex.
"""

import logging
from typing import Any, Optional, Sequence, Tuple

from polytangent.geometry.measurement import (
    NearestVertex,
    all_vertices,
    bounding_box,
    nearest_vertex,
)
from polytangent.geometry.orientation import orientation
from polytangent.geometry.shapes import Geometry, MultiPolygon, Point2D, Polygon, Ring
from polytangent.logging import LogEvent, StructuredLogger, create_logger
from polytangent.schemas.geojson import parse_geometry, parse_point
from polytangent.schemas.result import TangentResult
from polytangent.tangents.sweep import SweepState, sweep_ring

_logger = create_logger("resolver", level=logging.WARNING)


def locate_vertex(rings: Sequence[Ring], flat_index: int) -> Tuple[int, int]:
    """
    Map an index into the concatenated rings back to (ring, vertex).

    Args:
        rings: Rings in the same order used to flatten them
        flat_index: Position in the concatenation

    Returns:
        (ring_index, vertex_index)

    Raises:
        IndexError: If flat_index is negative or past the last vertex
    """
    if flat_index < 0:
        raise IndexError(f"flat_index must be >= 0, got {flat_index}")

    counted = 0
    for ring_index, ring in enumerate(rings):
        if flat_index < counted + len(ring):
            return ring_index, flat_index - counted
        counted += len(ring)

    raise IndexError(
        f"flat_index {flat_index} out of range for {counted} vertices"
    )


def seed_state(
    point: Point2D,
    geometry: Geometry,
    nearest: Optional[NearestVertex] = None
) -> SweepState:
    """
    Initial candidates and edge orientation for a sweep.

    Polygon:
        rtan = outer[nearest.index] (outer[0] without a nearest vertex)
        ltan = outer[0], or outer[nearest.index] when the nearest vertex
               lies below the reference point
    MultiPolygon:
        rtan = ltan = the nearest vertex located in the outer rings
        (first vertex of the first ring without a nearest vertex)

    eprev comes from the first outer ring's first and last stored vertices.
    With a closed ring these coincide and eprev is 0.

    Args:
        point: Reference point
        geometry: Polygon or MultiPolygon
        nearest: Result of the nearest-vertex lookup, if one was made
            (indices refer to the flattened outer rings)

    Returns:
        SweepState
    """
    index = nearest.index if nearest is not None else 0

    if isinstance(geometry, Polygon):
        outer = geometry.outer
        rtan = outer[index]
        ltan = outer[0]
        if nearest is not None and nearest.vertex.y < point.y:
            ltan = outer[index]
    elif isinstance(geometry, MultiPolygon):
        rings = geometry.outer_rings
        ring_index, vertex_index = locate_vertex(rings, index)
        rtan = ltan = rings[ring_index][vertex_index]
        outer = rings[0]
    else:
        raise TypeError(f"Expected Polygon or MultiPolygon, got {type(geometry).__name__}")

    eprev = orientation(outer[0], outer[-1], point)
    return SweepState(rtan=rtan, ltan=ltan, eprev=eprev)


def polygon_tangents(
    point: Any,
    geometry: Any,
    logger: Optional[StructuredLogger] = None
) -> TangentResult:
    """
    Find the two tangent vertices of a (Multi)Polygon seen from a point.

    Args:
        point: Point2D, [x, y], GeoJSON Point or Point Feature
        geometry: Polygon/MultiPolygon, or GeoJSON (Multi)Polygon geometry
            or Feature
        logger: Structured logger (default: module logger at WARNING)

    Returns:
        TangentResult with the right and left tangent vertices

    Raises:
        GeometryError: If point or geometry cannot be parsed

    Example:
        >>> square = Polygon(outer=[Point2D(0.0, 0.0), Point2D(4.0, 0.0),
        ...                         Point2D(4.0, 4.0), Point2D(0.0, 4.0), Point2D(0.0, 0.0)])
        >>> polygon_tangents([8, 2], square)
        TangentResult(right=Point2D(x=4.0, y=4.0), left=Point2D(x=4.0, y=0.0))
    """
    logger = logger or _logger
    pt = point if isinstance(point, Point2D) else parse_point(point)
    geom = geometry if isinstance(geometry, (Polygon, MultiPolygon)) else parse_geometry(geometry)

    bbox = bounding_box(geom)
    nearest = None
    if bbox.strictly_contains(pt):
        # Holes are never tangent candidates; keep indices aligned with outer rings
        nearest = nearest_vertex(pt, all_vertices(geom, include_holes=False))
        logger.debug(
            event=LogEvent.BBOX_CORRECTION_APPLIED,
            message="Reference point inside bounding box, seeding from nearest vertex",
            metadata={
                'bbox': bbox.to_list(),
                'nearest_index': nearest.index,
                'nearest_vertex': nearest.vertex.to_list(),
            }
        )

    state = seed_state(pt, geom, nearest)

    if isinstance(geom, Polygon):
        rings = (geom.outer,)
    else:
        rings = geom.outer_rings

    seeded_eprev = state.eprev
    for ring_index, ring in enumerate(rings):
        # Every ring starts from the seeded orientation; only candidates carry over
        state = sweep_ring(
            ring,
            pt,
            SweepState(rtan=state.rtan, ltan=state.ltan, eprev=seeded_eprev),
        )
        logger.debug(
            event=LogEvent.RING_SWEPT,
            message="Swept outer ring",
            metadata={
                'ring_index': ring_index,
                'vertices': len(ring),
                'rtan': state.rtan.to_list(),
                'ltan': state.ltan.to_list(),
            }
        )

    result = TangentResult(right=state.rtan, left=state.ltan)
    logger.debug(
        event=LogEvent.TANGENTS_COMPUTED,
        message="Resolved tangent pair",
        metadata={
            'point': pt.to_list(),
            'rings': len(rings),
            'corrected': nearest is not None,
            'right': result.right.to_list(),
            'left': result.left.to_list(),
        }
    )
    return result
