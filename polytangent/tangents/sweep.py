"""
Ring Sweep Module
=================

Single pass over one closed ring, tracking the side of the reference point
relative to each edge and picking tangent candidates where that side flips.

Design:
- Pure function (no state between calls)
- State is injected and returned (SweepState), so several rings can be
  swept one after another by threading the result forward
- Closing duplicate kept: it forms a zero-length edge with orientation 0
"""

from dataclasses import dataclass

from polytangent.geometry.orientation import orientation, is_above, is_below
from polytangent.geometry.shapes import Point2D, Ring


@dataclass(frozen=True)
class SweepState:
    """
    Running tangent candidates.

    Attributes:
        rtan: Current right tangent candidate
        ltan: Current left tangent candidate
        eprev: Orientation of the previous edge relative to the reference point
    """

    rtan: Point2D
    ltan: Point2D
    eprev: float


def sweep_ring(ring: Ring, point: Point2D, state: SweepState) -> SweepState:
    """
    Sweep one ring and update the tangent candidates.

    Edge i joins ring[i] to ring[i + 1]; the last edge wraps to ring[0].
    A vertex becomes a right candidate when the previous edge has the point
    on its right (or collinear) and the next edge has it on its left, and a
    left candidate on the opposite flip. A candidate replaces the current one
    unless the current one is already more extreme as seen from the point.

    Args:
        ring: Vertices of the ring
        point: Reference point
        state: Incoming candidates and edge orientation

    Returns:
        Updated SweepState
    """
    rtan, ltan, eprev = state.rtan, state.ltan, state.eprev
    count = len(ring)

    for i, current in enumerate(ring):
        nxt = ring[i + 1] if i < count - 1 else ring[0]
        enext = orientation(current, nxt, point)

        if eprev <= 0 and enext > 0:
            if not is_below(point, current, rtan):
                rtan = current
        elif eprev > 0 and enext <= 0:
            if not is_above(point, current, ltan):
                ltan = current

        eprev = enext

    return SweepState(rtan=rtan, ltan=ltan, eprev=eprev)
