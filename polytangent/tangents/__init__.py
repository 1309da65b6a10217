"""
Tangents Layer
==============

Bounded Context: Tangent lines from an external point to a (Multi)Polygon.

Responsibilities:
- Ring sweep (sign changes of the orientation predicate)
- Seeding, bbox / nearest-vertex correction, multi-ring dispatch
"""

from polytangent.tangents.sweep import SweepState, sweep_ring
from polytangent.tangents.resolver import locate_vertex, polygon_tangents, seed_state

__all__ = [
    "SweepState",
    "sweep_ring",
    "locate_vertex",
    "polygon_tangents",
    "seed_state",
]
