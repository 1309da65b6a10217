"""
Structured Log Event Types
==========================

Typed event names for structured logging.

Event Naming Convention:
    <category>.<action>

    category: tangents, geometry, config, result, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names.

    Categories:
    - tangents.*: Tangent computation steps
    - geometry.*, config.*, result.*: Input and output handling
    - error.*: Error conditions
    """

    # ========== Tangent Events ==========
    TANGENTS_COMPUTED = "tangents.computed"
    """Tangent pair resolved for a reference point."""

    BBOX_CORRECTION_APPLIED = "tangents.bbox_correction"
    """Reference point inside the geometry's bbox; seeded from nearest vertex."""

    RING_SWEPT = "tangents.ring_swept"
    """One outer ring swept."""

    # ========== I/O Events ==========
    GEOMETRY_LOADED = "geometry.loaded"
    """GeoJSON geometry read and parsed."""

    CONFIG_LOADED = "config.loaded"
    """Query configuration loaded from YAML."""

    RESULT_WRITTEN = "result.written"
    """Tangent FeatureCollection written to its destination."""

    # ========== Error Events ==========
    GEOMETRY_ERROR = "error.geometry"
    """Input geometry or point rejected."""

    CONFIG_ERROR = "error.config"
    """Query configuration rejected."""


TANGENT_EVENTS = {
    LogEvent.TANGENTS_COMPUTED,
    LogEvent.BBOX_CORRECTION_APPLIED,
    LogEvent.RING_SWEPT,
}

IO_EVENTS = {
    LogEvent.GEOMETRY_LOADED,
    LogEvent.CONFIG_LOADED,
    LogEvent.RESULT_WRITTEN,
}

ERROR_EVENTS = {
    LogEvent.GEOMETRY_ERROR,
    LogEvent.CONFIG_ERROR,
}
