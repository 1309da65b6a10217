"""
polytangent CLI - Command-line interface for tangent queries.

Usage:
    polytangent-cli compute shapes/harbour.geojson --point 61 5
    polytangent-cli compute shapes/harbour.geojson --point 61 5 --output tangents.geojson
    polytangent-cli run config/queries/harbour.yaml
"""

from .cli import main

__version__ = "1.0.0"

__all__ = ["main"]
