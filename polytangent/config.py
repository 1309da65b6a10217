"""
Configuration schema for tangent queries.

A query names a GeoJSON geometry file, a reference point and where to write
the resulting FeatureCollection. Loaded from YAML and validated at startup.
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import yaml


@dataclass(frozen=True)
class OutputConfig:
    """Where and how to write the tangent FeatureCollection."""

    path: Optional[Path] = None  # None = stdout
    indent: int = 2
    properties: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate output configuration."""
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ValueError(
                f"indent must be an integer, got {self.indent!r}"
            )

        if not 0 <= self.indent <= 8:
            raise ValueError(
                f"indent must be in [0, 8], got {self.indent}"
            )

        if not isinstance(self.properties, dict):
            raise ValueError(
                f"properties must be a mapping, got {type(self.properties).__name__}"
            )


@dataclass(frozen=True)
class QueryConfig:
    """
    Main configuration for a tangent query.

    Immutable after construction (frozen dataclass).
    """

    geometry_path: Path
    point: Tuple[float, float]
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate query configuration."""
        if len(self.point) != 2:
            raise ValueError(
                f"point must have exactly 2 coordinates, got {len(self.point)}"
            )
        if not all(math.isfinite(c) for c in self.point):
            raise ValueError(f"point coordinates must be finite, got {self.point}")

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_levels:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(valid_levels)}"
            )

        if not self.geometry_path.exists():
            raise FileNotFoundError(
                f"Geometry file not found: {self.geometry_path}\n"
                f"Create the file or update 'geometry_path' in config"
            )

        if not self.geometry_path.is_file():
            raise ValueError(
                f"geometry_path must be a file, got directory: {self.geometry_path}"
            )

    @property
    def level(self) -> int:
        """log_level as a logging module constant."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "QueryConfig":
        """
        Load configuration from YAML file.

        Relative paths are resolved against the YAML file's directory.

        Example YAML:
            geometry_path: "shapes/harbour.geojson"
            point: [61, 5]
            log_level: "INFO"

            output:
              path: "out/tangents.geojson"   # omit for stdout
              indent: 2
              properties:
                source: "harbour"

        Raises:
            FileNotFoundError: If the YAML or geometry file doesn't exist
            ValueError: If YAML is invalid or values fail validation
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

        try:
            geometry_path = Path(data["geometry_path"])
            point_data = data["point"]
        except KeyError as e:
            raise ValueError(f"Missing required config field: {e}")

        base_dir = yaml_path.parent
        if not geometry_path.is_absolute():
            geometry_path = base_dir / geometry_path

        output_data = data.get("output") or {}
        if not isinstance(output_data, dict):
            raise ValueError(
                f"output must be a mapping, got {type(output_data).__name__}"
            )

        output_path = output_data.get("path")
        if output_path is not None:
            output_path = Path(output_path)
            if not output_path.is_absolute():
                output_path = base_dir / output_path

        output = OutputConfig(
            path=output_path,
            indent=output_data.get("indent", 2),
            properties=output_data.get("properties") or {},
        )

        try:
            point = tuple(float(c) for c in point_data)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid point: {point_data!r}") from e

        return cls(
            geometry_path=geometry_path,
            point=point,
            output=output,
            log_level=str(data.get("log_level", "INFO")).upper(),
        )
