import json
import logging
from pathlib import Path

import pytest

from polytangent.config import OutputConfig, QueryConfig


@pytest.fixture
def geometry_file(tmp_path, square_geojson):
    path = tmp_path / "shapes" / "square.geojson"
    path.parent.mkdir()
    path.write_text(json.dumps(square_geojson))
    return path


def write_yaml(tmp_path, text):
    path = tmp_path / "query.yaml"
    path.write_text(text)
    return path


def test_from_yaml_resolves_relative_paths(tmp_path, geometry_file):
    config_path = write_yaml(tmp_path, """
geometry_path: "shapes/square.geojson"
point: [8, 2]
log_level: debug
output:
  path: "out/tangents.geojson"
  indent: 4
  properties:
    source: "square"
""")

    config = QueryConfig.from_yaml(config_path)

    assert config.geometry_path == geometry_file
    assert config.point == (8.0, 2.0)
    assert config.log_level == "DEBUG"
    assert config.level == logging.DEBUG
    assert config.output.path == tmp_path / "out" / "tangents.geojson"
    assert config.output.indent == 4
    assert config.output.properties == {"source": "square"}


def test_from_yaml_defaults(tmp_path, geometry_file):
    config = QueryConfig.from_yaml(write_yaml(tmp_path, f"""
geometry_path: "{geometry_file}"
point: [1, 2]
"""))

    assert config.output == OutputConfig()
    assert config.log_level == "INFO"


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        QueryConfig.from_yaml(tmp_path / "nope.yaml")


def test_missing_geometry_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Geometry file not found"):
        QueryConfig.from_yaml(write_yaml(tmp_path, "geometry_path: missing.geojson\npoint: [1, 2]\n"))


@pytest.mark.parametrize("text, message", [
    ("point: [1, 2]\n", "Missing required config field"),
    ("- just\n- a list\n", "mapping"),
    ("geometry_path: shapes/square.geojson\npoint: [1, x]\n", "Invalid point"),
    ("geometry_path: shapes/square.geojson\npoint: [1, 2, 3]\n", "exactly 2"),
    ("geometry_path: shapes/square.geojson\npoint: [1, 2]\nlog_level: loud\n", "log_level"),
    ("geometry_path: shapes/square.geojson\npoint: [1, 2]\noutput: {indent: 12}\n", "indent"),
    ("geometry_path: [unclosed\n", "Invalid YAML"),
    ("geometry_path: shapes/square.geojson\npoint: [1, 2]\noutput: stdout\n", "output must be a mapping"),
    ("geometry_path: shapes/square.geojson\npoint: [1, 2]\noutput: {indent: '2'}\n", "indent must be an integer"),
])
def test_invalid_config(tmp_path, geometry_file, text, message):
    with pytest.raises(ValueError, match=message):
        QueryConfig.from_yaml(write_yaml(tmp_path, text))


def test_geometry_path_must_be_file(tmp_path):
    with pytest.raises(ValueError, match="must be a file"):
        QueryConfig(geometry_path=Path(tmp_path), point=(0.0, 0.0))


def test_point_must_be_finite(geometry_file):
    with pytest.raises(ValueError, match="finite"):
        QueryConfig(geometry_path=geometry_file, point=(float("nan"), 0.0))
