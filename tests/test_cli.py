import json
import logging

import pytest

from polytangent_cli.cli import load_geojson, main


@pytest.fixture
def geometry_file(tmp_path, square_geojson):
    path = tmp_path / "square.geojson"
    path.write_text(json.dumps({"type": "Feature", "properties": {}, "geometry": square_geojson}))
    return path


def coordinates(collection):
    return [f["geometry"]["coordinates"] for f in collection["features"]]


def test_compute_prints_feature_collection(geometry_file, capsys):
    main(["compute", str(geometry_file), "--point", "8", "2"])

    collection = json.loads(capsys.readouterr().out)
    assert collection["type"] == "FeatureCollection"
    assert coordinates(collection) == [[4.0, 4.0], [4.0, 0.0]]


def test_compute_writes_output_file(geometry_file, tmp_path):
    output = tmp_path / "out" / "tangents.geojson"

    main(["compute", str(geometry_file), "--point", "-5", "-5", "--output", str(output)])

    assert coordinates(json.loads(output.read_text())) == [[4.0, 0.0], [0.0, 4.0]]


def test_run_yaml_query(geometry_file, tmp_path):
    config = tmp_path / "query.yaml"
    config.write_text(
        "geometry_path: square.geojson\n"
        "point: [2, 10]\n"
        "output:\n"
        "  path: result.geojson\n"
        "  properties: {query: top}\n"
    )

    main(["run", str(config)])

    collection = json.loads((tmp_path / "result.geojson").read_text())
    assert coordinates(collection) == [[0.0, 4.0], [4.0, 4.0]]
    assert collection["features"][0]["properties"] == {"query": "top"}


def test_missing_geometry_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["compute", str(tmp_path / "missing.geojson"), "--point", "0", "0"])

    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_wrong_geometry_type_exits(tmp_path, capsys):
    path = tmp_path / "line.geojson"
    path.write_text(json.dumps({"type": "LineString", "coordinates": [[0, 0], [1, 1]]}))

    with pytest.raises(SystemExit) as exc:
        main(["compute", str(path), "--point", "0", "0"])

    assert exc.value.code == 1
    assert "Invalid geometry type" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])

    assert exc.value.code == 1
    assert "polytangent-cli" in capsys.readouterr().out


def test_load_geojson_rejects_invalid_json(tmp_path):
    path = tmp_path / "broken.geojson"
    path.write_text("{not json")

    with pytest.raises(ValueError, match="Invalid JSON"):
        load_geojson(path)


def test_malformed_output_config_exits(geometry_file, tmp_path, capsys):
    config = tmp_path / "query.yaml"
    config.write_text("geometry_path: square.geojson\npoint: [8, 2]\noutput: stdout\n")

    with pytest.raises(SystemExit) as exc:
        main(["run", str(config)])

    assert exc.value.code == 1
    assert "Error: output must be a mapping" in capsys.readouterr().err


def test_cli_leaves_library_logger_level(geometry_file, capsys):
    library_logger = logging.getLogger("polytangent.resolver")
    before = library_logger.level

    main(["compute", str(geometry_file), "--point", "8", "2", "--log-level", "debug"])

    assert library_logger.level == before
    assert logging.getLogger("polytangent_cli.resolver").level == logging.DEBUG
