"""
polytangent CLI - Main entry point.

Reads a GeoJSON (Multi)Polygon, computes the tangent vertices seen from a
reference point and prints them as a GeoJSON FeatureCollection.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from polytangent.config import OutputConfig, QueryConfig
from polytangent.logging import LogEvent, StructuredLogger, create_logger
from polytangent.schemas import GeometryError, parse_geometry
from polytangent.tangents import polygon_tangents


def load_geojson(path: Path) -> Dict[str, Any]:
    """
    Load a GeoJSON document.

    Args:
        path: Path to a .geojson / .json file

    Returns:
        Parsed JSON object

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"GeoJSON file not found: {path}")

    try:
        with open(path) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")


def write_result(
    collection: Dict[str, Any],
    output: OutputConfig,
    logger: StructuredLogger
) -> None:
    """Write a FeatureCollection to output.path, or stdout when unset."""
    text = json.dumps(collection, indent=output.indent or None)

    if output.path is None:
        print(text)
        return

    output.path.parent.mkdir(parents=True, exist_ok=True)
    output.path.write_text(text + "\n")
    logger.info(
        event=LogEvent.RESULT_WRITTEN,
        message="Wrote tangent FeatureCollection",
        metadata={'path': str(output.path)}
    )


def run_query(config: QueryConfig, logger: StructuredLogger) -> Dict[str, Any]:
    """
    Execute one tangent query.

    Args:
        config: Validated query configuration
        logger: CLI logger

    Returns:
        The FeatureCollection that was written
    """
    document = load_geojson(config.geometry_path)
    try:
        geometry = parse_geometry(document)
    except GeometryError as e:
        logger.error(
            event=LogEvent.GEOMETRY_ERROR,
            message="Rejected input geometry",
            metadata={'path': str(config.geometry_path)},
            exc_info=e
        )
        raise

    logger.info(
        event=LogEvent.GEOMETRY_LOADED,
        message="Loaded geometry",
        metadata={
            'path': str(config.geometry_path),
            'type': type(geometry).__name__,
        }
    )

    result = polygon_tangents(
        list(config.point),
        geometry,
        logger=StructuredLogger(
            "resolver",
            level=config.level,
            logger_name="polytangent_cli.resolver",
        ),
    )
    collection = result.to_feature_collection(config.output.properties)
    write_result(collection, config.output, logger)
    return collection


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polytangent-cli",
        description="polytangent CLI - Tangent vertices of a (Multi)Polygon from a point",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Tangents from (61, 5), printed to stdout
  polytangent-cli compute shapes/harbour.geojson --point 61 5

  # Write to a file
  polytangent-cli compute shapes/harbour.geojson --point 61 5 --output tangents.geojson

  # Run a query described in YAML
  polytangent-cli run config/queries/harbour.yaml
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    compute = subparsers.add_parser('compute', help='Compute tangents for one point')
    compute.add_argument('geometry', help='Path to GeoJSON Polygon/MultiPolygon (geometry or Feature)')
    compute.add_argument(
        '--point',
        nargs=2,
        type=float,
        required=True,
        metavar=('X', 'Y'),
        help='Reference point coordinates'
    )
    compute.add_argument('--output', help='Output path (default: stdout)')
    compute.add_argument('--indent', type=int, default=2, help='JSON indent (default: 2)')
    compute.add_argument(
        '--log-level',
        default='INFO',
        help='Logging level (default: INFO)'
    )

    run = subparsers.add_parser('run', help='Run a query from YAML config')
    run.add_argument('config', help='Path to query config YAML')

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = _load_config(args)

        logger = create_logger("cli", level=config.level)
        if args.command == 'run':
            logger.info(
                event=LogEvent.CONFIG_LOADED,
                message="Loaded query config",
                metadata={'path': args.config}
            )

        run_query(config, logger)

    except (GeometryError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _load_config(args: argparse.Namespace) -> QueryConfig:
    try:
        if args.command == 'compute':
            return QueryConfig(
                geometry_path=Path(args.geometry),
                point=tuple(args.point),
                output=OutputConfig(
                    path=Path(args.output) if args.output else None,
                    indent=args.indent,
                ),
                log_level=args.log_level.upper(),
            )
        return QueryConfig.from_yaml(Path(args.config))
    except (FileNotFoundError, ValueError) as e:
        create_logger("cli").error(
            event=LogEvent.CONFIG_ERROR,
            message="Rejected query config",
            metadata={'command': args.command},
            exc_info=e
        )
        raise


if __name__ == '__main__':
    main()
