"""
Tangent Demo
============

Demonstrates polytangent usage on a concave polygon.

Example: Tangents from a point to the right of the shape, then from a point
inside one of its notches (bounding-box correction path).
"""

import json
import logging

from polytangent import Point2D, Polygon, polygon_tangents
from polytangent.logging import StructuredLogger

VERTICES = [(11, 0), (22, 4), (31, 0), (31, 11), (21, 15), (11, 11), (11, 0)]


def main():
    """Run two tangent queries and print the results."""

    # 1. Build the polygon (closed ring: last vertex repeats the first)
    polygon = Polygon(outer=[Point2D(x, y) for x, y in VERTICES])

    # 2. Own resolver logger at DEBUG to show the sweep (library default untouched)
    logger = StructuredLogger("resolver", level=logging.DEBUG, logger_name="run_tangents.resolver")

    # 3. Point outside the bounding box
    outside = polygon_tangents(Point2D(61, 5), polygon, logger=logger)
    print("Tangents from (61, 5):")
    print(json.dumps(outside.to_feature_collection({"query": "outside"}), indent=2))

    # 4. Point in the bottom notch, inside the bounding box
    notch = polygon_tangents(Point2D(22, 2), polygon, logger=logger)
    print("Tangents from (22, 2):")
    print(json.dumps(notch.to_dict(), indent=2))


if __name__ == "__main__":
    main()
