import argparse
import logging
import sys
from typing import Optional, Sequence

from geoprim import (
    GeometryError,
    format_result,
    get_intersect,
    parse_primitive,
    result_kind,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Intersect two 2D primitives")
    parser.add_argument("first", help='First primitive, e.g. "Segment: ([0, 0], [10, 0])"')
    parser.add_argument("second", help='Second primitive, e.g. "Line: ([5, -1], [5, 1])"')
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report whether the primitives intersect",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        first = parse_primitive(args.first)
        second = parse_primitive(args.second)
    except (SyntaxError, GeometryError) as exc:
        logger.error("Could not read primitive: %s", exc)
        return 2
    logger.info("Intersecting %s with %s", first, second)

    try:
        result = get_intersect(first, second)
    except GeometryError as exc:
        logger.error("Intersection failed: %s", exc)
        return 1
    logger.info("Result kind: %s", result_kind(result).value)

    if args.check:
        print("true" if result is not None else "false")
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
