"""Shapes of intersection results.

An intersection is one of:

* ``None`` when the primitives do not meet,
* a single primitive (a :class:`Point`, an overlapping :class:`Line`,
  :class:`Ray` or :class:`Segment`, a coinciding :class:`Circle` or a
  coinciding :class:`Polygon`),
* a ``tuple`` of two points, sorted by ``(x, y)``, for circle crossings,
* a ``list`` of points and segments for polygon boundaries, in edge
  traversal order.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .primitives import Kind, Point, Primitive, Segment

PointPair = Tuple[Point, Point]
Pieces = List[Union[Point, Segment]]
IntersectionResult = Optional[Union[Primitive, PointPair, Pieces]]


class ResultKind(str, Enum):
    EMPTY = "empty"
    POINT = "point"
    LINEAR = "linear"
    SHAPE = "shape"
    PAIR = "pair"
    SEQUENCE = "sequence"


_LINEAR_KINDS = {Kind.LINE, Kind.RAY, Kind.SEGMENT}


def result_kind(result: IntersectionResult) -> ResultKind:
    if result is None:
        return ResultKind.EMPTY
    if isinstance(result, tuple):
        return ResultKind.PAIR
    if isinstance(result, list):
        return ResultKind.SEQUENCE
    if result.kind is Kind.POINT:
        return ResultKind.POINT
    if result.kind in _LINEAR_KINDS:
        return ResultKind.LINEAR
    return ResultKind.SHAPE


def result_pieces(result: IntersectionResult) -> List[Primitive]:
    """Flatten any result into a list of primitives."""

    if result is None:
        return []
    if isinstance(result, (tuple, list)):
        return list(result)
    return [result]


def point_pair(first: Point, second: Point) -> PointPair:
    ordered = sorted((first, second), key=lambda p: (p.x, p.y))
    return ordered[0], ordered[1]


def collapse(points: Sequence[Point]) -> Union[None, Point, PointPair]:
    """Reduce up to two points to ``None``, a point or a sorted pair."""

    unique: List[Point] = []
    for point in points:
        if point not in unique:
            unique.append(point)
    if not unique:
        return None
    if len(unique) == 1:
        return unique[0]
    if len(unique) == 2:
        return point_pair(unique[0], unique[1])
    raise ValueError(f"expected at most two points, got {len(unique)}")


def format_result(result: IntersectionResult) -> str:
    kind = result_kind(result)
    if kind is ResultKind.EMPTY:
        return "none"
    if kind in (ResultKind.PAIR, ResultKind.SEQUENCE):
        return "\n".join(str(piece) for piece in result_pieces(result))
    return str(result)


__all__ = [
    "PointPair",
    "Pieces",
    "IntersectionResult",
    "ResultKind",
    "result_kind",
    "result_pieces",
    "point_pair",
    "collapse",
    "format_result",
]
