"""Pairwise intersection engine.

Every handler is written for one canonical argument order.  ``get_intersect``
maps both arguments to their dispatch family (a triangle intersects as a
polygon), orders the pair by ``_RANK`` and calls the registered handler with
the arguments in that order, so the 21 unordered family pairs need a single
registration each.

Results follow :mod:`geoprim.results`: ``None``, a primitive, a sorted pair
of points, or a list of points and segments.
"""

from __future__ import annotations

import logging
import math
from itertools import combinations
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from .errors import UndefinedIntersection
from .logging_utils import apply_debug_logging
from .primitives import Circle, Kind, LinearShape, Line, Point, Polygon, Ray, Segment
from .results import IntersectionResult, Pieces, collapse, result_pieces
from .rounding import DEFAULT_ROUNDING, coordinates_close, round_coordinate

logger = logging.getLogger(__name__)

Handler = Callable[[Any, Any], IntersectionResult]

_FAMILY: Dict[Kind, Kind] = {Kind.TRIANGLE: Kind.POLYGON}

_RANK: Dict[Kind, int] = {
    Kind.POINT: 0,
    Kind.POLYGON: 1,
    Kind.CIRCLE: 2,
    Kind.RAY: 3,
    Kind.SEGMENT: 4,
    Kind.LINE: 5,
}

_HANDLERS: Dict[Tuple[Kind, Kind], Handler] = {}


def _register(first: Kind, second: Kind) -> Callable[[Handler], Handler]:
    if _RANK[first] > _RANK[second]:
        raise ValueError(f"handler for ({first.value}, {second.value}) is not in canonical order")

    def decorator(func: Handler) -> Handler:
        _HANDLERS[(first, second)] = func
        return func

    return decorator


def kind_of(value: object) -> Optional[Kind]:
    kind = getattr(type(value), "kind", None)
    return kind if isinstance(kind, Kind) else None


def _kind_name(value: object) -> str:
    kind = kind_of(value)
    return kind.value if kind is not None else type(value).__name__


def registered_pairs() -> List[Tuple[Kind, Kind]]:
    return sorted(_HANDLERS, key=lambda pair: (_RANK[pair[0]], _RANK[pair[1]]))


def get_intersect(a: object, b: object) -> IntersectionResult:
    """Intersect two primitives in either argument order."""

    kind_a, kind_b = kind_of(a), kind_of(b)
    if kind_a is None or kind_b is None:
        raise UndefinedIntersection(_kind_name(a), _kind_name(b), "not a geometric primitive")
    family_a = _FAMILY.get(kind_a, kind_a)
    family_b = _FAMILY.get(kind_b, kind_b)
    if _RANK[family_a] > _RANK[family_b]:
        a, b = b, a
        family_a, family_b = family_b, family_a
    handler = _HANDLERS.get((family_a, family_b))
    if handler is None:
        raise UndefinedIntersection(kind_a.value, kind_b.value)
    return handler(a, b)


def intersects(a: object, b: object) -> bool:
    return get_intersect(a, b) is not None


def _axis_key(point: Point) -> Tuple[float, float]:
    return point.x, point.y


# ---------------------------------------------------------------------------
# points


@_register(Kind.POINT, Kind.POINT)
def _point_point(point: Point, other: Point) -> Optional[Point]:
    return point if point == other else None


@_register(Kind.POINT, Kind.LINE)
@_register(Kind.POINT, Kind.RAY)
@_register(Kind.POINT, Kind.SEGMENT)
def _point_linear(point: Point, shape: LinearShape) -> Optional[Point]:
    return point if shape.contains(point) else None


@_register(Kind.POINT, Kind.CIRCLE)
def _point_circle(point: Point, circle: Circle) -> Optional[Point]:
    return point if coordinates_close(point.distance(circle.center), circle.r) else None


@_register(Kind.POINT, Kind.POLYGON)
def _point_polygon(point: Point, polygon: Polygon) -> Optional[Point]:
    # boundary only; interior points do not intersect
    return point if any(edge.contains(point) for edge in polygon.edges) else None


# ---------------------------------------------------------------------------
# lines, rays and segments


def _parallel_directions(line: LinearShape, other: LinearShape) -> bool:
    # steep slopes keep an ulp above the angle precision after rounding
    dx1, dy1 = line.direction
    dx2, dy2 = other.direction
    cross = dx1 * dy2 - dy1 * dx2
    return abs(cross) <= 10.0 ** -DEFAULT_ROUNDING.angle_precision * line._norm() * other._norm()


@_register(Kind.LINE, Kind.LINE)
def _line_line(line: Line, other: Line) -> Union[None, Point, Line]:
    if line.is_vertical and other.is_vertical:
        return line if line.a.x == other.a.x else None
    if line.is_vertical:
        return Point(line.a.x, other._y_at(line.a.x))
    if other.is_vertical:
        return Point(other.a.x, line._y_at(other.a.x))

    first = line.get_line_polynom()
    second = other.get_line_polynom()
    if first.get_linear_coefficient() == second.get_linear_coefficient() or _parallel_directions(line, other):
        if first.get_absolute_coefficient() == second.get_absolute_coefficient():
            return line
        return None

    m1, k1 = line._slope_intercept()
    m2, k2 = other._slope_intercept()
    denom = m1 - m2
    return Point((k2 - k1) / denom, (m1 * k2 - m2 * k1) / denom)


def _collinear_overlap(segment: Segment, other: Segment) -> Union[None, Point, Segment]:
    start = max(segment.a, other.a, key=_axis_key)
    end = min(segment.b, other.b, key=_axis_key)
    if _axis_key(start) > _axis_key(end):
        return None
    if start == end:
        return start
    for candidate in (segment, other):
        if candidate.a == start and candidate.b == end:
            return candidate
    return Segment(start, end)


@_register(Kind.SEGMENT, Kind.SEGMENT)
def _segment_segment(segment: Segment, other: Segment) -> Union[None, Point, Segment]:
    crossing = _line_line(segment.get_line(), other.get_line())
    if crossing is None:
        return None
    if crossing.kind is Kind.POINT:
        return crossing if segment.contains(crossing) and other.contains(crossing) else None
    return _collinear_overlap(segment, other)


@_register(Kind.SEGMENT, Kind.LINE)
def _segment_line(segment: Segment, line: Line) -> Union[None, Point, Segment]:
    crossing = _line_line(segment.get_line(), line)
    if crossing is None:
        return None
    if crossing.kind is Kind.LINE:
        return segment
    return crossing if segment.contains(crossing) else None


@_register(Kind.RAY, Kind.LINE)
def _ray_line(ray: Ray, line: Line) -> Union[None, Point, Ray]:
    crossing = _line_line(ray.get_line(), line)
    if crossing is None:
        return None
    if crossing.kind is Kind.LINE:
        return ray
    return crossing if ray.contains(crossing) else None


@_register(Kind.RAY, Kind.SEGMENT)
def _ray_segment(ray: Ray, segment: Segment) -> Union[None, Point, Segment]:
    crossing = _line_line(ray.get_line(), segment.get_line())
    if crossing is None:
        return None
    if crossing.kind is Kind.POINT:
        return crossing if ray.contains(crossing) and segment.contains(crossing) else None

    a_inside = ray.contains(segment.a)
    b_inside = ray.contains(segment.b)
    if a_inside and b_inside:
        return segment
    if not (a_inside or b_inside):
        return None
    inside = segment.a if a_inside else segment.b
    if inside == ray.a:
        return inside
    return Segment(inside, ray.a)


@_register(Kind.RAY, Kind.RAY)
def _ray_ray(ray: Ray, other: Ray) -> Union[None, Point, Ray, Segment]:
    crossing = _line_line(ray.get_line(), other.get_line())
    if crossing is None:
        return None
    if crossing.kind is Kind.POINT:
        return crossing if ray.contains(crossing) and other.contains(crossing) else None

    dx1, dy1 = ray.direction
    dx2, dy2 = other.direction
    if dx1 * dx2 + dy1 * dy2 > 0.0:
        if ray.a == other.a:
            return min(ray, other, key=lambda r: _axis_key(r.b))
        # same direction: the ray that starts further along is the overlap
        return other if ray.contains(other.a) else ray
    if ray.contains(other.a):
        if ray.a == other.a:
            return ray.a
        return Segment(ray.a, other.a)
    return None


# ---------------------------------------------------------------------------
# circles


@_register(Kind.CIRCLE, Kind.CIRCLE)
def _circle_circle(circle: Circle, other: Circle) -> IntersectionResult:
    circle, other = sorted((circle, other), key=lambda c: (c.center.x, c.center.y, c.r))
    distance = circle.center.distance(other.center)
    if distance == 0.0:
        return circle if circle.r == other.r else None

    outer = round_coordinate(circle.r + other.r)
    inner = round_coordinate(abs(circle.r - other.r))
    if distance > outer or distance < inner:
        return None

    cx, cy = circle.center.x, circle.center.y
    raw = math.hypot(other.center.x - cx, other.center.y - cy)
    ux = (other.center.x - cx) / raw
    uy = (other.center.y - cy) / raw
    if distance == outer:
        return Point(cx + ux * circle.r, cy + uy * circle.r)
    if distance == inner:
        if circle.r >= other.r:
            return Point(cx + ux * circle.r, cy + uy * circle.r)
        return Point(other.center.x - ux * other.r, other.center.y - uy * other.r)

    along = (circle.r * circle.r - other.r * other.r + raw * raw) / (2.0 * raw)
    half = math.sqrt(max(circle.r * circle.r - along * along, 0.0))
    mx = cx + ux * along
    my = cy + uy * along
    return collapse([Point(mx - uy * half, my + ux * half), Point(mx + uy * half, my - ux * half)])


@_register(Kind.CIRCLE, Kind.LINE)
def _circle_line(circle: Circle, line: LinearShape) -> IntersectionResult:
    fx, fy = line.foot_of_perpendicular(circle.center)
    raw = math.hypot(circle.center.x - fx, circle.center.y - fy)
    distance = round_coordinate(raw)
    if distance > circle.r:
        return None
    if distance == circle.r:
        return Point(fx, fy)

    half = math.sqrt(max(circle.r * circle.r - raw * raw, 0.0))
    dx, dy = line.direction
    norm = math.hypot(dx, dy)
    ux, uy = dx / norm, dy / norm
    return collapse([Point(fx - ux * half, fy - uy * half), Point(fx + ux * half, fy + uy * half)])


@_register(Kind.CIRCLE, Kind.RAY)
@_register(Kind.CIRCLE, Kind.SEGMENT)
def _circle_bounded(circle: Circle, shape: LinearShape) -> IntersectionResult:
    candidates = result_pieces(_circle_line(circle, shape.get_line()))
    return collapse([point for point in candidates if shape.contains(point)])


# ---------------------------------------------------------------------------
# polygons


def _merge_pieces(pieces: Iterable[Union[Point, Segment]]) -> Pieces:
    """Dedupe points, join collinear touching segments, drop covered points.

    Pieces keep their first-seen order; a joined segment takes the slot of
    the earlier of its parts.  Joining repeats until no pair can be joined.
    """

    merged: Pieces = []
    for piece in pieces:
        if piece.kind is Kind.POINT and piece in merged:
            continue
        merged.append(piece)

    changed = True
    while changed:
        changed = False
        indices = [idx for idx, piece in enumerate(merged) if piece.kind is Kind.SEGMENT]
        for i, j in combinations(indices, 2):
            if merged[i].can_join(merged[j]):
                logger.debug("Joining %s with %s", merged[i], merged[j])
                merged[i] = merged[i].join(merged[j])
                del merged[j]
                changed = True
                break

    segments = [piece for piece in merged if piece.kind is Kind.SEGMENT]
    return [
        piece
        for piece in merged
        if piece.kind is Kind.SEGMENT or not any(segment.contains(piece) for segment in segments)
    ]


def _as_result(pieces: Pieces) -> IntersectionResult:
    if not pieces:
        return None
    if len(pieces) == 1:
        return pieces[0]
    return pieces


@_register(Kind.POLYGON, Kind.LINE)
@_register(Kind.POLYGON, Kind.RAY)
@_register(Kind.POLYGON, Kind.SEGMENT)
def _polygon_linear(polygon: Polygon, probe: LinearShape) -> IntersectionResult:
    pieces: Pieces = []
    for edge in polygon.edges:
        pieces.extend(result_pieces(get_intersect(edge, probe)))
    return _as_result(_merge_pieces(pieces))


@_register(Kind.POLYGON, Kind.CIRCLE)
def _polygon_circle(polygon: Polygon, circle: Circle) -> IntersectionResult:
    # Only vertices lying on the circle are reported; an edge crossing the
    # circle between two vertices is not detected.
    touching = [vertex for vertex in polygon.vertices if _point_circle(vertex, circle) is not None]
    return _as_result(_merge_pieces(touching))


@_register(Kind.POLYGON, Kind.POLYGON)
def _polygon_polygon(polygon: Polygon, other: Polygon) -> IntersectionResult:
    if polygon is other or polygon.vertices == other.vertices:
        return polygon
    pieces: Pieces = []
    for edge in polygon.edges:
        pieces.extend(result_pieces(_polygon_linear(other, edge)))
    return _as_result(_merge_pieces(pieces))


apply_debug_logging(
    globals(),
    logger=logger,
    skip={"_register", "kind_of", "_kind_name", "_axis_key", "registered_pairs"},
)


__all__ = [
    "get_intersect",
    "intersects",
    "kind_of",
    "registered_pairs",
]
