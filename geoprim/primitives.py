"""Immutable 2D primitives: point, line, ray, segment, circle, polygon, triangle.

Coordinates are rounded to :data:`geoprim.rounding.COORDINATE_PRECISION`
decimal places when a primitive is built.  Renderers only need the public
fields (``x``/``y``, ``a``/``b``, ``center``/``r`` and ``vertices``).
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Iterable, Optional, Tuple, Union

import numpy as np

from .errors import DisjointJoin, InvalidConstruction, NonCollinearJoin
from .lexer import tokenize
from .polynom import Polynom
from .rounding import is_negligible, round_angle, round_coordinate

if TYPE_CHECKING:
    from .results import IntersectionResult


class Kind(str, Enum):
    POINT = "Point"
    LINE = "Line"
    RAY = "Ray"
    SEGMENT = "Segment"
    CIRCLE = "Circle"
    POLYGON = "Polygon"
    TRIANGLE = "Triangle"


class Intersectable(ABC):
    """Capability shared by every primitive: intersect with another one."""

    kind: ClassVar[Kind]

    def get_intersect(self, other: "Primitive") -> "IntersectionResult":
        from .intersect import get_intersect

        return get_intersect(self, other)

    def intersects(self, other: "Primitive") -> bool:
        return self.get_intersect(other) is not None

    @abstractmethod
    def to_string(self) -> str:
        """Canonical text form, readable by :func:`geoprim.parser.parse_primitive`."""

    def __str__(self) -> str:
        return self.to_string()


def _require_number(value: object, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConstruction(f"{what} must be a number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise InvalidConstruction(f"{what} must be finite, got {value!r}")
    return result


def _require_point(value: object, what: str) -> "Point":
    if not isinstance(value, Point):
        raise InvalidConstruction(f"{what} must be a Point, got {value!r}")
    return value


def format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _axis_key(point: "Point") -> Tuple[float, float]:
    return point.x, point.y


def _non_negative(value: float) -> bool:
    return value >= 0.0 or is_negligible(value)


@dataclass(frozen=True)
class Point(Intersectable):
    x: float
    y: float

    kind: ClassVar[Kind] = Kind.POINT

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", round_coordinate(_require_number(self.x, "x coordinate")))
        object.__setattr__(self, "y", round_coordinate(_require_number(self.y, "y coordinate")))

    def distance(self, other: Union["Point", "LinearShape"]) -> float:
        """Euclidean distance to a point, or perpendicular distance to a line.

        Rays and segments are measured against their support line.
        """

        if isinstance(other, Point):
            return round_coordinate(math.hypot(self.x - other.x, self.y - other.y))
        if isinstance(other, LinearShape):
            line = other.get_line()
            if line.contains(self):
                return 0.0
            fx, fy = line.foot_of_perpendicular(self)
            return round_coordinate(math.hypot(self.x - fx, self.y - fy))
        raise TypeError(f"cannot measure distance from a point to {type(other).__name__}")

    def reflect_about(self, other: Union["Point", "LinearShape"]) -> "Point":
        if isinstance(other, Point):
            return Point(2 * other.x - self.x, 2 * other.y - self.y)
        if isinstance(other, LinearShape):
            fx, fy = other.get_line().foot_of_perpendicular(self)
            return Point(2 * fx - self.x, 2 * fy - self.y)
        raise TypeError(f"cannot reflect a point about {type(other).__name__}")

    def absolute(self) -> float:
        return round_coordinate(math.hypot(self.x, self.y))

    def to_tuple(self) -> Tuple[float, float]:
        return self.x, self.y

    def to_string(self) -> str:
        return f"[{format_number(self.x)}, {format_number(self.y)}]"

    @classmethod
    def from_string(cls, text: str) -> "Point":
        """Parse the ``[x, y]`` form produced by :meth:`to_string`."""

        from .parser import Cursor, parse_point

        try:
            cur = Cursor(tokenize(text))
            point = parse_point(cur)
            cur.expect_end()
        except SyntaxError as exc:
            raise InvalidConstruction(f"malformed point text {text!r}: {exc}") from exc
        return point


@dataclass(frozen=True)
class LinearShape(Intersectable):
    """Common algebra of lines, rays and segments defined by two points."""

    a: Point
    b: Point

    def __post_init__(self) -> None:
        _require_point(self.a, f"{self.kind.value} endpoint a")
        _require_point(self.b, f"{self.kind.value} endpoint b")
        if self.a == self.b:
            raise InvalidConstruction(f"{self.kind.value} needs two distinct points, got {self.a} twice")

    @property
    def direction(self) -> Tuple[float, float]:
        return self.b.x - self.a.x, self.b.y - self.a.y

    @property
    def is_vertical(self) -> bool:
        return self.a.x == self.b.x

    @property
    def is_horizontal(self) -> bool:
        return self.a.y == self.b.y

    def _norm(self) -> float:
        dx, dy = self.direction
        return math.hypot(dx, dy)

    def _slope_intercept(self) -> Optional[Tuple[float, float]]:
        if self.is_vertical:
            return None
        a, b = self.a, self.b
        slope = (b.y - a.y) / (b.x - a.x)
        intercept = (b.y * a.x - a.y * b.x) / (a.x - b.x)
        return slope, intercept

    def slope(self) -> Optional[float]:
        values = self._slope_intercept()
        return None if values is None else round_angle(values[0])

    def intercept(self) -> Optional[float]:
        values = self._slope_intercept()
        return None if values is None else round_coordinate(values[1])

    def get_line_polynom(self) -> Polynom:
        if self.is_vertical:
            raise InvalidConstruction(f"vertical {self.kind.value.lower()} has no slope-intercept form")
        return Polynom(self.slope(), self.intercept())

    def _y_at(self, x: float) -> float:
        dx, dy = self.direction
        return self.a.y + (x - self.a.x) * dy / dx

    def _x_at(self, y: float) -> float:
        dx, dy = self.direction
        return self.a.x + (y - self.a.y) * dx / dy

    def _covers_x(self, x: float) -> bool:
        return True

    def _covers_y(self, y: float) -> bool:
        return True

    def y(self, x: float) -> Optional[float]:
        if self.is_vertical or not self._covers_x(x):
            return None
        return round_coordinate(self._y_at(x))

    def x(self, y: float) -> Optional[float]:
        if self.is_horizontal or not self._covers_y(y):
            return None
        return round_coordinate(self._x_at(y))

    def _offset(self, point: Point) -> float:
        dx, dy = self.direction
        return (dx * (point.y - self.a.y) - dy * (point.x - self.a.x)) / self._norm()

    def _along(self, point: Point) -> float:
        dx, dy = self.direction
        return (dx * (point.x - self.a.x) + dy * (point.y - self.a.y)) / self._norm()

    def _within(self, point: Point) -> bool:
        return True

    def contains(self, point: Point) -> bool:
        """Return ``True`` when ``point`` lies on this shape."""

        return is_negligible(self._offset(point)) and self._within(point)

    def foot_of_perpendicular(self, point: Point) -> Tuple[float, float]:
        """Unrounded foot of the perpendicular from ``point`` to the support line."""

        dx, dy = self.direction
        t = (dx * (point.x - self.a.x) + dy * (point.y - self.a.y)) / (dx * dx + dy * dy)
        return self.a.x + t * dx, self.a.y + t * dy

    def get_line(self) -> "Line":
        return Line(self.a, self.b)

    def to_string(self) -> str:
        return f"{self.kind.value}: ({self.a}, {self.b})"


class Line(LinearShape):
    kind = Kind.LINE

    def __post_init__(self) -> None:
        super().__post_init__()
        first, second = sorted((self.a, self.b), key=_axis_key)
        object.__setattr__(self, "a", first)
        object.__setattr__(self, "b", second)

    def get_line(self) -> "Line":
        return self

    def get_parallel(self, point: Point) -> "Line":
        if self.contains(point):
            return self
        dx, dy = self.direction
        return Line(point, Point(point.x + dx, point.y + dy))

    def get_perpendicular(self, point: Point) -> "Line":
        if not self.contains(point):
            return self.get_parallel(point).get_perpendicular(point)
        dx, dy = self.direction
        return Line(point, Point(point.x - dy, point.y + dx))

    def distance(self, point: Point) -> float:
        return point.distance(self)


class Ray(LinearShape):
    """Half-line starting at ``a`` and passing through ``b``."""

    kind = Kind.RAY

    def _covers_x(self, x: float) -> bool:
        return (x - self.a.x) * (self.b.x - self.a.x) >= 0.0

    def _covers_y(self, y: float) -> bool:
        return (y - self.a.y) * (self.b.y - self.a.y) >= 0.0

    def _within(self, point: Point) -> bool:
        return _non_negative(self._along(point))

    @property
    def origin(self) -> Point:
        return self.a


class Segment(LinearShape):
    kind = Kind.SEGMENT

    def __post_init__(self) -> None:
        super().__post_init__()
        first, second = sorted((self.a, self.b), key=_axis_key)
        object.__setattr__(self, "a", first)
        object.__setattr__(self, "b", second)

    def _covers_x(self, x: float) -> bool:
        return self.a.x <= x <= self.b.x

    def _covers_y(self, y: float) -> bool:
        low, high = sorted((self.a.y, self.b.y))
        return low <= y <= high

    def _within(self, point: Point) -> bool:
        along = self._along(point)
        return _non_negative(along) and _non_negative(self._norm() - along)

    def length(self) -> float:
        return self.a.distance(self.b)

    def can_join(self, other: "Segment") -> bool:
        line = self.get_line()
        if not (line.contains(other.a) and line.contains(other.b)):
            return False
        start = max(self.a, other.a, key=_axis_key)
        end = min(self.b, other.b, key=_axis_key)
        return _axis_key(start) <= _axis_key(end)

    def join(self, other: "Segment") -> "Segment":
        """Union of two collinear segments that touch or overlap."""

        line = self.get_line()
        if not (line.contains(other.a) and line.contains(other.b)):
            raise NonCollinearJoin(f"{self} and {other} do not share a line")
        if not self.can_join(other):
            raise DisjointJoin(f"{self} and {other} do not touch")
        start = min(self.a, other.a, key=_axis_key)
        end = max(self.b, other.b, key=_axis_key)
        if start == self.a and end == self.b:
            return self
        if start == other.a and end == other.b:
            return other
        return Segment(start, end)


@dataclass(frozen=True)
class Circle(Intersectable):
    center: Point
    r: float

    kind: ClassVar[Kind] = Kind.CIRCLE

    def __post_init__(self) -> None:
        _require_point(self.center, "circle center")
        radius = _require_number(self.r, "radius")
        if radius < 0.0:
            raise InvalidConstruction(f"radius must be non-negative, got {self.r!r}")
        object.__setattr__(self, "r", round_coordinate(radius))

    def length(self) -> float:
        """Circumference."""
        return round_coordinate(2.0 * math.pi * self.r)

    def to_string(self) -> str:
        return f"Circle: ({self.center}, {format_number(self.r)})"


@dataclass(frozen=True)
class Polygon(Intersectable):
    """Closed polygon; ``vertices`` are in boundary traversal order.

    ``edges[i]`` joins ``vertices[i]`` to ``vertices[i - 1]``.  Simplicity of
    the boundary is assumed by the intersection algorithms but not checked.
    """

    vertices: Tuple[Point, ...]
    edges: Tuple[Segment, ...] = field(init=False, repr=False, compare=False)

    kind: ClassVar[Kind] = Kind.POLYGON

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        if len(vertices) < 3:
            raise InvalidConstruction(f"a polygon needs at least 3 vertices, got {len(vertices)}")
        for idx, vertex in enumerate(vertices):
            _require_point(vertex, f"polygon vertex {idx}")
        edges = []
        for idx in range(len(vertices)):
            if vertices[idx] == vertices[idx - 1]:
                raise InvalidConstruction(f"polygon vertex {idx} repeats its predecessor {vertices[idx]}")
            edges.append(Segment(vertices[idx], vertices[idx - 1]))
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "edges", tuple(edges))

    def to_string(self) -> str:
        return f"{self.kind.value}: ({', '.join(str(v) for v in self.vertices)})"


class Triangle(Polygon):
    """Polygon with three vertices ``A``, ``B``, ``C``.

    Edge ``a`` is opposite ``A`` (it joins ``B`` and ``C``), and so on.
    """

    kind = Kind.TRIANGLE

    def __init__(self, A: Point, B: Point, C: Point) -> None:
        super().__init__((A, B, C))

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        if len(vertices) != 3:
            raise InvalidConstruction(f"a triangle needs exactly 3 vertices, got {len(vertices)}")
        A, B, C = (_require_point(v, f"triangle vertex {name}") for v, name in zip(vertices, "ABC"))
        if A == B or A == C or B == C:
            raise InvalidConstruction("triangle vertices must be pairwise distinct")
        if Line(A, B).contains(C):
            raise InvalidConstruction(f"triangle vertices {A}, {B}, {C} are collinear")
        super().__post_init__()

    @property
    def A(self) -> Point:
        return self.vertices[0]

    @property
    def B(self) -> Point:
        return self.vertices[1]

    @property
    def C(self) -> Point:
        return self.vertices[2]

    @property
    def a(self) -> Segment:
        return self.edges[2]

    @property
    def b(self) -> Segment:
        return self.edges[0]

    @property
    def c(self) -> Segment:
        return self.edges[1]

    @staticmethod
    def _opposite_angle(opposite: float, left: float, right: float) -> float:
        cosine = (left * left + right * right - opposite * opposite) / (2.0 * left * right)
        return round_angle(float(np.arccos(np.clip(cosine, -1.0, 1.0))))

    def get_alpha(self) -> float:
        return self._opposite_angle(self.a.length(), self.b.length(), self.c.length())

    def get_beta(self) -> float:
        return self._opposite_angle(self.b.length(), self.a.length(), self.c.length())

    def get_gamma(self) -> float:
        return self._opposite_angle(self.c.length(), self.a.length(), self.b.length())


Primitive = Union[Point, Line, Ray, Segment, Circle, Polygon, Triangle]


def vertices_from(points: Iterable[Tuple[float, float]]) -> Tuple[Point, ...]:
    """Build points from ``(x, y)`` pairs."""

    return tuple(Point(x, y) for x, y in points)


__all__ = [
    "Kind",
    "Intersectable",
    "Point",
    "LinearShape",
    "Line",
    "Ray",
    "Segment",
    "Circle",
    "Polygon",
    "Triangle",
    "Primitive",
    "format_number",
    "vertices_from",
]
