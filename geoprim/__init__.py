from .errors import (
    GeometryError,
    InvalidConstruction,
    UnsupportedRoundingKind,
    UndefinedIntersection,
    NonCollinearJoin,
    DisjointJoin,
)
from .rounding import (
    ANGLE_PRECISION,
    COORDINATE_PRECISION,
    DEFAULT_ROUNDING,
    RoundingConfig,
    RoundingKind,
    round_value,
)
from .polynom import Polynom
from .primitives import Kind, Intersectable, Point, Line, Ray, Segment, Circle, Polygon, Triangle, Primitive
from .intersect import get_intersect, intersects, kind_of
from .results import IntersectionResult, ResultKind, result_kind, result_pieces, format_result
from .parser import parse_primitive

__all__ = [
    'GeometryError',
    'InvalidConstruction',
    'UnsupportedRoundingKind',
    'UndefinedIntersection',
    'NonCollinearJoin',
    'DisjointJoin',
    'ANGLE_PRECISION',
    'COORDINATE_PRECISION',
    'DEFAULT_ROUNDING',
    'RoundingConfig',
    'RoundingKind',
    'round_value',
    'Polynom',
    'Kind',
    'Intersectable',
    'Point',
    'Line',
    'Ray',
    'Segment',
    'Circle',
    'Polygon',
    'Triangle',
    'Primitive',
    'get_intersect',
    'intersects',
    'kind_of',
    'IntersectionResult',
    'ResultKind',
    'result_kind',
    'result_pieces',
    'format_result',
    'parse_primitive',
]
