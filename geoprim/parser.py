"""Parser for the textual forms produced by ``to_string``.

Accepted forms::

    [x, y]
    Point: [x, y]
    Line: ([x1, y1], [x2, y2])        (also Ray: and Segment:)
    Circle: ([x, y], r)
    Polygon: ([x1, y1], [x2, y2], [x3, y3], ...)
    Triangle: ([x1, y1], [x2, y2], [x3, y3])
"""

from typing import Callable, Dict, List, Optional, Union

from .lexer import Token, tokenize
from .primitives import Circle, Kind, Line, Point, Polygon, Primitive, Ray, Segment, Triangle

Arg = Union[Point, float]


class Cursor:
    def __init__(self, tokens: List[Token]):
        self.toks = tokens
        self.i = 0

    def peek(self) -> Optional[Token]:
        return self.toks[self.i] if self.i < len(self.toks) else None

    def match(self, *types: str) -> Optional[Token]:
        if self.i < len(self.toks) and self.toks[self.i][0] in types:
            t = self.toks[self.i]
            self.i += 1
            return t
        return None

    def expect(self, *types: str) -> Token:
        t = self.peek()
        if t and t[0] in types:
            self.i += 1
            return t
        want = '|'.join(types)
        if t:
            raise SyntaxError(f'[col {t[2]}] expected {want}, got {t[0]}')
        raise SyntaxError(f'unexpected end of input: expected {want}')

    def expect_end(self) -> None:
        t = self.peek()
        if t:
            raise SyntaxError(f'[col {t[2]}] unexpected trailing {t[0]} {t[1]!r}')


def parse_number(cur: Cursor) -> float:
    return float(cur.expect('NUMBER')[1])


def parse_point(cur: Cursor) -> Point:
    cur.expect('LBRACK')
    x = parse_number(cur)
    cur.expect('COMMA')
    y = parse_number(cur)
    cur.expect('RBRACK')
    return Point(x, y)


def parse_args(cur: Cursor) -> List[Arg]:
    cur.expect('LPAREN')
    args: List[Arg] = []
    while True:
        t = cur.peek()
        if not t or t[0] == 'RPAREN':
            break
        if args:
            cur.expect('COMMA')
        if cur.peek() and cur.peek()[0] == 'NUMBER':
            args.append(parse_number(cur))
        else:
            args.append(parse_point(cur))
    cur.expect('RPAREN')
    return args


def _points(kind: Kind, args: List[Arg], count: Optional[int] = None) -> List[Point]:
    if not all(isinstance(arg, Point) for arg in args):
        raise SyntaxError(f'{kind.value} takes points only')
    if count is not None and len(args) != count:
        raise SyntaxError(f'{kind.value} takes {count} points, got {len(args)}')
    return list(args)  # type: ignore[arg-type]


def _build_circle(args: List[Arg]) -> Circle:
    if len(args) != 2 or not isinstance(args[0], Point) or isinstance(args[1], Point):
        raise SyntaxError('Circle takes a center point and a radius')
    return Circle(args[0], args[1])


_BUILDERS: Dict[Kind, Callable[[List[Arg]], Primitive]] = {
    Kind.LINE: lambda args: Line(*_points(Kind.LINE, args, 2)),
    Kind.RAY: lambda args: Ray(*_points(Kind.RAY, args, 2)),
    Kind.SEGMENT: lambda args: Segment(*_points(Kind.SEGMENT, args, 2)),
    Kind.CIRCLE: _build_circle,
    Kind.POLYGON: lambda args: Polygon(_points(Kind.POLYGON, args)),
    Kind.TRIANGLE: lambda args: Triangle(*_points(Kind.TRIANGLE, args, 3)),
}

_KINDS_BY_NAME = {kind.value.lower(): kind for kind in Kind}


def parse_primitive(text: str) -> Primitive:
    """Parse one primitive from its textual form.

    Malformed text raises ``SyntaxError``; well-formed text describing a
    degenerate primitive raises :class:`~geoprim.errors.InvalidConstruction`.
    """

    cur = Cursor(tokenize(text))
    if cur.peek() and cur.peek()[0] == 'LBRACK':
        point = parse_point(cur)
        cur.expect_end()
        return point

    name = cur.expect('ID')
    kind = _KINDS_BY_NAME.get(name[1].lower())
    if kind is None:
        raise SyntaxError(f'[col {name[2]}] unknown primitive {name[1]!r}')
    cur.expect('COLON')
    if kind is Kind.POINT:
        point = parse_point(cur)
        cur.expect_end()
        return point
    args = parse_args(cur)
    cur.expect_end()
    return _BUILDERS[kind](args)
