import pytest

from geoprim import (
    DisjointJoin,
    InvalidConstruction,
    Line,
    NonCollinearJoin,
    Point,
    Polynom,
    Ray,
    Segment,
)


def P(x, y):
    return Point(x, y)


def test_line_endpoints_are_canonically_ordered():
    line = Line(P(5, 5), P(0, 0))

    assert line.a == P(0, 0)
    assert line.b == P(5, 5)


def test_vertical_line_orders_by_y():
    line = Line(P(1, 5), P(1, -5))

    assert line.a == P(1, -5)
    assert line.is_vertical


def test_segment_uses_the_same_ordering():
    assert Segment(P(10, 0), P(0, 0)) == Segment(P(0, 0), P(10, 0))
    assert Segment(P(0, 3), P(0, -3)).a == P(0, -3)


def test_ray_keeps_its_origin():
    ray = Ray(P(5, 5), P(0, 0))

    assert ray.a == P(5, 5)
    assert ray.origin == P(5, 5)
    assert ray.b == P(0, 0)


@pytest.mark.parametrize('cls', [Line, Ray, Segment])
def test_coincident_points_are_rejected(cls):
    with pytest.raises(InvalidConstruction):
        cls(P(1, 1), P(1, 1))


@pytest.mark.parametrize('cls', [Line, Ray, Segment])
def test_non_point_endpoints_are_rejected(cls):
    with pytest.raises(InvalidConstruction):
        cls(P(0, 0), (1, 1))


def test_line_evaluation():
    line = Line(P(0, 1), P(2, 5))

    assert line.y(3) == 7
    assert line.x(7) == 3
    assert line.slope() == 2
    assert line.intercept() == 1


def test_vertical_line_has_no_slope():
    line = Line(P(2, 0), P(2, 1))

    assert line.y(2) is None
    assert line.x(100) == 2
    assert line.slope() is None
    assert line.intercept() is None
    with pytest.raises(InvalidConstruction):
        line.get_line_polynom()


def test_horizontal_line_has_no_inverse():
    line = Line(P(0, 3), P(1, 3))

    assert line.is_horizontal
    assert line.y(42) == 3
    assert line.x(3) is None
    assert line.get_line_polynom() == Polynom(0, 3)


def test_ray_evaluation_is_restricted_to_half_line():
    ray = Ray(P(0, 0), P(1, 1))

    assert ray.y(2) == 2
    assert ray.y(-1) is None
    assert ray.x(3) == 3
    assert ray.x(-1) is None


def test_backwards_ray_evaluation():
    ray = Ray(P(0, 0), P(-1, -1))

    assert ray.y(-2) == -2
    assert ray.y(1) is None


def test_vertical_ray_inverse():
    ray = Ray(P(3, 0), P(3, 2))

    assert ray.x(10) == 3
    assert ray.x(-1) is None


def test_segment_evaluation_is_bounded():
    segment = Segment(P(0, 0), P(10, 5))

    assert segment.y(4) == 2
    assert segment.y(11) is None
    assert segment.x(2.5) == 5
    assert segment.x(6) is None


def test_segment_containment():
    segment = Segment(P(0, 0), P(10, 0))

    assert segment.contains(P(10, 0))
    assert segment.contains(P(3.5, 0))
    assert not segment.contains(P(10.1, 0))
    assert not segment.contains(P(5, 0.5))


def test_ray_containment():
    ray = Ray(P(0, 0), P(1, 2))

    assert ray.contains(P(0, 0))
    assert ray.contains(P(5, 10))
    assert not ray.contains(P(-1, -2))


def test_perpendicular_through_point_on_line():
    perpendicular = Line(P(0, 0), P(1, 0)).get_perpendicular(P(3, 0))

    assert perpendicular.is_vertical
    assert perpendicular.a.x == 3


def test_perpendicular_through_point_off_line():
    perpendicular = Line(P(0, 0), P(1, 0)).get_perpendicular(P(3, 4))

    assert perpendicular.contains(P(3, 4))
    assert perpendicular.contains(P(3, 0))


def test_perpendicular_slopes_multiply_to_minus_one():
    line = Line(P(0, 0), P(2, 1))
    perpendicular = line.get_perpendicular(P(2, 1))

    assert perpendicular.slope() == -2
    assert line.slope() * perpendicular.slope() == -1


def test_parallel_through_point():
    line = Line(P(0, 0), P(1, 1))
    parallel = line.get_parallel(P(0, 1))

    assert parallel.slope() == 1
    assert parallel.intercept() == 1
    assert line.get_parallel(P(2, 2)) is line


def test_line_distance():
    assert Line(P(-1, 0), P(1, 0)).distance(P(0, 5)) == 5


def test_get_line_returns_support_line():
    line = Line(P(0, 0), P(1, 1))

    assert line.get_line() is line
    assert Segment(P(1, 1), P(0, 0)).get_line() == line
    assert Ray(P(1, 1), P(0, 0)).get_line() == line


def test_segment_length():
    assert Segment(P(0, 0), P(3, 4)).length() == 5


def test_join_overlapping_segments():
    joined = Segment(P(0, 0), P(5, 0)).join(Segment(P(3, 0), P(10, 0)))

    assert joined == Segment(P(0, 0), P(10, 0))


def test_join_touching_segments():
    assert Segment(P(0, 0), P(5, 0)).join(Segment(P(5, 0), P(8, 0))) == Segment(P(0, 0), P(8, 0))


def test_join_vertical_segments():
    assert Segment(P(0, 0), P(0, 2)).join(Segment(P(0, 1), P(0, 5))) == Segment(P(0, 0), P(0, 5))


def test_join_contained_segment_returns_outer():
    outer = Segment(P(0, 0), P(10, 10))

    assert outer.join(Segment(P(2, 2), P(3, 3))) is outer
    assert Segment(P(2, 2), P(3, 3)).join(outer) is outer


@pytest.mark.parametrize(
    'other',
    [Segment(P(0, 1), P(5, 1)), Segment(P(0, -1), P(1, 1))],
)
def test_join_requires_collinear_segments(other):
    with pytest.raises(NonCollinearJoin):
        Segment(P(0, 0), P(5, 0)).join(other)


def test_join_requires_touching_segments():
    with pytest.raises(DisjointJoin):
        Segment(P(0, 0), P(1, 0)).join(Segment(P(2, 0), P(3, 0)))


def test_to_string():
    assert str(Segment(P(10, 0), P(0, 0))) == 'Segment: ([0, 0], [10, 0])'
    assert str(Ray(P(5, 5), P(0, 0))) == 'Ray: ([5, 5], [0, 0])'
    assert Line(P(0, 0), P(1, 0.5)).to_string() == 'Line: ([0, 0], [1, 0.5])'


def test_slope_from_decimal_endpoints_is_rounded():
    line = Line(P(0, 0), P(0.1, 0.3))

    assert line.slope() == 3
    assert line.intercept() == 0
    assert line.get_line_polynom() == Line(P(0, 0), P(1, 3)).get_line_polynom()
