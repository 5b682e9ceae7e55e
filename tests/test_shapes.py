import math

import pytest

from geoprim import Circle, Intersectable, InvalidConstruction, Point, Polygon, Segment, Triangle


def P(x, y):
    return Point(x, y)


def test_circle_rounds_radius():
    circle = Circle(P(0, 0), 2.00000049)

    assert circle.r == 2.0
    assert circle.center == P(0, 0)


def test_circle_allows_zero_radius():
    assert Circle(P(1, 1), 0).r == 0.0


@pytest.mark.parametrize('radius', [-1, float('nan'), 'five', True])
def test_circle_rejects_bad_radius(radius):
    with pytest.raises(InvalidConstruction):
        Circle(P(0, 0), radius)


def test_circle_rejects_non_point_center():
    with pytest.raises(InvalidConstruction):
        Circle((0, 0), 1)


def test_circle_length_and_text():
    circle = Circle(P(0, 0), 5)

    assert circle.length() == pytest.approx(10 * math.pi, abs=1e-6)
    assert circle.to_string() == 'Circle: ([0, 0], 5)'
    assert str(Circle(P(1, -1), 2.5)) == 'Circle: ([1, -1], 2.5)'


def test_polygon_edges_follow_vertices():
    square = Polygon([P(0, 0), P(4, 0), P(4, 4), P(0, 4)])

    assert isinstance(square.vertices, tuple)
    assert len(square.edges) == 4
    assert square.edges[0] == Segment(P(0, 0), P(0, 4))
    assert square.edges[1] == Segment(P(4, 0), P(0, 0))
    assert square.edges[3] == Segment(P(0, 4), P(4, 4))


def test_polygon_equality_ignores_edges_cache():
    first = Polygon([P(0, 0), P(1, 0), P(0, 1)])
    second = Polygon((P(0, 0), P(1, 0), P(0, 1)))

    assert first == second
    assert hash(first) == hash(second)


def test_polygon_needs_three_vertices():
    with pytest.raises(InvalidConstruction, match='at least 3'):
        Polygon([P(0, 0), P(1, 1)])


@pytest.mark.parametrize(
    'vertices',
    [
        [P(0, 0), P(0, 0), P(1, 1)],
        [P(0, 0), P(1, 0), P(1, 1), P(0, 0)],
    ],
)
def test_polygon_rejects_repeated_neighbours(vertices):
    with pytest.raises(InvalidConstruction, match='repeats'):
        Polygon(vertices)


def test_polygon_rejects_non_points():
    with pytest.raises(InvalidConstruction):
        Polygon([P(0, 0), (1, 0), P(0, 1)])


def test_polygon_to_string():
    assert str(Polygon([P(0, 0), P(1, 0), P(0, 1)])) == 'Polygon: ([0, 0], [1, 0], [0, 1])'


def test_triangle_vertices_and_sides():
    triangle = Triangle(P(0, 0), P(4, 0), P(0, 3))

    assert (triangle.A, triangle.B, triangle.C) == (P(0, 0), P(4, 0), P(0, 3))
    assert triangle.a == Segment(P(4, 0), P(0, 3))
    assert triangle.b == Segment(P(0, 0), P(0, 3))
    assert triangle.c == Segment(P(0, 0), P(4, 0))
    assert triangle.a.length() == 5
    assert str(triangle) == 'Triangle: ([0, 0], [4, 0], [0, 3])'


def test_triangle_is_a_polygon():
    triangle = Triangle(P(0, 0), P(4, 0), P(0, 3))

    assert isinstance(triangle, Polygon)
    assert len(triangle.edges) == 3


def test_triangle_right_angle():
    triangle = Triangle(P(0, 0), P(4, 0), P(0, 4))

    assert triangle.get_alpha() == pytest.approx(math.pi / 2)
    assert triangle.get_beta() == pytest.approx(math.pi / 4)
    assert triangle.get_gamma() == pytest.approx(math.pi / 4)


@pytest.mark.parametrize(
    'vertices',
    [
        (P(0, 0), P(4, 0), P(0, 4)),
        (P(-2, 1), P(7, 3), P(1, 9)),
        (P(0, 0), P(10, 0), P(3, 1)),
    ],
)
def test_triangle_angles_sum_to_pi(vertices):
    triangle = Triangle(*vertices)

    total = triangle.get_alpha() + triangle.get_beta() + triangle.get_gamma()
    assert total == pytest.approx(math.pi, abs=1e-9)


def test_equilateral_angles():
    triangle = Triangle(P(0, 0), P(2, 0), P(1, math.sqrt(3)))

    for angle in (triangle.get_alpha(), triangle.get_beta(), triangle.get_gamma()):
        assert angle == pytest.approx(math.pi / 3, abs=1e-6)


def test_triangle_rejects_collinear_vertices():
    with pytest.raises(InvalidConstruction, match='collinear'):
        Triangle(P(0, 0), P(1, 1), P(2, 2))


def test_triangle_rejects_repeated_vertices():
    with pytest.raises(InvalidConstruction, match='distinct'):
        Triangle(P(0, 0), P(1, 1), P(0, 0))


def test_primitive_base_requires_text_form():
    class Shapeless(Intersectable):
        pass

    with pytest.raises(TypeError):
        Shapeless()
