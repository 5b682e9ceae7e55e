"""Example: probe a polygon boundary with lines, rays and another polygon."""

from geoprim import Line, Point, Polygon, Ray, Triangle, format_result, get_intersect, parse_primitive

SQUARE = Polygon([Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)])

PROBES = [
    Line(Point(0, 0), Point(1, 1)),
    Line(Point(0, 0), Point(1, 0)),
    Ray(Point(2, 2), Point(3, 2)),
    Triangle(Point(2, 2), Point(6, 2), Point(2, 6)),
    parse_primitive("Segment: ([2, 0], [6, 0])"),
]


def main() -> None:
    print(SQUARE)
    for probe in PROBES:
        result = get_intersect(SQUARE, probe)
        print(f"\n{probe}")
        for line in format_result(result).splitlines():
            print(f"  {line}")

    print("\nTriangle angles:")
    triangle = Triangle(Point(0, 0), Point(4, 0), Point(0, 3))
    for name, angle in zip("ABC", (triangle.get_alpha(), triangle.get_beta(), triangle.get_gamma())):
        print(f"  {name}: {angle:.6f} rad")


if __name__ == "__main__":
    main()
