"""Example: two circles, a chord line and the points they share."""

from geoprim import Circle, Line, Point, format_result, get_intersect, result_kind


def main() -> None:
    first = Circle(Point(0, 0), 5)
    second = Circle(Point(8, 0), 5)

    crossing = get_intersect(first, second)
    print(f"{first} x {second} ({result_kind(crossing).value}):")
    print(format_result(crossing))

    # the common chord is perpendicular to the line of centers
    chord = Line(*crossing)
    centers = Line(first.center, second.center)
    print(f"\nChord: {chord}")
    print(f"Chord meets line of centers at {get_intersect(chord, centers)}")

    tangent = Circle(Point(10, 0), 5)
    print(f"\n{first} x {tangent}: {format_result(get_intersect(first, tangent))}")


if __name__ == "__main__":
    main()
