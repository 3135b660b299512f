"""Test Manhattan wire routing."""

from techdraw.diagram.models import Point
from techdraw.diagram.routing import is_horizontal_dominant, manhattan_route, path_data


def test_horizontal_dominant_route():
    route = manhattan_route(Point(0, 0), Point(100, 20))
    assert route == [Point(0, 0), Point(50, 0), Point(50, 20), Point(100, 20)]


def test_vertical_dominant_route():
    route = manhattan_route(Point(0, 0), Point(20, 100))
    assert route == [Point(0, 0), Point(0, 50), Point(20, 50), Point(20, 100)]


def test_tie_routes_vertically():
    assert not is_horizontal_dominant(Point(0, 0), Point(10, 10))
    route = manhattan_route(Point(0, 0), Point(10, 10))
    assert route == [Point(0, 0), Point(0, 5), Point(10, 5), Point(10, 10)]


def test_route_is_axis_aligned():
    cases = [
        (Point(-70, 0), Point(70, 0)),
        (Point(13, -7), Point(-41, 99)),
        (Point(5, 5), Point(5, 5)),
        (Point(-200, 30), Point(180, -15)),
    ]
    for p1, p2 in cases:
        route = manhattan_route(p1, p2)
        assert len(route) == 4
        assert route[0] == p1 and route[-1] == p2
        for a, b in zip(route, route[1:]):
            assert a.x == b.x or a.y == b.y


def test_aligned_pins_give_straight_line():
    route = manhattan_route(Point(-70, 0), Point(70, 0))
    assert {p.y for p in route} == {0}


def test_path_data():
    assert path_data([Point(-70, 0), Point(0, 0), Point(0, 0), Point(70, 0)]) == "M -70 0 L 0 0 L 0 0 L 70 0"
    assert path_data([Point(0, 0), Point(1.5, -2.25)]) == "M 0 0 L 1.5 -2.25"
    assert path_data([]) == ""
