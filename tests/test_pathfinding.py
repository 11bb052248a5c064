import pytest

from candyquest.pathfinding import INVALID_WALK_CODE, PathFinding, PathNode
from candyquest.point import Point


def grid(rows):
    finder = PathFinding()
    width = len(rows[0])
    data = [1 if ch == "." else 0 for row in rows for ch in row]
    finder.set_navigation_map(width, len(rows), data)
    return finder


def test_corridor_path():
    finder = PathFinding()
    finder.set_navigation_map(5, 1, [1, 1, 1, 1, 1])
    steps = finder.create_path(Point(0, 0), Point(4, 0))
    assert steps == 5
    assert finder.last_path == tuple(Point(x, 0) for x in range(5))


def test_path_invariants_around_wall():
    finder = grid([
        ".....",
        ".###.",
        ".#...",
        ".#.#.",
        "...#.",
    ])
    origin, destination = Point(2, 2), Point(0, 0)
    steps = finder.create_path(origin, destination)
    path = finder.last_path
    assert steps == len(path)
    assert path[0] == origin
    assert path[-1] == destination
    for a, b in zip(path, path[1:]):
        assert a.distance_manhattan(b) == 1
    assert all(finder.is_walkable(p) for p in path)


def test_origin_equals_destination():
    finder = grid(["..", ".."])
    assert finder.create_path(Point(1, 1), Point(1, 1)) == 1
    assert finder.last_path == (Point(1, 1),)


def test_unwalkable_origin():
    finder = grid(["#..", "..."])
    assert finder.create_path(Point(0, 0), Point(2, 1)) == -1
    assert finder.last_path == ()


def test_unreachable_keeps_previous_path():
    finder = grid(["..#..", "..#.."])
    assert finder.create_path(Point(0, 0), Point(1, 0)) == 2
    before = finder.last_path
    assert finder.create_path(Point(0, 0), Point(4, 0)) == -1
    assert finder.last_path == before


def test_tile_at_and_boundaries():
    finder = grid(["..", ".#"])
    assert finder.tile_at(Point(1, 1)) == 0
    assert finder.tile_at(Point(-1, 0)) == INVALID_WALK_CODE
    assert finder.check_boundaries(Point(2, 2)) is True
    assert finder.check_boundaries(Point(0, -1)) is False
    assert finder.is_walkable(Point(1, 1)) is False
    assert finder.is_walkable(Point(0, 1)) is True


def test_short_map_data_rejected():
    with pytest.raises(ValueError):
        PathFinding().set_navigation_map(3, 3, [1, 1])


def test_walkable_adjacents_order():
    finder = grid(["...", "...", "..."])
    node = PathNode(0, 0, Point(1, 1))
    adjacent = finder.walkable_adjacents(node)
    assert [n.pos for n in adjacent] == [Point(1, 2), Point(1, 0), Point(2, 1), Point(0, 1)]
    assert all(n.parent is node for n in adjacent)


def test_calculate_f_and_score():
    parent = PathNode(2, 0, Point(9, 9))
    node = PathNode(-1, -1, Point(0, 0), parent)
    assert node.calculate_f(Point(3, 4)) == 8
    assert node.g == parent.g + 1
    assert node.score() == node.g + node.h


def test_calculate_f_without_parent():
    with pytest.raises(ValueError):
        PathNode(0, 0, Point(0, 0)).calculate_f(Point(1, 1))


def test_move_follows_path():
    finder = PathFinding()
    finder.set_navigation_map(3, 1, [1, 1, 1])
    finder.create_path(Point(0, 0), Point(2, 0))
    assert finder.move(Point(2, 0)) is None
    assert finder.move(Point(0, 0)) == Point(1, 0)
    assert finder.move(Point(1, 0)) == Point(2, 0)
    assert len(finder.last_path) == 3


def test_move_single_step_path_ends():
    finder = grid([".."])
    finder.create_path(Point(0, 0), Point(0, 0))
    assert finder.move(Point(0, 0)) is None
    assert finder.last_path == ()
    assert finder.move(Point(0, 0)) is None


def test_clear_and_clean_up():
    finder = grid(["..."])
    finder.create_path(Point(0, 0), Point(2, 0))
    finder.clear_last_path()
    assert finder.last_path == ()
    finder.create_path(Point(0, 0), Point(2, 0))
    assert finder.clean_up() is True
    assert finder.last_path == ()
    assert finder.tile_at(Point(0, 0)) == INVALID_WALK_CODE