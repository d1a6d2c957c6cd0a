"""Shared fixtures-by-hand for the planner tests."""

from envs.grid import grid_from_ascii

# finish boxed in by four walls
WALLED_FINISH = [
    "S.........",
    "......#...",
    ".....#F#..",
    "......#...",
    "..........",
]

MAZE = [
    "S....#....",
    ".##..#.##.",
    "..#....#..",
    "#.####.#.#",
    "......#...",
    ".####...#F",
]


def load(picture):
    return grid_from_ascii(picture)


def adjacent(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def assert_valid_grid_path(grid, path, start, goal):
    """First node is start, last is goal, every step is one free 4-neighbour move."""
    assert path, "expected a path"
    assert path[0] == start
    assert path[-1] == goal
    for a, b in zip(path[:-1], path[1:]):
        assert adjacent(a, b), f"{a} -> {b} is not a grid step"
    for cell in path:
        assert not grid.walls[cell]
    assert len(set(path)) == len(path)


def assert_valid_graph_path(graph, path, start, goal):
    assert path, "expected a path"
    assert path[0] == start
    assert path[-1] == goal
    for a, b in zip(path[:-1], path[1:]):
        assert b in graph.adjacency[a], f"no edge {a!r} -> {b!r}"
