from __future__ import annotations

import pytest

from mazegraph.core.errors import MalformedCharacterError
from mazegraph.core.maze import maze_to_graph, parse_maze
from mazegraph.core.render import format_maze, format_path, node_marked_maze, path_marked_maze
from mazegraph.core.search import bfs

from maze_samples import BRANCHING_MAZE, LINEAR_MAZE


def test_node_marked_maze_branching() -> None:
    assert node_marked_maze(BRANCHING_MAZE) == [
        "XXXXXXX     -1",
        "XS1234X     4    Start at 0",
        "XXX567X     7",
        "X890X1X     11",
        "X234X5X     15",
        "X6X78GX     19    Goal at 19",
        "XXXXXXX     -1",
    ]


def test_node_marked_maze_start_and_goal_on_one_row() -> None:
    assert node_marked_maze(["xxxxx", "xs gx", "xxxxx"]) == [
        "XXXXX     -1",
        "XS1GX     2    Start at 0    Goal at 2",
        "XXXXX     -1",
    ]


def test_node_marked_maze_rejects_unknown_characters() -> None:
    with pytest.raises(MalformedCharacterError):
        node_marked_maze(["XXX", "XS?", "XGX"])


def test_ones_digit_wraps() -> None:
    rows = ["X" * 14, "XS" + " " * 10 + "GX", "X" * 14]
    assert node_marked_maze(rows)[1] == "XS1234567890GX     11    Start at 0    Goal at 11"


def test_path_marked_maze() -> None:
    maze = parse_maze(BRANCHING_MAZE)
    path = bfs(maze_to_graph(BRANCHING_MAZE))
    drawn = path_marked_maze(BRANCHING_MAZE, maze, path)
    assert sum(row.count(".") for row in drawn) == len(path) - 2
    assert drawn[1].startswith("XS")
    assert drawn[5].endswith("GX")


def test_format_maze_and_path() -> None:
    assert format_maze(LINEAR_MAZE) == "XXXXX\nXS GX\nXXXXX\n"
    assert format_path("BFS", [0, 1, 2]) == "BFS: path is 3 long: [0, 1, 2]"
    assert format_path("DFS", []) == "DFS: No Path found!"
