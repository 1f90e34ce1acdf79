# src/mazegraph/core/render.py
"""Text renderings of mazes and paths, for checking searches by eye."""

from __future__ import annotations

from typing import List, Sequence

from mazegraph.core.errors import MalformedCharacterError
from mazegraph.core.types import CellKind, ParsedMaze, Path

PATH_MARK = "."


def format_maze(rows: Sequence[str]) -> str:
    return "\n".join(rows) + "\n"


def node_marked_maze(rows: Sequence[str]) -> List[str]:
    """Copy of the maze with every open square replaced by its node number.

    Only the ones digit is written; the rest follows from context. Start and
    goal keep their letters. Each row ends with the largest node number on
    that row (-1 when it has none) and the start/goal node numbers if found.
    """
    count = 0
    marked: List[str] = []
    for r, row in enumerate(rows):
        start_found = -1
        goal_found = -1
        last_on_row = -1
        chars: List[str] = []
        for c, ch in enumerate(row):
            kind = CellKind.classify(ch)
            if kind is None:
                raise MalformedCharacterError(r, c, ch)
            if kind is CellKind.WALL:
                chars.append("X")
                continue
            val = str(count % 10)
            if kind is CellKind.START:
                val = "S"
                start_found = count
            elif kind is CellKind.GOAL:
                val = "G"
                goal_found = count
            chars.append(val)
            last_on_row = count
            count += 1

        line = "".join(chars) + "     " + str(last_on_row)
        if start_found != -1:
            line += "    Start at " + str(start_found)
        if goal_found != -1:
            line += "    Goal at " + str(goal_found)
        marked.append(line)
    return marked


def path_marked_maze(rows: Sequence[str], maze: ParsedMaze, path: Path) -> List[str]:
    """Maze rows with the interior cells of `path` drawn as PATH_MARK."""
    grid = [list(row.upper()) for row in rows]
    for node in path:
        pos = maze.open_cells[node]
        if pos in (maze.start, maze.goal):
            continue
        grid[pos.row][pos.col] = PATH_MARK
    return ["".join(row) for row in grid]


def format_path(label: str, path: Path) -> str:
    if not path:
        return f"{label}: No Path found!"
    return f"{label}: path is {len(path)} long: {path}"
