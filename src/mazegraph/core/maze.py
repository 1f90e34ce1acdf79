# src/mazegraph/core/maze.py
"""
Maze text -> open-cell table -> graph.

A maze is a list of rows. Each character is a grid square:
'X' wall, ' ' open, 'S' start, 'G' goal (any case). Every open square
(start and goal included) becomes a node; its node id is its index in the
row-major list of open squares. Open squares that touch up/down/left/right
are joined by an edge.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from mazegraph.core.errors import MalformedCharacterError, MazeReadError, MissingMarkerError
from mazegraph.core.graph import ListGraph
from mazegraph.core.types import CellKind, MazeGrid, ParsedMaze, Position, SearchInput

logger = logging.getLogger(__name__)

# up, down, left, right
OFFSETS4 = ((-1, 0), (1, 0), (0, -1), (0, 1))


def read_maze(path: Union[str, Path]) -> MazeGrid:
    """Read a maze file into a list of rows.

    Trailing whitespace is trimmed from every row and blank lines at the end
    of the file are dropped.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            rows = [line.rstrip() for line in f]
    except (OSError, UnicodeDecodeError) as ex:
        raise MazeReadError(path, str(ex)) from ex

    while rows and not rows[-1]:
        rows.pop()
    logger.debug("read %d rows from %s", len(rows), path)
    return rows


def parse_maze(rows: Sequence[str]) -> ParsedMaze:
    """Collect open squares plus the start and goal positions.

    If S or G appears more than once the last one scanned wins.
    """
    open_cells: List[Position] = []
    start: Optional[Position] = None
    goal: Optional[Position] = None

    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            kind = CellKind.classify(ch)
            if kind is None:
                raise MalformedCharacterError(r, c, ch)
            if not kind.is_open:
                continue
            pos = Position(r, c)
            open_cells.append(pos)
            if kind is CellKind.START:
                start = pos
            elif kind is CellKind.GOAL:
                goal = pos

    missing = [name for name, p in (("start", start), ("goal", goal)) if p is None]
    if missing:
        raise MissingMarkerError(missing)

    width = max((len(line) for line in rows), default=0)
    return ParsedMaze(open_cells, start, goal, height=len(rows), width=width)


def build_search_input(maze: ParsedMaze) -> SearchInput:
    """Turn parsed open squares into an adjacency-list graph.

    Every adjacency is seen from both of its cells and ListGraph.add_edge
    links both directions, so each edge ends up stored twice per endpoint.
    """
    index: Dict[Position, int] = {pos: i for i, pos in enumerate(maze.open_cells)}
    graph = ListGraph(len(maze.open_cells))

    for i, pos in enumerate(maze.open_cells):
        for dr, dc in OFFSETS4:
            j = index.get(pos.offset(dr, dc))
            if j is not None:
                graph.add_edge(i, j)

    start_id = index[maze.start]
    goal_id = index[maze.goal]
    logger.debug("built %r start=%d goal=%d", graph, start_id, goal_id)
    return SearchInput(graph, start_id, goal_id)


def maze_to_graph(rows: Sequence[str]) -> SearchInput:
    return build_search_input(parse_maze(rows))
