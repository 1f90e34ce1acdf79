"""Sample mazes and reference helpers shared by the test modules."""

from __future__ import annotations

import random
from collections import deque
from typing import Dict, List, Optional

from mazegraph.core.types import Position

LINEAR_MAZE = [
    "XXXXX",
    "XS GX",
    "XXXXX",
]

BRANCHING_MAZE = [
    "XXXXXXX",
    "XS    X",
    "XXX   X",
    "X   X X",
    "X   X X",
    "X X  GX",
    "XXXXXXX",
]

DISCONNECTED_MAZE = [
    "XXXXXXX",
    "XS XXGX",
    "XXXXXXX",
]


def random_maze(seed: int, height: int = 12, width: int = 16, wall_ratio: float = 0.3) -> List[str]:
    """Walled rectangle with random interior walls and one S and one G."""
    rng = random.Random(seed)
    grid = [["X"] * width for _ in range(height)]
    interior = [(r, c) for r in range(1, height - 1) for c in range(1, width - 1)]
    for r, c in interior:
        grid[r][c] = "X" if rng.random() < wall_ratio else " "
    (sr, sc), (gr, gc) = rng.sample(interior, 2)
    grid[sr][sc] = "S"
    grid[gr][gc] = "G"
    return ["".join(row) for row in grid]


def grid_distance(rows: List[str], start: Position, goal: Position) -> Optional[int]:
    """Edge count of the shortest 4-connected walk, straight on the text grid."""
    def open_at(p: Position) -> bool:
        return 0 <= p.row < len(rows) and 0 <= p.col < len(rows[p.row]) and rows[p.row][p.col].upper() != "X"

    dist: Dict[Position, int] = {start: 0}
    q = deque([start])
    while q:
        p = q.popleft()
        if p == goal:
            return dist[p]
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            n = p.offset(dr, dc)
            if n not in dist and open_at(n):
                dist[n] = dist[p] + 1
                q.append(n)
    return None
