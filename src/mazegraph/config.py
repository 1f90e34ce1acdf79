# src/mazegraph/config.py
"""Run configuration for the mazegraph command line tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Dict, List

BUNDLED_MAZE_NAMES = ("maze1", "maze2", "maze3", "maze4")


def bundled_maze_path(name: str) -> Path:
    """Return the file path of a maze shipped inside the package."""
    return Path(str(resources.files("mazegraph") / "mazes" / f"{name}.txt"))


def bundled_mazes() -> Dict[str, Path]:
    return {name: bundled_maze_path(name) for name in BUNDLED_MAZE_NAMES}


@dataclass
class RunConfig:
    """Options for one CLI invocation.

    Attributes
    ----------
    algorithms:
        Search names to run on every maze, in order (``"dfs"``, ``"bfs"``).
    show_raw:
        Print the maze exactly as read.
    show_marked:
        Print the node-numbered copy of the maze.
    draw_path:
        Print the maze again with the BFS path overlaid (BFS is run for it
        even when not listed in ``algorithms``).
    log_level:
        Level name handed to ``logging.basicConfig``.
    """

    algorithms: List[str] = field(default_factory=lambda: ["dfs", "bfs"])
    show_raw: bool = True
    show_marked: bool = True
    draw_path: bool = False
    log_level: str = "WARNING"
    maze_paths: List[Path] = field(default_factory=list)

    def resolved_maze_paths(self) -> List[Path]:
        """Mazes to process; the bundled set when none were given."""
        if self.maze_paths:
            return list(self.maze_paths)
        return list(bundled_mazes().values())
