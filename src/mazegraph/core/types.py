# src/mazegraph/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from mazegraph.core.graph import Graph

MazeGrid = List[str]        # one string per row, top to bottom
NodeId = int
Path = List[NodeId]


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)


class CellKind(Enum):
    WALL = "X"
    OPEN = " "
    START = "S"
    GOAL = "G"

    @classmethod
    def classify(cls, ch: str) -> Optional["CellKind"]:
        """Map a maze character (any case) to its kind, or None if unknown."""
        try:
            return cls(ch.upper())
        except ValueError:
            return None

    @property
    def is_open(self) -> bool:
        return self is not CellKind.WALL


@dataclass
class ParsedMaze:
    open_cells: List[Position]         # index == node id
    start: Position
    goal: Position
    height: int
    width: int

    def __len__(self) -> int:
        return len(self.open_cells)


@dataclass
class SearchInput:
    graph: "Graph"
    start: NodeId
    goal: NodeId


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[NodeId] = field(default_factory=list)
    closed: List[NodeId] = field(default_factory=list)
    current: Optional[NodeId] = None
    path: Optional[Path] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
