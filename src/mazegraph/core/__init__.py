# src/mazegraph/core/__init__.py
"""Graphs, maze parsing, search and text rendering."""

from .errors import MalformedCharacterError, MazeError, MazeReadError, MissingMarkerError
from .graph import Graph, ListGraph, MatrixGraph
from .maze import build_search_input, maze_to_graph, parse_maze, read_maze
from .render import format_path, node_marked_maze
from .search import BFSAlgo, DFSAlgo, bfs, dfs
from .types import CellKind, ParsedMaze, Position, SearchInput, StepResult

__all__ = [
    "BFSAlgo",
    "CellKind",
    "DFSAlgo",
    "Graph",
    "ListGraph",
    "MalformedCharacterError",
    "MatrixGraph",
    "MazeError",
    "MazeReadError",
    "MissingMarkerError",
    "ParsedMaze",
    "Position",
    "SearchInput",
    "StepResult",
    "bfs",
    "build_search_input",
    "dfs",
    "format_path",
    "maze_to_graph",
    "node_marked_maze",
    "parse_maze",
    "read_maze",
]
