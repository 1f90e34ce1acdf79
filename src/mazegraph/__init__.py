# src/mazegraph/__init__.py
"""mazegraph package.

Reads text mazes, turns their open squares into graphs and searches them
with depth-first and breadth-first search.
"""

__all__ = [
    "config",
    "core",
    "app",
]
