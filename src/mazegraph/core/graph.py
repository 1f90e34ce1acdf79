# src/mazegraph/core/graph.py
#!/usr/bin/env python3
"""
Unweighted graphs over integer node ids [0, N).

Two interchangeable realizations share one contract:
- MatrixGraph: dense N x N 0/1 matrix, directed, O(1) membership.
- ListGraph:   per-node neighbor lists in insertion order, add_edge is undirected.

Bad node ids are ignored: mutators do nothing, queries answer
"no edge" / "no neighbors". Nothing is raised.
"""

from abc import ABC, abstractmethod
from typing import List

import numpy as np


class Graph(ABC):
    def __init__(self, num_nodes: int):
        self.num_nodes = max(0, int(num_nodes))

    # -------------------- contract --------------------

    @abstractmethod
    def add_edge(self, u: int, v: int) -> None:
        ...

    @abstractmethod
    def neighbors(self, u: int) -> List[int]:
        ...

    @abstractmethod
    def has_edge(self, u: int, v: int) -> bool:
        ...

    @abstractmethod
    def edge_count(self) -> int:
        """Number of stored (directed) adjacency entries."""

    def size(self) -> int:
        return self.num_nodes

    # -------------------- helpers --------------------

    def _valid(self, *nodes: int) -> bool:
        return all(0 <= n < self.num_nodes for n in nodes)

    def __len__(self) -> int:
        return self.num_nodes

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.num_nodes}, entries={self.edge_count()})"


class MatrixGraph(Graph):
    """Adjacency-matrix graph. add_edge(u, v) does not imply add_edge(v, u)."""

    def __init__(self, num_nodes: int):
        super().__init__(num_nodes)
        self.matrix = np.zeros((self.num_nodes, self.num_nodes), dtype=np.int8)

    def add_edge(self, u: int, v: int) -> None:
        if self._valid(u, v):
            self.matrix[u, v] = 1

    def neighbors(self, u: int) -> List[int]:
        if not self._valid(u):
            return []
        return np.flatnonzero(self.matrix[u]).tolist()

    def has_edge(self, u: int, v: int) -> bool:
        if not self._valid(u, v):
            return False
        return bool(self.matrix[u, v])

    def edge_count(self) -> int:
        return int(np.count_nonzero(self.matrix))


class ListGraph(Graph):
    """Adjacency-list graph. One add_edge call links both directions.

    Adding the same pair twice stores it twice; searches tolerate that.
    """

    def __init__(self, num_nodes: int):
        super().__init__(num_nodes)
        self.adj: List[List[int]] = [[] for _ in range(self.num_nodes)]

    def add_edge(self, u: int, v: int) -> None:
        if self._valid(u, v):
            self.adj[u].append(v)
            self.adj[v].append(u)

    def neighbors(self, u: int) -> List[int]:
        if not self._valid(u):
            return []
        return list(self.adj[u])

    def has_edge(self, u: int, v: int) -> bool:
        if not self._valid(u, v):
            return False
        return v in self.adj[u]

    def edge_count(self) -> int:
        return sum(len(ns) for ns in self.adj)
