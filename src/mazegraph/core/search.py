# src/mazegraph/core/search.py
#!/usr/bin/env python3
"""
Uninformed search (DFS / BFS) - one frontier pop per step() for animation.

Implements the Algorithm API expected by the viewer:
- init(problem) - reset() - step() -> StepResult - run() -> path

Both searches share one skeleton and differ only in which end of the
frontier they pop from (LIFO for DFS, FIFO for BFS). A node is marked
visited and given its parent the moment it is first discovered, and is never
pushed again. The whole reachable component is explored before the path is
rebuilt from the parent map, so the result does not depend on when the goal
happened to be seen.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Set

from mazegraph.core.types import NodeId, Path, SearchInput, StepResult

logger = logging.getLogger(__name__)


def reconstruct_path(parent: Dict[NodeId, Optional[NodeId]], goal: NodeId) -> Path:
    """Walk parents from goal back to the root (parent None), then reverse.

    Returns [] when goal was never reached.
    """
    if goal not in parent:
        return []
    path: Path = []
    cur: Optional[NodeId] = goal
    while cur is not None:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path


@dataclass
class FrontierSearch(ABC):
    """Shared frontier search; subclasses choose which end of the frontier to pop."""

    name: str = "search"

    # Internal state
    problem: Optional[SearchInput] = None
    frontier: Deque[NodeId] = field(default_factory=deque)
    visited: Set[NodeId] = field(default_factory=set)
    parent: Dict[NodeId, Optional[NodeId]] = field(default_factory=dict)
    popped_count: int = 0
    pushed_count: int = 0
    done: bool = False
    path: Path = field(default_factory=list)

    # -------------------- lifecycle --------------------

    def init(self, problem: SearchInput) -> None:
        """Initialize on a given search problem."""
        self.problem = problem
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed with the start node."""
        if self.problem is None:
            return
        self.frontier.clear()
        self.visited.clear()
        self.parent.clear()
        self.popped_count = 0
        self.pushed_count = 0
        self.done = False
        self.path = []

        s = self.problem.start
        self.visited.add(s)
        self.parent[s] = None
        self._push(s)

    # -------------------- frontier discipline --------------------

    @abstractmethod
    def _pop(self) -> NodeId:
        ...

    def _push(self, n: NodeId) -> None:
        self.frontier.append(n)
        self.pushed_count += 1

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE expansion:
          - Pop a node from the frontier.
          - Discover each unvisited neighbor: mark, record parent, push.
          - When the frontier is empty, rebuild the path and finish.
        """
        if self.problem is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if not self.done and not self.frontier:
            self.done = True
            self.path = reconstruct_path(self.parent, self.problem.goal)
            logger.debug("%s finished: visited=%d path_len=%d",
                         self.name, len(self.visited), len(self.path))

        if self.done:
            return StepResult(
                status="done" if self.path else "no_path",
                path=list(self.path),
                metrics=self._metrics(),
            )

        u = self._pop()
        self.popped_count += 1

        opened_now: List[NodeId] = []
        for v in self.problem.graph.neighbors(u):
            if v in self.visited:
                continue    # duplicate neighbor entries land here too
            self.visited.add(v)
            self.parent[v] = u
            self._push(v)
            opened_now.append(v)

        return StepResult(
            status="running",
            opened=opened_now,
            closed=[u],
            current=u,
            metrics=self._metrics(),
        )

    def run(self) -> Path:
        """Step until finished and return the path ([] if unreachable)."""
        if self.problem is None:
            return []
        while True:
            res = self.step()
            if res.status in ("done", "no_path"):
                return res.path or []

    # -------------------- metrics --------------------

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "frontier_size": len(self.frontier),
            "visited_count": len(self.visited),
            "path_len": len(self.path),
        }


@dataclass
class DFSAlgo(FrontierSearch):
    name: str = "DFS"

    def _pop(self) -> NodeId:
        return self.frontier.pop()          # stack


@dataclass
class BFSAlgo(FrontierSearch):
    name: str = "BFS"

    def _pop(self) -> NodeId:
        return self.frontier.popleft()      # queue


ALGORITHMS = {
    "dfs": DFSAlgo,
    "bfs": BFSAlgo,
}


def get_algorithm(name: str) -> FrontierSearch:
    try:
        cls = ALGORITHMS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown algorithm {name!r}; choose from {sorted(ALGORITHMS)}") from None
    return cls()


def dfs(problem: SearchInput) -> Path:
    algo = DFSAlgo()
    algo.init(problem)
    return algo.run()


def bfs(problem: SearchInput) -> Path:
    algo = BFSAlgo()
    algo.init(problem)
    return algo.run()
