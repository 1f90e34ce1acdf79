# src/mazegraph/app/cli.py
"""Read mazes, convert them to graphs and report DFS / BFS paths."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Iterable, Optional, TextIO

from mazegraph.config import RunConfig
from mazegraph.core.errors import MazeError
from mazegraph.core.maze import build_search_input, parse_maze, read_maze
from mazegraph.core.render import format_maze, format_path, node_marked_maze, path_marked_maze
from mazegraph.core.search import bfs, get_algorithm

logger = logging.getLogger(__name__)


def run_maze(path: Path, config: RunConfig, out: Optional[TextIO] = None) -> None:
    """Print the full report for one maze file.

    Raises MazeError when the file cannot be read or parsed; nothing is
    searched in that case.
    """
    out = out if out is not None else sys.stdout
    rows = read_maze(path)
    maze = parse_maze(rows)
    problem = build_search_input(maze)

    print(f"== {path} ==", file=out)
    if config.show_raw:
        print(format_maze(rows), file=out)
    if config.show_marked:
        print(format_maze(node_marked_maze(rows)), file=out)
    print(f"StartNode = {problem.start} GoalNode = {problem.goal}", file=out)

    for name in config.algorithms:
        algo = get_algorithm(name)
        t0 = time.perf_counter()
        algo.init(problem)
        found = algo.run()
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        print(format_path(algo.name, found), file=out)
        print(f"Time for {algo.name}: {elapsed_ms:.3f} ms", file=out)
        logger.info("%s %s: visited=%d path_len=%d", path, algo.name,
                    len(algo.visited), len(found))

    if config.draw_path:
        found = bfs(problem)
        if found:
            print(file=out)
            print(format_maze(path_marked_maze(rows, maze, found)), file=out)
    print(file=out)


def run(config: RunConfig, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Process every maze; a bad file is reported and skipped. Returns exit code."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    failures = 0
    for path in config.resolved_maze_paths():
        try:
            run_maze(path, config, out)
        except MazeError as ex:
            failures += 1
            logger.error("skipping %s: %s", path, ex)
            print(f"Error: {path}: {ex}", file=err)
    return 1 if failures else 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mazegraph", description=__doc__)
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Maze files (defaults to the bundled maze1..maze4)",
    )
    parser.add_argument(
        "--algorithm",
        choices=["dfs", "bfs", "both"],
        default="both",
        help="Which search to run (default: both)",
    )
    parser.add_argument("--no-raw", action="store_true", help="Do not print the maze as read")
    parser.add_argument("--no-marked", action="store_true", help="Do not print the node-numbered maze")
    parser.add_argument(
        "--draw-path",
        action="store_true",
        help="Also print the maze with the BFS path marked",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    algorithms = ["dfs", "bfs"] if args.algorithm == "both" else [args.algorithm]
    return RunConfig(
        algorithms=algorithms,
        show_raw=not args.no_raw,
        show_marked=not args.no_marked,
        draw_path=args.draw_path,
        log_level=args.log_level,
        maze_paths=list(args.paths),
    )


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    config = config_from_args(args)
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(config)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
