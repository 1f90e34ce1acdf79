"""Headless checks for the pygame step viewer."""

from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from maze_samples import BRANCHING_MAZE, DISCONNECTED_MAZE


@pytest.fixture
def viewer(monkeypatch, write_maze):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    from mazegraph.app.viewer import Viewer

    mazes = {
        "branching": write_maze("branching.txt", BRANCHING_MAZE),
        "split": write_maze("split.txt", DISCONNECTED_MAZE),
    }
    v = Viewer(mazes)
    yield v
    pygame.quit()


def _step_to_end(v, limit=500):
    for _ in range(limit):
        v._do_step()
        if v.state in ("Done", "No path"):
            return
    raise AssertionError("search did not finish")


def test_viewer_runs_bfs_to_completion(viewer) -> None:
    viewer._switch_algo("BFS")
    _step_to_end(viewer)
    assert viewer.state == "Done"
    assert len(viewer.path) == 9
    assert viewer.open_set == set()
    assert len(viewer.closed_set) == 20
    viewer._draw()


def test_viewer_switches_maze_and_reports_no_path(viewer) -> None:
    viewer._switch_maze("split")
    assert viewer.selected_maze_key == "split"
    _step_to_end(viewer)
    assert viewer.state == "No path"
    assert viewer.path == []
    viewer._draw()


def test_viewer_reset_clears_overlays(viewer) -> None:
    viewer._do_step()
    viewer._do_step()
    assert viewer.closed_set
    viewer._reset()
    assert viewer.closed_set == set()
    assert viewer.open_set == {viewer.loaded.problem.start}
    assert viewer._last_metrics["popped"] == 0


def test_maze_files_keep_repeated_stems_apart(tmp_path) -> None:
    from mazegraph.app.viewer import maze_files

    a, b, c = tmp_path / "a" / "maze.txt", tmp_path / "b" / "maze.txt", tmp_path / "other.txt"
    mazes = maze_files([str(a), str(b), str(c)])
    assert len(mazes) == 3
    assert mazes["other"] == c
    assert mazes[str(a)] == a and mazes[str(b)] == b


def test_main_passes_every_maze_to_viewer(monkeypatch, tmp_path) -> None:
    from mazegraph.app import viewer as viewer_mod

    seen = {}

    class FakeViewer:
        def __init__(self, mazes):
            seen.update(mazes)

        def run(self):
            pass

    monkeypatch.setattr(viewer_mod, "Viewer", FakeViewer)
    viewer_mod.main([str(tmp_path / "a" / "maze.txt"), str(tmp_path / "b" / "maze.txt")])
    assert sorted(seen.values()) == [tmp_path / "a" / "maze.txt", tmp_path / "b" / "maze.txt"]
