from __future__ import annotations

import pytest

from mazegraph.core.graph import Graph, ListGraph, MatrixGraph


def _square(cls) -> Graph:
    g = cls(4)
    for u, v in [(0, 1), (0, 2), (0, 3), (1, 2), (2, 3)]:
        g.add_edge(u, v)
    return g


def test_matrix_graph_is_directed() -> None:
    g = _square(MatrixGraph)
    assert g.has_edge(0, 1)
    assert not g.has_edge(1, 0)
    assert g.neighbors(0) == [1, 2, 3]
    assert g.neighbors(3) == []


def test_matrix_neighbors_ascending() -> None:
    g = MatrixGraph(6)
    for v in (5, 1, 3):
        g.add_edge(2, v)
    assert g.neighbors(2) == [1, 3, 5]


def test_matrix_add_edge_idempotent() -> None:
    g = MatrixGraph(3)
    g.add_edge(0, 2)
    g.add_edge(0, 2)
    g.add_edge(0, 2)
    assert g.has_edge(0, 2)
    assert g.neighbors(0) == [2]
    assert g.edge_count() == 1


def test_list_graph_links_both_directions() -> None:
    g = _square(ListGraph)
    assert g.has_edge(1, 0) and g.has_edge(0, 1)
    assert g.neighbors(0) == [1, 2, 3]
    assert g.neighbors(3) == [0, 2]
    assert not g.has_edge(1, 3)


def test_list_graph_keeps_duplicates_in_insertion_order() -> None:
    g = ListGraph(3)
    g.add_edge(0, 2)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    assert g.neighbors(0) == [2, 1, 2]
    assert g.neighbors(2) == [0, 0]
    assert g.edge_count() == 6


def test_list_graph_neighbors_returns_copy() -> None:
    g = ListGraph(2)
    g.add_edge(0, 1)
    g.neighbors(0).append(99)
    assert g.neighbors(0) == [1]


@pytest.mark.parametrize("cls", [MatrixGraph, ListGraph])
@pytest.mark.parametrize("u, v", [(-1, 0), (0, -1), (4, 0), (0, 4), (7, 9)])
def test_out_of_range_ids_are_ignored(cls, u, v) -> None:
    g = cls(4)
    g.add_edge(u, v)
    assert g.edge_count() == 0
    assert not g.has_edge(u, v)
    assert g.neighbors(u) == []


@pytest.mark.parametrize("cls", [MatrixGraph, ListGraph])
def test_size(cls) -> None:
    assert cls(5).size() == 5
    assert len(cls(5)) == 5
    assert cls(0).size() == 0
    assert cls(0).neighbors(0) == []


def test_repr_names_realization() -> None:
    assert repr(_square(ListGraph)) == "ListGraph(nodes=4, entries=10)"
    assert repr(_square(MatrixGraph)) == "MatrixGraph(nodes=4, entries=5)"
