import pytest

from structkit.graph import MatrixGraph


def test_empty_graph_has_zero_matrix():
    graph = MatrixGraph(3)
    assert graph.rows() == [(0, 0, 0)] * 3
    assert graph.edge_count() == 0
    assert graph.vertex_count == 3


def test_edges_are_symmetric():
    graph = MatrixGraph(4, [(0, 1), (2, 3)])
    assert graph.has_edge(0, 1)
    assert graph.has_edge(1, 0)
    assert graph.has_edge(3, 2)
    assert not graph.has_edge(0, 2)


def test_matrix_is_symmetric_invariant():
    graph = MatrixGraph(5, [(0, 4), (1, 3), (2, 2), (4, 1)])
    rows = graph.rows()
    for u, row in enumerate(rows):
        for v, flag in enumerate(row):
            assert flag == rows[v][u]


def test_worked_example_matrix():
    graph = MatrixGraph(3, [(0, 1), (1, 2)])
    assert graph.rows() == [(0, 1, 0), (1, 0, 1), (0, 1, 0)]


def test_neighbors_sorted():
    graph = MatrixGraph(5, [(2, 4), (2, 0), (2, 3)])
    assert graph.neighbors(2) == [0, 3, 4]
    assert graph.neighbors(4) == [2]
    assert graph.neighbors(1) == []


def test_add_edge_counts_each_edge():
    graph = MatrixGraph(3)
    graph.add_edge(0, 2)
    graph.add_edge(1, 2)
    assert graph.edge_count() == 2
    assert graph.has_edge(2, 0)


def test_self_loop():
    graph = MatrixGraph(2, [(1, 1)])
    assert graph.has_edge(1, 1)
    assert graph.neighbors(1) == [1]


def test_rows_is_a_copy():
    graph = MatrixGraph(2)
    rows = graph.rows()
    rows[0] = (1, 1)
    assert graph.rows()[0] == (0, 0)


@pytest.mark.parametrize("u, v", [(0, 3), (-1, 0), (5, 5)])
def test_out_of_range_vertex_raises(u, v):
    graph = MatrixGraph(3)
    with pytest.raises(IndexError):
        graph.add_edge(u, v)


def test_out_of_range_in_queries():
    graph = MatrixGraph(2)
    with pytest.raises(IndexError):
        graph.has_edge(0, 2)
    with pytest.raises(IndexError):
        graph.neighbors(2)


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        MatrixGraph(-1)