import pytest

from adj_list import AdjList, Edge, EdgeKind


def test_new_graph_has_no_edges():
    graph = AdjList(3)
    assert len(graph) == 3
    assert graph.edge_count() == 0
    assert list(graph.neighbors(0)) == []


def test_add_edge():
    graph = AdjList(3)
    graph.add_edge(0, 1, EdgeKind.PREREQUISITE_TO_THIS)
    graph.add_edge(0, 2, EdgeKind.PREREQUISITE_FOR_ANOTHER)

    assert list(graph.neighbors(0)) == [
        Edge(1, EdgeKind.PREREQUISITE_TO_THIS),
        Edge(2, EdgeKind.PREREQUISITE_FOR_ANOTHER),
    ]
    assert graph.out_degree(0) == 2
    assert graph.out_degree(1) == 0


def test_duplicate_edges_are_kept():
    graph = AdjList(2)
    graph.add_edge(0, 1, EdgeKind.PREREQUISITE_TO_THIS)
    graph.add_edge(0, 1, EdgeKind.PREREQUISITE_TO_THIS)
    assert graph.out_degree(0) == 2


def test_remove_edge_removes_only_one_matching_edge():
    graph = AdjList(3)
    graph.add_edge(0, 1, EdgeKind.PREREQUISITE_TO_THIS)
    graph.add_edge(0, 2, EdgeKind.PREREQUISITE_TO_THIS)
    graph.add_edge(0, 1, EdgeKind.PREREQUISITE_TO_THIS)

    assert graph.remove_edge(0, 1) is True
    assert [edge.vertex for edge in graph.neighbors(0)] == [2, 1]


def test_remove_missing_edge_is_noop():
    graph = AdjList(3)
    graph.add_edge(0, 1, EdgeKind.PREREQUISITE_TO_THIS)

    assert graph.remove_edge(0, 2) is False
    assert graph.remove_edge(1, 0) is False
    assert graph.edge_count() == 1


def test_neighbors_is_restartable_after_mutation():
    graph = AdjList(3)
    graph.add_edge(0, 1, EdgeKind.PREREQUISITE_TO_THIS)
    graph.add_edge(0, 2, EdgeKind.PREREQUISITE_TO_THIS)

    seen = []
    for edge in graph.neighbors(0):
        seen.append(edge.vertex)
        graph.remove_edge(0, edge.vertex)

    assert seen == [1, 2]
    assert list(graph.neighbors(0)) == []


def test_vertex_out_of_range():
    graph = AdjList(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2, EdgeKind.PREREQUISITE_TO_THIS)
    with pytest.raises(IndexError):
        graph.neighbors(-1)


def test_negative_node_count():
    with pytest.raises(ValueError, match="non-negative"):
        AdjList(-1)
