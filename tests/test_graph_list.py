import pytest

from algokit.graph_list import AdjacencyList, EdgeKind, TraversalEdge


def _source_graph():
    graph = AdjacencyList()
    graph.add_edge("A", "B", 1)
    graph.add_edge("A", "C", 1)
    graph.add_edge("B", "D", 1)
    graph.add_edge("C", "D", 1)
    return graph


def _triangle():
    graph = AdjacencyList()
    graph.add_edge("A", "B", 1)
    graph.add_edge("A", "C", 1)
    graph.add_edge("B", "C", 1)
    return graph


def test_format_of_source_graph():
    assert _source_graph().format() == (
        "A -> (B, 1) (C, 1)\n"
        "B -> (A, 1) (D, 1)\n"
        "C -> (A, 1) (D, 1)\n"
        "D -> (B, 1) (C, 1)"
    )


def test_breadth_first_on_source_graph():
    edges = list(_source_graph().breadth_first_edges("A"))
    assert edges == [
        TraversalEdge("A", "B", EdgeKind.TREE),
        TraversalEdge("A", "C", EdgeKind.TREE),
        TraversalEdge("B", "D", EdgeKind.TREE),
        TraversalEdge("C", "D", EdgeKind.CROSS),
    ]


def test_depth_first_on_source_graph():
    edges = list(_source_graph().depth_first_edges("A"))
    assert edges == [
        TraversalEdge("A", "B", EdgeKind.TREE),
        TraversalEdge("B", "D", EdgeKind.TREE),
        TraversalEdge("D", "C", EdgeKind.TREE),
        TraversalEdge("C", "A", EdgeKind.BACK),
    ]


def test_add_edge_is_symmetric_and_keeps_weight():
    graph = AdjacencyList()
    graph.add_edge("X", "Y", 7)
    assert graph.neighbors("X") == [("Y", 7)]
    assert graph.neighbors("Y") == [("X", 7)]
    assert len(graph) == 2
    assert "X" in graph


def test_neighbors_of_unknown_vertex_raises():
    with pytest.raises(KeyError):
        _source_graph().neighbors("Z")


def test_unknown_start_yields_nothing():
    graph = _source_graph()
    assert list(graph.breadth_first_edges("Z")) == []
    assert list(graph.depth_first_edges("Z")) == []
    assert "Z" not in graph


@pytest.mark.parametrize("method", ["breadth_first_edges", "depth_first_edges"])
def test_tree_edges_span_the_component(method):
    graph = _source_graph()
    edges = list(getattr(graph, method)("A"))
    tree_targets = [edge.target for edge in edges if edge.kind is EdgeKind.TREE]
    assert sorted(tree_targets) == sorted(set(graph) - {"A"})


@pytest.mark.parametrize("method", ["breadth_first_edges", "depth_first_edges"])
def test_traversals_repeat_identically(method):
    graph = _source_graph()
    first = list(getattr(graph, method)("A"))
    second = list(getattr(graph, method)("A"))
    assert first == second


def test_traversal_stays_in_component():
    graph = _source_graph()
    graph.add_edge("X", "Y", 2)
    reached = {"A", "B", "C", "D"}
    for method in ("breadth_first_edges", "depth_first_edges"):
        for edge in getattr(graph, method)("A"):
            assert {edge.source, edge.target} <= reached


def test_depth_first_skips_back_edges_from_start():
    edges = list(_triangle().depth_first_edges("A"))
    back = [edge for edge in edges if edge.kind is EdgeKind.BACK]
    assert back
    assert all(edge.source != "A" for edge in back)


def test_depth_first_never_reports_edge_to_parent_as_back():
    graph = _source_graph()
    edges = list(graph.depth_first_edges("A"))
    tree_pairs = {(e.source, e.target) for e in edges if e.kind is EdgeKind.TREE}
    for edge in edges:
        if edge.kind is EdgeKind.BACK:
            assert (edge.target, edge.source) not in tree_pairs