"""
Unit tests for AdjacencyListGraph and the adjacency builder.
"""

from adjacency_list_graph import AdjacencyListGraph, build_adjacency_list
from nodes import GraphEdge, GraphNode


def test_build_adjacency_list_keeps_edge_order_and_empty_nodes():
    nodes = [GraphNode("A"), GraphNode("B"), GraphNode("C")]
    edges = [GraphEdge("A", "C", 1), GraphEdge("B", "C", 3), GraphEdge("A", "B", 4)]

    adj = build_adjacency_list(nodes, edges)

    assert adj == {"A": [("C", 1), ("B", 4)], "B": [("C", 3)], "C": []}
    assert list(adj) == ["A", "B", "C"]


def test_build_adjacency_list_keeps_parallel_edges_and_unknown_sources():
    nodes = [GraphNode("A"), GraphNode("B")]
    edges = [GraphEdge("A", "B", 5), GraphEdge("A", "B", 2), GraphEdge("X", "A", 1)]

    adj = build_adjacency_list(nodes, edges)

    assert adj["A"] == [("B", 5), ("B", 2)]
    # Tolerated, not validated
    assert adj["X"] == [("A", 1)]


def test_add_nodes_and_edges():
    g = AdjacencyListGraph()

    g.add_node("A")
    g.add_node(GraphNode("B", x=10.0, y=20.0))
    g.add_node("C")
    g.add_edge("A", "B", 1)
    g.add_edge("A", "C", 2)
    g.add_edge("B", "C", 3)

    assert [n.id for n in g.nodes()] == ["A", "B", "C"]
    assert g.outgoing("A") == [("B", 1), ("C", 2)]
    assert g.outgoing("B") == [("C", 3)]
    assert g.outgoing("C") == []


def test_add_node_ignores_existing_id():
    g = AdjacencyListGraph()
    g.add_node("A")
    g.add_node(GraphNode("A", x=1.0, y=1.0))

    assert g.nodes() == (GraphNode("A"),)


def test_remove_node_drops_incident_edges():
    g = AdjacencyListGraph(
        [GraphNode("A"), GraphNode("B"), GraphNode("C")],
        [GraphEdge("A", "B", 1), GraphEdge("B", "C", 1), GraphEdge("A", "C", 5)],
    )

    g.remove_node("B")

    assert [n.id for n in g.nodes()] == ["A", "C"]
    assert g.edges() == (GraphEdge("A", "C", 5),)


def test_remove_edge_by_index_and_clear():
    g = AdjacencyListGraph([GraphNode("A"), GraphNode("B")])
    g.add_edge("A", "B", 1)
    g.add_edge("B", "A", 2)

    removed = g.remove_edge(0)

    assert removed == GraphEdge("A", "B", 1)
    assert g.edges() == (GraphEdge("B", "A", 2),)

    g.clear()
    assert g.nodes() == ()
    assert g.edges() == ()


def test_outgoing_returns_copy():
    g = AdjacencyListGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", 1)

    out = g.outgoing("A")
    out.clear()

    # internal structure must remain intact
    assert g.outgoing("A") == [("B", 1)]
