"""
Concrete directed, weighted graph implementation for sptrace.

Implements the Graph interface over ordered node and edge lists, and
provides the adjacency builder used by the engines.
"""

from typing import Dict, Iterable, List, Sequence, Tuple, Union

from nodes import GraphEdge, GraphNode
from graph import Graph

AdjacencyList = Dict[str, List[Tuple[str, int]]]


def build_adjacency_list(
    nodes: Iterable[GraphNode], edges: Iterable[GraphEdge]
) -> AdjacencyList:
    """
    Map every node id to its outgoing (neighbor, weight) pairs.

    Nodes without outgoing edges map to an empty list. Pairs appear in
    edge-list order. An edge whose source is not a listed node still gets
    an entry; keeping edges consistent with the node list is up to the caller.
    """
    adj: AdjacencyList = {}
    for node in nodes:
        adj.setdefault(node.id, [])

    for edge in edges:
        adj.setdefault(edge.source, []).append((edge.destination, edge.weight))

    return adj


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by ordered node and edge lists.
    """

    def __init__(
        self,
        nodes: Iterable[GraphNode] = (),
        edges: Iterable[GraphEdge] = (),
    ) -> None:
        self._nodes: List[GraphNode] = []
        self._edges: List[GraphEdge] = []
        for node in nodes:
            self.add_node(node)
        for edge in edges:
            self.add_edge(edge.source, edge.destination, edge.weight)

    # --- Mutation API (editor side, not part of Graph interface) -------------

    def add_node(self, node: Union[GraphNode, str]) -> None:
        """Append node unless a node with the same id already exists."""
        if isinstance(node, str):
            node = GraphNode(node)
        if not self.has_node(node.id):
            self._nodes.append(node)

    def add_edge(self, src: str, dst: str, weight: int) -> GraphEdge:
        """
        Append a directed edge src -> dst with weight.
        Parallel edges are kept as separate entries.
        """
        edge = GraphEdge(src, dst, weight)
        self._edges.append(edge)
        return edge

    def remove_node(self, node_id: str) -> None:
        """Drop node_id and every edge touching it."""
        self._nodes = [n for n in self._nodes if n.id != node_id]
        self._edges = [
            e for e in self._edges if e.source != node_id and e.destination != node_id
        ]

    def remove_edge(self, index: int) -> GraphEdge:
        """Remove and return the edge at position index."""
        return self._edges.pop(index)

    def clear(self) -> None:
        self._nodes.clear()
        self._edges.clear()

    def has_node(self, node_id: str) -> bool:
        return any(n.id == node_id for n in self._nodes)

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Sequence[GraphNode]:
        return tuple(self._nodes)

    def edges(self) -> Sequence[GraphEdge]:
        return tuple(self._edges)

    # --- Derived views -------------------------------------------------------

    def adjacency(self) -> AdjacencyList:
        return build_adjacency_list(self._nodes, self._edges)

    def outgoing(self, node_id: str) -> List[Tuple[str, int]]:
        return list(self.adjacency().get(node_id, []))  # defensive copy
