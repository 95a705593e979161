"""
Text input for graph editing: "A" for a node, "A B 5" for an edge.
"""

from typing import Collection, Iterable, List, Optional

from nodes import GraphEdge, GraphNode


class GraphInputError(ValueError):
    """Raised when a node or edge line cannot be parsed."""


def parse_node(text: str) -> GraphNode:
    node_id = text.strip()
    if not node_id:
        raise GraphInputError("Node id must not be blank.")
    return GraphNode(node_id)


def parse_edge(text: str, known_nodes: Optional[Collection[str]] = None) -> GraphEdge:
    """
    Parse "source destination weight".

    The weight must be an integer. When known_nodes is given both endpoints
    must be among them.
    """
    parts = text.split()
    if len(parts) != 3:
        raise GraphInputError(
            f"Expected 'source destination weight', got {text.strip()!r}."
        )

    source, destination, weight_text = parts
    try:
        weight = int(weight_text)
    except ValueError:
        raise GraphInputError(f"Edge weight {weight_text!r} is not an integer.") from None

    if known_nodes is not None:
        for endpoint in (source, destination):
            if endpoint not in known_nodes:
                raise GraphInputError(f"Unknown node {endpoint!r} in edge {text.strip()!r}.")

    return GraphEdge(source, destination, weight)


def format_adjacency(nodes: Iterable[GraphNode], edges: Iterable[GraphEdge]) -> List[str]:
    """One "A: [B(4), C(1)]" line per node, in node order."""
    edges = list(edges)
    lines: List[str] = []
    for node in nodes:
        out = [f"{e.destination}({e.weight})" for e in edges if e.source == node.id]
        lines.append(f"{node.id}: [{', '.join(out)}]")
    return lines
