"""
Shortest-path tree reconstruction from a predecessor map.
"""

from typing import Iterable, List, Mapping, Optional, Sequence

from nodes import GraphEdge, GraphNode


def reconstruct_tree(
    nodes: Iterable[GraphNode],
    edges: Sequence[GraphEdge],
    previous: Mapping[str, Optional[str]],
) -> List[GraphEdge]:
    """
    Collect the tree edges (previous[node] -> node) in node order.

    With parallel edges between the same ordered pair the first one in edge
    order is picked. That is a display choice: it need not be the edge whose
    weight produced the final relaxation.
    """
    tree: List[GraphEdge] = []
    for node in nodes:
        parent = previous.get(node.id)
        if parent is None:
            continue
        edge = next(
            (e for e in edges if e.source == parent and e.destination == node.id),
            None,
        )
        if edge is not None:
            tree.append(edge)
    return tree
