"""
Tabular view of one trace step: node, distance, predecessor.
"""

from dataclasses import dataclass
from typing import Iterable, List

from nodes import GraphNode
from steps import INFINITY, AlgorithmStep, format_distance


@dataclass(frozen=True)
class DistanceRow:
    node: str
    distance: str
    previous: str
    updated: bool


def distance_table(nodes: Iterable[GraphNode], step: AlgorithmStep) -> List[DistanceRow]:
    """
    Rows sorted by node id. Infinite distances show as "∞" and missing
    predecessors as "-"; updated marks nodes changed by this step.
    """
    rows: List[DistanceRow] = []
    for node in sorted(nodes, key=lambda n: n.id):
        parent = step.previous.get(node.id)
        rows.append(
            DistanceRow(
                node=node.id,
                distance=format_distance(step.distances.get(node.id, INFINITY)),
                previous="-" if parent is None else parent,
                updated=node.id in step.updated_nodes,
            )
        )
    return rows
