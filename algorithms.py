"""
Algorithm interfaces for traced shortest paths.

Keeps the engines separate from graph editing and from trace consumers.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Sequence, Tuple

from nodes import GraphEdge, GraphNode
from graph import Graph
from adjacency_list_graph import AdjacencyListGraph
from steps import INFINITY, AlgorithmResult, Distances, Previous, StepKind, StepRecorder


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest paths that also records a trace.

    Every implementation shares the same contract: the trace begins with one
    INITIAL step, and a run that finds no negative cycle ends with one
    COMPLETE step. Runs are pure; nothing is kept between calls.
    """

    name: str = ""

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: str) -> AlgorithmResult:
        """
        Compute distances, predecessors and the step trace from source.

        A source that is not one of graph.nodes() is not an error: every node
        stays unreachable and the trace is just INITIAL followed by COMPLETE.
        """
        raise NotImplementedError

    def run(
        self,
        nodes: Iterable[GraphNode],
        edges: Iterable[GraphEdge],
        source: str,
    ) -> AlgorithmResult:
        """Run over plain node and edge lists."""
        return self.shortest_paths(AdjacencyListGraph(nodes, edges), source)


def initial_state(
    nodes: Sequence[GraphNode], source: str
) -> Tuple[Distances, Previous, StepRecorder]:
    """
    Distances at 0 for source and infinity elsewhere, no predecessors, and a
    recorder that has already emitted the INITIAL step.
    """
    distances: Distances = {}
    previous: Previous = {}
    for node in nodes:
        distances[node.id] = 0 if node.id == source else INFINITY
        previous[node.id] = None

    recorder = StepRecorder(distances, previous)
    recorder.emit(
        StepKind.INITIAL,
        0,
        f"Initialize: Set distance to {source} as 0, others as ∞",
    )
    return distances, previous, recorder
