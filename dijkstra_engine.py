"""
Linear-scan DijkstraEngine implementation for sptrace.

Selection scans every node in caller order instead of popping a heap, so
ties go to the earliest node and the trace is reproducible step for step.
"""

from typing import Optional, Set

from graph import Graph
from algorithms import ShortestPathEngine, initial_state
from adjacency_list_graph import build_adjacency_list
from shortest_path_tree import reconstruct_tree
from steps import INFINITY, AlgorithmResult, EdgeRef, StepKind, format_distance
from log import get_logger

logger = get_logger(__name__)


class TracingDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra with O(V) selection per iteration.

    Complexity:
        O(V^2 + E); fine for graphs small enough to animate.

    Assumes non-negative weights. The precondition is not checked; negative
    weights give whatever the textbook algorithm gives.
    """

    name = "dijkstra"

    def shortest_paths(self, graph: Graph, source: str) -> AlgorithmResult:
        nodes = list(graph.nodes())
        edges = list(graph.edges())
        adj = build_adjacency_list(nodes, edges)
        logger.debug(
            "dijkstra: source=%s nodes=%d edges=%d", source, len(nodes), len(edges)
        )

        dist, prev, recorder = initial_state(nodes, source)
        visited: Set[str] = set()
        iteration = 1

        while len(visited) < len(nodes):
            u: Optional[str] = None
            d_u = INFINITY
            for node in nodes:
                if node.id not in visited and dist[node.id] < d_u:
                    d_u = dist[node.id]
                    u = node.id

            # Everything left is unreachable
            if u is None:
                break

            visited.add(u)
            recorder.emit(
                StepKind.SELECT,
                iteration,
                f"Select node {u} with distance {format_distance(d_u)}",
                current_node=u,
            )

            for v, w in adj.get(u, []):
                if v not in dist:
                    continue
                alt = dist[u] + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    recorder.emit(
                        StepKind.RELAX,
                        iteration,
                        f"Relax edge {u}→{v}: update distance to {format_distance(alt)}",
                        current_node=u,
                        current_edge=EdgeRef(u, v),
                        updated_nodes=(v,),
                    )

            iteration += 1

        tree = reconstruct_tree(nodes, edges, prev)
        recorder.emit(StepKind.COMPLETE, iteration, "Algorithm complete")
        logger.info(
            "dijkstra: source=%s visited=%d steps=%d", source, len(visited), len(recorder)
        )

        return AlgorithmResult(
            distances=dict(dist),
            previous=dict(prev),
            steps=recorder.steps,
            has_negative_cycle=False,
            shortest_path_tree=tuple(tree),
        )
