"""
Bellman–Ford engine with negative-cycle detection.

Relaxes every edge in caller order for up to |V| - 1 passes, then scans
once more to detect a negative-weight cycle reachable from the source.
"""

from typing import Optional

from nodes import GraphEdge
from graph import Graph
from algorithms import ShortestPathEngine, initial_state
from shortest_path_tree import reconstruct_tree
from steps import INFINITY, AlgorithmResult, EdgeRef, StepKind, format_distance
from log import get_logger

logger = get_logger(__name__)


class TracingBellmanFordEngine(ShortestPathEngine):
    """
    Single-source Bellman–Ford that records every relaxation.

    A pass with no relaxation records one UPDATE step. With early_exit
    (the default) the remaining passes are skipped at that point, since
    distances have converged; with early_exit=False all |V| - 1 passes run
    and each no-change pass records its own UPDATE step. Final distances
    are the same either way, only the trace differs.
    """

    name = "bellman-ford"

    def __init__(self, early_exit: bool = True) -> None:
        self.early_exit = early_exit

    def shortest_paths(self, graph: Graph, source: str) -> AlgorithmResult:
        nodes = list(graph.nodes())
        edges = list(graph.edges())
        logger.debug(
            "bellman-ford: source=%s nodes=%d edges=%d early_exit=%s",
            source,
            len(nodes),
            len(edges),
            self.early_exit,
        )

        dist, prev, recorder = initial_state(nodes, source)
        iteration = 1
        cycle_edge: Optional[GraphEdge] = None

        # An absent source leaves every node unreachable; nothing to relax.
        if source in dist:
            for i in range(len(nodes) - 1):
                relaxed = False

                for edge in edges:
                    u, v, w = edge.source, edge.destination, edge.weight
                    d_u = dist.get(u, INFINITY)
                    if d_u == INFINITY or v not in dist:
                        continue
                    alt = d_u + w
                    if alt < dist[v]:
                        dist[v] = alt
                        prev[v] = u
                        relaxed = True
                        recorder.emit(
                            StepKind.RELAX,
                            iteration,
                            f"Iteration {i + 1}: Relax {u}→{v}, distance = {format_distance(alt)}",
                            current_edge=EdgeRef(u, v),
                            updated_nodes=(v,),
                        )

                iteration += 1

                if not relaxed:
                    recorder.emit(
                        StepKind.UPDATE,
                        i + 1,
                        f"Iteration {i + 1}: No updates",
                    )
                    if self.early_exit:
                        break

            cycle_edge = self._find_improving_edge(edges, dist)

        if cycle_edge is not None:
            recorder.emit(
                StepKind.NEGATIVE_CYCLE,
                iteration,
                f"Negative weight cycle detected: {cycle_edge.source}→{cycle_edge.destination}",
                current_edge=EdgeRef(cycle_edge.source, cycle_edge.destination),
            )
            recorder.emit(
                StepKind.COMPLETE,
                iteration,
                "Algorithm complete - Negative cycle detected",
            )
            logger.info(
                "bellman-ford: negative cycle reachable from %s via %s->%s",
                source,
                cycle_edge.source,
                cycle_edge.destination,
            )
            return AlgorithmResult(
                distances=dict(dist),
                previous=dict(prev),
                steps=recorder.steps,
                has_negative_cycle=True,
                shortest_path_tree=(),
            )

        tree = reconstruct_tree(nodes, edges, prev)
        recorder.emit(StepKind.COMPLETE, iteration, "Algorithm complete")
        logger.info("bellman-ford: source=%s steps=%d", source, len(recorder))

        return AlgorithmResult(
            distances=dict(dist),
            previous=dict(prev),
            steps=recorder.steps,
            has_negative_cycle=False,
            shortest_path_tree=tuple(tree),
        )

    @staticmethod
    def _find_improving_edge(edges, dist) -> Optional[GraphEdge]:
        """First edge (in edge order) that would still shorten a distance."""
        for edge in edges:
            d_u = dist.get(edge.source, INFINITY)
            if d_u == INFINITY or edge.destination not in dist:
                continue
            if d_u + edge.weight < dist[edge.destination]:
                return edge
        return None
