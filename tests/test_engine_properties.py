"""
Properties every engine must satisfy, checked over seeded random graphs.
"""

import math
import random

import pytest

from bellman_ford_engine import TracingBellmanFordEngine
from dijkstra_engine import TracingDijkstraEngine
from nodes import GraphEdge, GraphNode
from steps import StepKind

ENGINES = [
    TracingDijkstraEngine(),
    TracingBellmanFordEngine(),
    TracingBellmanFordEngine(early_exit=False),
]
ENGINE_IDS = ["dijkstra", "bellman-ford", "bellman-ford-full"]


def _random_graph(seed: int, n_nodes: int = 6, n_edges: int = 12):
    rng = random.Random(seed)
    nodes = [GraphNode(f"N{i}") for i in range(n_nodes)]
    edges = [
        GraphEdge(rng.choice(nodes).id, rng.choice(nodes).id, rng.randint(0, 9))
        for _ in range(n_edges)
    ]
    return nodes, edges


@pytest.mark.parametrize("seed", range(20))
def test_dijkstra_matches_bellman_ford_on_non_negative_graphs(seed):
    nodes, edges = _random_graph(seed)

    dj = TracingDijkstraEngine().run(nodes, edges, "N0")
    bf = TracingBellmanFordEngine().run(nodes, edges, "N0")

    assert dj.distances == bf.distances
    assert bf.has_negative_cycle is False


@pytest.mark.parametrize("engine", ENGINES, ids=ENGINE_IDS)
@pytest.mark.parametrize("seed", range(5))
def test_trace_starts_with_initial_and_ends_with_complete(engine, seed):
    nodes, edges = _random_graph(seed)

    steps = engine.run(nodes, edges, "N0").steps

    assert steps[0].kind is StepKind.INITIAL
    assert [s.kind for s in steps].count(StepKind.INITIAL) == 1
    finite = [d for d in steps[0].distances.values() if d != math.inf]
    assert finite == [0]
    assert steps[-1].kind is StepKind.COMPLETE
    assert [s.kind for s in steps].count(StepKind.COMPLETE) == 1


@pytest.mark.parametrize("engine", ENGINES, ids=ENGINE_IDS)
@pytest.mark.parametrize("seed", range(5))
def test_predecessor_and_distance_agree(engine, seed):
    nodes, edges = _random_graph(seed)

    result = engine.run(nodes, edges, "N0")

    for node_id, parent in result.previous.items():
        dist = result.distances[node_id]
        if parent is None:
            assert dist == math.inf or (node_id == "N0" and dist == 0)
        else:
            assert dist != math.inf


@pytest.mark.parametrize("engine", ENGINES, ids=ENGINE_IDS)
def test_rerun_is_identical(engine):
    nodes, edges = _random_graph(7)

    first = engine.run(nodes, edges, "N0")
    second = engine.run(nodes, edges, "N0")

    assert first == second
    assert [(s.kind, s.iteration) for s in first.steps] == [
        (s.kind, s.iteration) for s in second.steps
    ]
    assert [s.message for s in first.steps] == [s.message for s in second.steps]


def test_tree_edges_connect_predecessors():
    nodes, edges = _random_graph(3)

    result = TracingDijkstraEngine().run(nodes, edges, "N0")

    for edge in result.shortest_path_tree:
        assert result.previous[edge.destination] == edge.source
    reached = [n for n, p in result.previous.items() if p is not None]
    assert len(result.shortest_path_tree) == len(reached)
