"""
Engine registry and one-call entry points.

Callers pick an algorithm by name ("dijkstra" or "bellman-ford") and get an
AlgorithmResult back; the registry keeps them decoupled from engine classes.
"""

from __future__ import annotations

from typing import Iterable, MutableMapping, Optional, Tuple

from nodes import GraphEdge, GraphNode
from algorithms import ShortestPathEngine
from dijkstra_engine import TracingDijkstraEngine
from bellman_ford_engine import TracingBellmanFordEngine
from engine_config import EngineConfig
from steps import AlgorithmResult
from log import get_logger, set_log_level

logger = get_logger(__name__)


class EngineRegistry:
    """Name -> engine lookup."""

    def __init__(self) -> None:
        self._engines: MutableMapping[str, ShortestPathEngine] = {}

    def register(self, name: str, engine: ShortestPathEngine) -> None:
        """Register ``engine`` under ``name``; duplicate names raise ValueError."""
        if name in self._engines:
            raise ValueError(f"Engine '{name}' is already registered.")
        self._engines[name] = engine

    def get(self, name: str) -> ShortestPathEngine:
        """Return the engine registered under ``name`` (KeyError if unknown)."""
        try:
            return self._engines[name]
        except KeyError:
            raise KeyError(
                f"No engine registered as '{name}'; known: {', '.join(self.names())}"
            ) from None

    def names(self) -> Tuple[str, ...]:
        return tuple(self._engines)


def default_registry(config: Optional[EngineConfig] = None) -> EngineRegistry:
    cfg = config or EngineConfig()
    registry = EngineRegistry()
    registry.register(TracingDijkstraEngine.name, TracingDijkstraEngine())
    registry.register(
        TracingBellmanFordEngine.name,
        TracingBellmanFordEngine(early_exit=cfg.bellman_ford_early_exit),
    )
    return registry


def run_algorithm(
    name: Optional[str],
    nodes: Iterable[GraphNode],
    edges: Iterable[GraphEdge],
    source: str,
    config: Optional[EngineConfig] = None,
) -> AlgorithmResult:
    """
    Run the named algorithm; ``name=None`` uses ``config.algorithm``.
    """
    cfg = config or EngineConfig()
    if config is not None:
        set_log_level(cfg.log_level)
    engine = default_registry(cfg).get(name or cfg.algorithm)
    logger.debug("running %s from %s", engine.name, source)
    return engine.run(nodes, edges, source)


def dijkstra(
    nodes: Iterable[GraphNode], edges: Iterable[GraphEdge], source: str
) -> AlgorithmResult:
    return TracingDijkstraEngine().run(nodes, edges, source)


def bellman_ford(
    nodes: Iterable[GraphNode],
    edges: Iterable[GraphEdge],
    source: str,
    early_exit: bool = True,
) -> AlgorithmResult:
    return TracingBellmanFordEngine(early_exit=early_exit).run(nodes, edges, source)
