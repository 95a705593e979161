"""
Step-record vocabulary shared by every shortest-path engine.

A trace is an append-only list of AlgorithmStep snapshots. Renderers index
into it at arbitrary points (including backwards), so each step owns a
frozen copy of the distance and predecessor maps at the instant it was
emitted rather than a view of the engine's working state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple
import math

from nodes import GraphEdge

Distances = Dict[str, float]
Previous = Dict[str, Optional[str]]

INFINITY = math.inf


class StepKind(Enum):
    """Closed set of step kinds a trace may contain."""

    INITIAL = "initial"
    SELECT = "select"
    RELAX = "relax"
    UPDATE = "update"
    COMPLETE = "complete"
    NEGATIVE_CYCLE = "negative_cycle"


@dataclass(frozen=True)
class EdgeRef:
    """The (source, destination) pair of the edge under examination."""

    source: str
    destination: str


@dataclass(frozen=True)
class AlgorithmStep:
    """
    Immutable snapshot of the engine state at one observable event.

    distances and previous are read-only copies; updated_nodes lists the
    nodes whose distance changed in this step (empty when none did).
    Steps compare by value but are not hashable; index them by their
    position in the trace.
    """

    kind: StepKind
    iteration: int
    distances: Mapping[str, float]
    previous: Mapping[str, Optional[str]]
    message: str
    current_node: Optional[str] = None
    current_edge: Optional[EdgeRef] = None
    updated_nodes: Tuple[str, ...] = ()

    # Snapshot mappings are unhashable
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class AlgorithmResult:
    """
    Outcome of one engine run.

    When has_negative_cycle is true, distances and previous hold whatever was
    computed before detection and shortest_path_tree is empty.
    """

    distances: Mapping[str, float]
    previous: Mapping[str, Optional[str]]
    steps: Tuple[AlgorithmStep, ...]
    has_negative_cycle: bool
    shortest_path_tree: Tuple[GraphEdge, ...] = field(default_factory=tuple)


def format_distance(value: float) -> str:
    """Render a distance the way step messages and tables show it."""
    if value == INFINITY:
        return "∞"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class StepRecorder:
    """Collects snapshots of a live (distances, previous) pair."""

    def __init__(self, distances: Distances, previous: Previous) -> None:
        self._distances = distances
        self._previous = previous
        self._steps: List[AlgorithmStep] = []

    def emit(
        self,
        kind: StepKind,
        iteration: int,
        message: str,
        current_node: Optional[str] = None,
        current_edge: Optional[EdgeRef] = None,
        updated_nodes: Sequence[str] = (),
    ) -> AlgorithmStep:
        step = AlgorithmStep(
            kind=kind,
            iteration=iteration,
            distances=MappingProxyType(dict(self._distances)),
            previous=MappingProxyType(dict(self._previous)),
            message=message,
            current_node=current_node,
            current_edge=current_edge,
            updated_nodes=tuple(updated_nodes),
        )
        self._steps.append(step)
        return step

    @property
    def steps(self) -> Tuple[AlgorithmStep, ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)
