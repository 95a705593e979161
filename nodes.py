"""
Node and edge value types for sptrace.

Coordinates on a node only matter to renderers; the engines look at ids.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GraphNode:
    """A vertex identified by a string id, unique within one graph."""

    id: str
    x: Optional[float] = None
    y: Optional[float] = None


@dataclass(frozen=True)
class GraphEdge:
    """
    Directed edge source -> destination with an integer weight.

    Weights may be zero or negative. Two edges over the same ordered pair
    are independent edges.
    """

    source: str
    destination: str
    weight: int
