"""
Directed, weighted graph abstraction for sptrace.

Nodes and edges are kept in caller order; that order drives tie-breaks
and tree reconstruction in the engines.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from nodes import GraphEdge, GraphNode


class Graph(ABC):
    """Directed, weighted graph over GraphNode objects."""

    @abstractmethod
    def nodes(self) -> Sequence[GraphNode]:
        """Return all nodes in caller order."""
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Sequence[GraphEdge]:
        """Return all edges in caller order."""
        raise NotImplementedError
