"""Base classes for temporal networks and networks with a mutable edge set."""

from __future__ import annotations

import abc
import math
import random
from typing import Optional

from .events import EpidemicEvent, NetworkEvent
from .indexedset import IndexedSet


class TemporalNetwork(abc.ABC):
    """A network whose edges change over time.

    ``neighbour`` returns -1 once ``neighbour_index`` runs past the last
    neighbour, so callers can enumerate neighbours by increasing the index.
    """

    def is_undirected(self) -> bool:
        """Whether every edge is present in both directions."""
        return False

    @abc.abstractmethod
    def nodes(self) -> int:
        """Number of nodes."""

    @abc.abstractmethod
    def neighbour(self, node: int, neighbour_index: int) -> int:
        """The neighbour at ``neighbour_index`` of ``node``, or -1 if none."""

    @abc.abstractmethod
    def outdegree(self, node: int) -> int:
        """Number of outgoing edges of ``node``."""

    @abc.abstractmethod
    def next(self, rng: random.Random, max_time: float = math.inf) -> float:
        """Time of the next network event, or infinity if there is none."""

    @abc.abstractmethod
    def step(
        self, rng: random.Random, max_time: float = math.nan
    ) -> Optional[NetworkEvent]:
        """Apply and return the next event unless it lies after ``max_time``.

        A NaN ``max_time`` means no limit.
        """

    def notify_epidemic_event(self, event: EpidemicEvent, rng: random.Random) -> None:
        """Inform the network of an epidemic event; ignored by default."""


class MutableNetwork:
    """Directed network stored as adjacency sets that can be edited."""

    def __init__(self, nodes: int = 0) -> None:
        self._adjacency: list[IndexedSet[int]] = []
        self.resize(nodes)

    def _neighbours(self, node: int) -> IndexedSet[int]:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"node {node} out of range")
        return self._adjacency[node]

    def resize(self, nodes: int) -> None:
        """Grow or shrink the network to ``nodes`` nodes."""
        if nodes < 0:
            raise ValueError("number of nodes must be non-negative")
        del self._adjacency[nodes:]
        self._adjacency.extend(IndexedSet() for _ in range(nodes - len(self._adjacency)))

    def has_edge(self, src: int, dst: int) -> bool:
        return dst in self._neighbours(src)

    def add_edge(self, src: int, dst: int) -> bool:
        """Add the edge; return True if it did not exist before."""
        return self._neighbours(src).add(dst)

    def remove_edge(self, src: int, dst: int) -> bool:
        """Remove the edge; return True if it existed."""
        return self._neighbours(src).discard(dst)

    def nodes(self) -> int:
        return len(self._adjacency)

    def neighbour(self, node: int, neighbour_index: int) -> int:
        neighbours = self._neighbours(node)
        if 0 <= neighbour_index < len(neighbours):
            return neighbours[neighbour_index]
        return -1

    def outdegree(self, node: int) -> int:
        return len(self._neighbours(node))