"""Erdős–Rényi network whose edges appear and vanish over time."""

from __future__ import annotations

import math
import random
from typing import Optional

from .events import NetworkEvent, NetworkEventKind
from .networks import TemporalNetwork


class TemporalErdosReyni(TemporalNetwork):
    """Undirected network in which each edge flips independently.

    Each edge is a two-state Markov process that appears with rate
    ``alpha = p / tau`` and vanishes with rate ``beta = (1 - p) / tau``,
    where ``p = avg_degree / (size - 1)`` is the steady-state probability
    that an edge is present. Each change is reported twice, once for each
    direction of the edge.
    """

    def __init__(
        self, size: int, avg_degree: float, timescale: float, rng: random.Random
    ) -> None:
        if size < 2:
            raise ValueError("network needs at least two nodes")
        self.edge_probability = avg_degree / (size - 1)
        if not 0.0 <= self.edge_probability <= 1.0:
            raise ValueError("average degree must lie between 0 and size - 1")
        self.alpha = self.edge_probability / timescale
        self.beta = (1.0 - self.edge_probability) / timescale
        self.current_time = 0.0
        self.next_time = math.nan
        self._reverse_event: Optional[NetworkEvent] = None

        self._adjacency: list[list[int]] = [[] for _ in range(size)]
        for i in range(size):
            for j in range(i + 1, size):
                if rng.random() < self.edge_probability:
                    self._adjacency[i].append(j)
                    self._adjacency[j].append(i)
        self.edges_present = sum(len(al) for al in self._adjacency) // 2
        self.edges_absent = size * (size - 1) // 2 - self.edges_present

    def is_undirected(self) -> bool:
        return True

    def nodes(self) -> int:
        return len(self._adjacency)

    def neighbour(self, node: int, neighbour_index: int) -> int:
        al = self._adjacency[node]
        if 0 <= neighbour_index < len(al):
            return al[neighbour_index]
        return -1

    def outdegree(self, node: int) -> int:
        return len(self._adjacency[node])

    def next(self, rng: random.Random, max_time: float = math.inf) -> float:
        if not math.isnan(self.next_time):
            return self.next_time
        rate = self.edges_absent * self.alpha + self.edges_present * self.beta
        if rate <= 0.0:
            self.next_time = math.inf
        else:
            self.next_time = self.current_time + rng.expovariate(rate)
        return self.next_time

    def step(
        self, rng: random.Random, max_time: float = math.nan
    ) -> Optional[NetworkEvent]:
        if math.isnan(self.next_time):
            self.next(rng)
        if math.isinf(self.next_time) or max_time < self.next_time:
            return None

        if self._reverse_event is not None:
            reverse = self._reverse_event
            self._reverse_event = None
            self.next_time = math.nan
            return reverse

        # next_time is cleared only once the reverse event has been reported.
        self.current_time = self.next_time
        appear_rate = self.alpha * self.edges_absent
        p = appear_rate / (appear_rate + self.beta * self.edges_present)
        if rng.random() < p:
            kind = NetworkEventKind.NEIGHBOUR_ADDED
            src, dst = self._draw_absent_edge(rng)
            self.add_edge(src, dst)
        else:
            kind = NetworkEventKind.NEIGHBOUR_REMOVED
            degrees = [len(al) for al in self._adjacency]
            src = rng.choices(range(len(self._adjacency)), weights=degrees)[0]
            index = rng.randrange(len(self._adjacency[src]))
            dst = self._adjacency[src][index]
            self.remove_edge(src, index)

        self._reverse_event = NetworkEvent(kind, dst, src, self.next_time)
        return NetworkEvent(kind, src, dst, self.next_time)

    def _draw_absent_edge(self, rng: random.Random) -> tuple[int, int]:
        # Rejection sampling; efficient as long as most edges are absent.
        n = len(self._adjacency)
        while True:
            src = rng.randrange(n)
            dst = rng.randrange(n)
            while dst == src:
                dst = rng.randrange(n)
            if dst not in self._adjacency[src]:
                return src, dst

    def add_edge(self, node: int, neighbour: int) -> None:
        """Add the undirected edge between ``node`` and ``neighbour``."""
        self._adjacency[node].append(neighbour)
        self._adjacency[neighbour].append(node)
        self.edges_absent -= 1
        self.edges_present += 1

    def remove_edge(self, node: int, neighbour_index: int) -> None:
        """Remove the edge to the neighbour at ``neighbour_index`` of ``node``."""
        al_node = self._adjacency[node]
        neighbour = al_node[neighbour_index]
        al_node[neighbour_index] = al_node[-1]
        al_node.pop()

        al_neighbour = self._adjacency[neighbour]
        i = al_neighbour.index(node)
        al_neighbour[i] = al_neighbour[-1]
        al_neighbour.pop()

        self.edges_absent += 1
        self.edges_present -= 1