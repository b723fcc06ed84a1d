"""Activity-driven temporal network."""

from __future__ import annotations

import enum
import heapq
import itertools
import math
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from .events import NetworkEvent, NetworkEventKind
from .networks import MutableNetwork, TemporalNetwork


class ActivityEvent(enum.Enum):
    """Whether a queued entry changes a node's activity or an edge."""

    NONE = 0
    ACTIVATE = 1
    DEACTIVATE = 2


@dataclass(frozen=True)
class _Entry:
    kind: NetworkEventKind
    source_node: int
    target_node: int
    time: float
    activity_event: ActivityEvent


def _exponential(rng: random.Random, rate: float) -> float:
    return rng.expovariate(rate) if rate > 0.0 else math.inf


class ActivityDrivenNetwork(MutableNetwork, TemporalNetwork):
    """Nodes switch between active and inactive states.

    An inactive node becomes active with rate ``eta * a_i``. On activation
    it connects to ``m`` distinct random other nodes; it becomes inactive
    again with rate ``recovery_rate``, dropping all its edges.
    """

    def __init__(
        self,
        activity_rates: Sequence[float],
        eta: float,
        m: float,
        recovery_rate: float,
        rng: random.Random,
    ) -> None:
        size = len(activity_rates)
        super().__init__(size)
        if size and math.ceil(m) > size - 1:
            raise ValueError("m must be smaller than the number of nodes")
        self.activity_rates = list(activity_rates)
        self.eta = eta
        self.m = m
        self.recovery_rate = recovery_rate
        self._rng = rng
        self.active_nodes = [False] * size
        self._heap: list[tuple[float, int, _Entry]] = []
        self._counter = itertools.count()

        for node, activity in enumerate(self.activity_rates):
            self._push(_Entry(
                NetworkEventKind.NEIGHBOUR_ADDED, node, -1,
                _exponential(rng, eta * activity), ActivityEvent.ACTIVATE,
            ))

    def _push(self, entry: _Entry) -> None:
        heapq.heappush(self._heap, (entry.time, next(self._counter), entry))

    def _top(self) -> _Entry:
        return self._heap[0][2]

    def _pop(self) -> _Entry:
        return heapq.heappop(self._heap)[2]

    def next(self, rng: random.Random, max_time: float = math.inf) -> float:
        if not self._heap:
            return math.inf
        top = self._top()
        while top.activity_event is not ActivityEvent.NONE:
            if math.isinf(top.time):
                return math.inf
            self._pop()
            if top.activity_event is ActivityEvent.ACTIVATE:
                self.activate_node(top.source_node, top.time)
            else:
                self.deactivate_node(top.source_node, top.time)
            top = self._top()
        return top.time

    def activate_node(self, node: int, time: float) -> None:
        """Activate ``node`` at ``time`` and queue its new edges."""
        if self.active_nodes[node]:
            raise RuntimeError(f"node {node} is already active")
        self.active_nodes[node] = True

        size = len(self.activity_rates)
        sampled = {node}
        for _ in range(math.ceil(self.m)):
            neigh = self._rng.randrange(size)
            while neigh in sampled:
                neigh = self._rng.randrange(size)
            sampled.add(neigh)
            if self.has_edge(node, neigh):
                continue
            for src, dst in ((node, neigh), (neigh, node)):
                self._push(_Entry(
                    NetworkEventKind.NEIGHBOUR_ADDED, src, dst, time, ActivityEvent.NONE))

        self._push(_Entry(
            NetworkEventKind.NEIGHBOUR_REMOVED, node, -1,
            time + _exponential(self._rng, self.recovery_rate), ActivityEvent.DEACTIVATE,
        ))

    def deactivate_node(self, node: int, time: float) -> None:
        """Deactivate ``node`` at ``time`` and queue removal of its edges."""
        if not self.active_nodes[node]:
            raise RuntimeError(f"node {node} is not active")
        self.active_nodes[node] = False

        for ki in range(self.outdegree(node)):
            nei = self.neighbour(node, ki)
            if nei == node:
                raise RuntimeError("self-loops are not allowed")
            if not self.has_edge(nei, node):
                raise RuntimeError(f"edge {nei} -> {node} is missing")
            for src, dst in ((node, nei), (nei, node)):
                self._push(_Entry(
                    NetworkEventKind.NEIGHBOUR_REMOVED, src, dst, time, ActivityEvent.NONE))

        self._push(_Entry(
            NetworkEventKind.NEIGHBOUR_ADDED, node, -1,
            time + _exponential(self._rng, self.eta * self.activity_rates[node]),
            ActivityEvent.ACTIVATE,
        ))

    def step(
        self, rng: random.Random, max_time: float = math.nan
    ) -> Optional[NetworkEvent]:
        next_time = self.next(rng)
        if math.isinf(next_time) or next_time > max_time:
            return None
        if not self._heap:
            return None
        entry = self._pop()
        if entry.kind is NetworkEventKind.NEIGHBOUR_ADDED:
            self.add_edge(entry.source_node, entry.target_node)
        elif entry.kind is NetworkEventKind.NEIGHBOUR_REMOVED:
            if not self.remove_edge(entry.source_node, entry.target_node):
                raise RuntimeError("removing edge failed")
        else:
            raise RuntimeError(f"invalid event kind: {entry.kind!r}")
        return NetworkEvent(entry.kind, entry.source_node, entry.target_node, entry.time)

    def advance_time(
        self, rng: random.Random, max_time: float = math.nan
    ) -> tuple[list[float], list[float], list[float]]:
        """Run until ``max_time``, sampling degree moments every N events.

        Returns the sample times and the first and second moments of the
        degree distribution at those times.
        """
        if not self._heap:
            raise ValueError("network has no pending events")
        size = len(self.activity_rates)
        times: list[float] = []
        first_moments: list[float] = []
        second_moments: list[float] = []
        t = self._top().time
        exhausted = False
        while t < max_time and not exhausted:
            for _ in range(size):
                event = self.step(rng)
                if event is None:
                    exhausted = True
                    break
                t = event.time
            degrees = [self.outdegree(node) for node in range(size)]
            times.append(t)
            first_moments.append(sum(degrees) / size)
            second_moments.append(sum(k * k for k in degrees) / size)
        return times, first_moments, second_moments