"""Static network whose nodes are removed over time (SIR-X dynamics)."""

from __future__ import annotations

import dataclasses
import enum
import itertools
import math
import random
from collections import deque
from typing import Iterator, Optional, Protocol

from .events import EpidemicEvent, EpidemicEventKind, NetworkEvent, NetworkEventKind
from .indexedset import IndexedSet
from .networks import TemporalNetwork


class StaticNetwork(Protocol):
    """What a wrapped network has to provide."""

    def nodes(self) -> int: ...

    def neighbour(self, node: int, neighbour_index: int) -> int: ...

    def outdegree(self, node: int) -> int: ...


class NodeState(enum.Enum):
    """Epidemic and removal state of a node."""

    S = 1
    I = 2  # noqa: E741
    R = 3
    X = 4


def _neighbours(network: StaticNetwork, node: int) -> Iterator[int]:
    return itertools.takewhile(
        lambda nn: nn >= 0,
        (network.neighbour(node, i) for i in itertools.count()),
    )


class TemporalSIRXNetwork(TemporalNetwork):
    """Wraps a static network and removes nodes at random times.

    Every non-removed node is removed with rate ``kappa0``; infected
    non-removed nodes are additionally removed with rate ``kappa``. Removing
    a node reports the removal of all its outgoing edges. For undirected
    networks each edge is reported twice, first reversed, then as stored.
    For directed networks only outgoing edges are removed, so removed nodes
    may still be infected but cannot infect others.
    """

    def __init__(self, network: StaticNetwork, kappa0: float, kappa: float) -> None:
        self.network = network
        undirected = getattr(network, "is_undirected", None)
        self._undirected = bool(undirected()) if callable(undirected) else False
        self._size = network.nodes()
        self.kappa0 = kappa0
        self.kappa = kappa
        self._nonremoved: IndexedSet[int] = IndexedSet(range(self._size))
        self._infected_nonremoved: IndexedSet[int] = IndexedSet()
        self._infected: set[int] = set()
        self._queue: deque[NetworkEvent] = deque()
        self._queue_next_flipped = self._undirected
        self.current_time = 0.0
        self.next_time = math.nan

    def is_removed(self, node: int) -> bool:
        return node not in self._nonremoved

    def is_infected(self, node: int) -> bool:
        return node in self._infected

    def state(self, node: int) -> NodeState:
        if self.is_infected(node):
            return NodeState.X if self.is_removed(node) else NodeState.I
        return NodeState.R if self.is_removed(node) else NodeState.S

    def is_undirected(self) -> bool:
        return self._undirected

    def nodes(self) -> int:
        return self._size

    def neighbour(self, node: int, neighbour_index: int) -> int:
        if self.is_removed(node):
            return -1
        return self.network.neighbour(node, neighbour_index)

    def outdegree(self, node: int) -> int:
        if self.is_removed(node):
            return 0
        return self.network.outdegree(node)

    def _discard_pending(self, time: float) -> None:
        # Rates have changed, so a previously drawn future event is invalid.
        if self.next_time > time:
            self.next_time = math.nan
            self._queue.clear()
            self._queue_next_flipped = self._undirected

    def notify_epidemic_event(self, event: EpidemicEvent, rng: random.Random) -> None:
        if event.time < self.current_time:
            raise ValueError("epidemic event lies before the current time")
        if not math.isnan(self.next_time) and event.time > self.next_time:
            raise ValueError("epidemic event lies after the next network event")
        if event.kind in (EpidemicEventKind.INFECTION, EpidemicEventKind.OUTSIDE_INFECTION):
            self._infected.add(event.node)
            if self._undirected or not self.is_removed(event.node):
                self._infected_nonremoved.add(event.node)
            self._discard_pending(event.time)
        elif event.kind is EpidemicEventKind.RESET:
            self._infected.discard(event.node)
            self._infected_nonremoved.discard(event.node)
            self._discard_pending(event.time)

    def next(self, rng: random.Random, max_time: float = math.inf) -> float:
        base_time = self.current_time
        while math.isnan(self.next_time):
            r0 = len(self._nonremoved) * self.kappa0
            r = len(self._infected_nonremoved) * self.kappa
            if r0 + r == 0.0:
                self.next_time = math.inf
                return self.next_time
            self.next_time = base_time + rng.expovariate(r0 + r)

            if rng.random() < r0 / (r0 + r):
                node = self._nonremoved.choice(rng)
            else:
                node = self._infected_nonremoved.choice(rng)

            self._queue.extend(
                NetworkEvent(NetworkEventKind.NEIGHBOUR_REMOVED, node, nn, self.next_time)
                for nn in _neighbours(self.network, node)
            )

            if not self._queue:
                # Nodes without neighbours are removed silently.
                self._nonremoved.discard(node)
                self._infected_nonremoved.discard(node)
                base_time = self.next_time
                self.next_time = math.nan
        return self.next_time

    def step(
        self, rng: random.Random, max_time: float = math.nan
    ) -> Optional[NetworkEvent]:
        time = self.next(rng)
        if math.isinf(time) or (not math.isnan(max_time) and time > max_time):
            return None

        event = self._queue[0]
        node = event.source_node
        self.current_time = time
        if self._queue_next_flipped:
            event = dataclasses.replace(
                event, source_node=event.target_node, target_node=event.source_node
            )
            self._queue_next_flipped = False
        else:
            self._queue.popleft()
            self._queue_next_flipped = self._undirected
            if not self._queue:
                self.next_time = math.nan

        if not self._queue_next_flipped:
            self._nonremoved.discard(node)
            self._infected_nonremoved.discard(node)
        return event