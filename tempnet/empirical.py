"""Temporal network replayed from a recorded list of contacts."""

from __future__ import annotations

import enum
import math
import os
import random
from collections import deque
from typing import Optional, Union

from .events import NetworkEvent, NetworkEventKind
from .networks import MutableNetwork, TemporalNetwork


class EdgeDurationKind(enum.Enum):
    """How a recorded contact is turned into network events."""

    FINITE_DURATION = 1
    INFINITESIMAL_DURATION = 2


class EmpiricalTemporalNetwork(MutableNetwork, TemporalNetwork):
    """Network driven by a whitespace-separated file of ``src dst time`` lines.

    With finite duration each contact is an edge present from ``time - dt/2``
    to ``time + dt/2``; with infinitesimal duration it is an instantaneous
    contact of weight ``dt``.
    """

    def __init__(
        self,
        path: Union[str, os.PathLike],
        contact_type: EdgeDurationKind,
        dt: float,
    ) -> None:
        super().__init__()
        events: list[NetworkEvent] = []
        max_node = 0
        with open(path) as fh:
            for raw in fh:
                line = raw.rstrip("\n")
                src, dst, time = self._parse_line(line)
                max_node = max(max_node, src, dst)
                if contact_type is EdgeDurationKind.FINITE_DURATION:
                    events.append(NetworkEvent(
                        NetworkEventKind.NEIGHBOUR_ADDED, src, dst, time - dt / 2))
                    events.append(NetworkEvent(
                        NetworkEventKind.NEIGHBOUR_REMOVED, src, dst, time + dt / 2))
                elif contact_type is EdgeDurationKind.INFINITESIMAL_DURATION:
                    events.append(NetworkEvent(
                        NetworkEventKind.INSTANTANEOUS_CONTACT, src, dst, time, weight=dt))
                else:
                    raise ValueError(f"invalid contact type: {contact_type!r}")
        events.sort(key=lambda ev: ev.time)
        self._event_queue: deque[NetworkEvent] = deque(events)
        self.resize(max_node + 1)

    @staticmethod
    def _parse_line(line: str) -> tuple[int, int, float]:
        fields = line.split()
        try:
            src, dst, time = int(fields[0]), int(fields[1]), float(fields[2])
        except (IndexError, ValueError):
            raise ValueError(f"unable to parse line: {line}") from None
        if src < 0 or dst < 0:
            raise ValueError(f"unable to parse line: {line}")
        return src, dst, time

    def _is_effective(self, event: NetworkEvent) -> bool:
        if event.kind is NetworkEventKind.NEIGHBOUR_ADDED:
            return not self.has_edge(event.source_node, event.target_node)
        if event.kind is NetworkEventKind.NEIGHBOUR_REMOVED:
            return self.has_edge(event.source_node, event.target_node)
        return True

    def next(self, rng: random.Random, max_time: float = math.inf) -> float:
        for event in self._event_queue:
            if self._is_effective(event):
                return event.time
        return math.inf

    def step(
        self, rng: random.Random, max_time: float = math.nan
    ) -> Optional[NetworkEvent]:
        # Keep the skipping rules here in sync with _is_effective().
        while self._event_queue:
            event = self._event_queue[0]
            if not math.isnan(max_time) and event.time > max_time:
                break
            self._event_queue.popleft()
            if event.kind is NetworkEventKind.NEIGHBOUR_ADDED:
                if self.add_edge(event.source_node, event.target_node):
                    return event
            elif event.kind is NetworkEventKind.NEIGHBOUR_REMOVED:
                if self.remove_edge(event.source_node, event.target_node):
                    return event
            else:
                return event
        return None

    def compute_number_of_edges(self, rng: random.Random) -> list[tuple[float, int]]:
        """Consume all events, returning ``(time, edge count)`` after each.

        Instantaneous contacts are counted cumulatively.
        """
        trajectory: list[tuple[float, int]] = []
        edges = 0
        while (event := self.step(rng)) is not None:
            if event.kind is NetworkEventKind.NEIGHBOUR_REMOVED:
                edges -= 1
            else:
                edges += 1
            trajectory.append((event.time, edges))
        return trajectory