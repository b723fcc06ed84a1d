"""Event records exchanged between temporal networks and epidemic processes."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class NetworkEventKind(enum.Enum):
    """Kinds of changes a temporal network can report."""

    NEIGHBOUR_ADDED = enum.auto()
    NEIGHBOUR_REMOVED = enum.auto()
    INSTANTANEOUS_CONTACT = enum.auto()


class EpidemicEventKind(enum.Enum):
    """Kinds of epidemic events a temporal network can be notified about."""

    INFECTION = enum.auto()
    OUTSIDE_INFECTION = enum.auto()
    RESET = enum.auto()


@dataclass(frozen=True)
class NetworkEvent:
    """A change to the edge set of a temporal network at a given time."""

    kind: NetworkEventKind
    source_node: int
    target_node: int
    time: float
    weight: float = 1.0


@dataclass(frozen=True)
class EpidemicEvent:
    """An infection or reset of a node at a given time."""

    kind: EpidemicEventKind
    node: int
    time: float
    source_node: int = -1