import dataclasses

import pytest

from tempnet.events import (
    EpidemicEvent,
    EpidemicEventKind,
    NetworkEvent,
    NetworkEventKind,
)


def test_network_event_default_weight_and_equality():
    a = NetworkEvent(NetworkEventKind.NEIGHBOUR_ADDED, 1, 2, time=3.0)
    b = NetworkEvent(NetworkEventKind.NEIGHBOUR_ADDED, 1, 2, time=3.0, weight=1.0)
    assert a == b
    assert a.weight == 1.0


def test_network_event_replace_swaps_endpoints():
    ev = NetworkEvent(NetworkEventKind.NEIGHBOUR_REMOVED, 4, 7, time=0.5)
    flipped = dataclasses.replace(ev, source_node=ev.target_node, target_node=ev.source_node)
    assert (flipped.source_node, flipped.target_node) == (7, 4)
    assert flipped.kind is NetworkEventKind.NEIGHBOUR_REMOVED
    assert flipped.time == ev.time


def test_network_event_is_immutable():
    ev = NetworkEvent(NetworkEventKind.INSTANTANEOUS_CONTACT, 0, 1, time=1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ev.time = 2.0  # type: ignore[misc]
    assert ev.time == 1.0
    assert ev.kind is NetworkEventKind.INSTANTANEOUS_CONTACT


def test_epidemic_event_fields():
    ev = EpidemicEvent(EpidemicEventKind.INFECTION, node=5, time=2.5)
    assert ev.node == 5
    assert ev.source_node == -1
    assert ev.kind is not EpidemicEventKind.RESET


def test_events_with_distinct_kinds_differ():
    network_events = [NetworkEvent(kind, 0, 1, time=0.0) for kind in NetworkEventKind]
    assert len(set(network_events)) == 3
    assert [e.kind for e in network_events] == list(NetworkEventKind)

    epidemic_events = [EpidemicEvent(kind, node=0, time=0.0) for kind in EpidemicEventKind]
    assert [e.kind for e in epidemic_events] == list(EpidemicEventKind)
    assert len({e.kind for e in epidemic_events}) == 3