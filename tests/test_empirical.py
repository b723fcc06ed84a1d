import math
import random

import pytest

from tempnet.empirical import EdgeDurationKind, EmpiricalTemporalNetwork
from tempnet.events import NetworkEventKind


def _write(tmp_path, text):
    path = tmp_path / "contacts.txt"
    path.write_text(text)
    return path


def _drain(nw, rng):
    events = []
    while (ev := nw.step(rng)) is not None:
        events.append(ev)
    return events


def test_finite_duration_events_sorted_and_applied(tmp_path):
    path = _write(tmp_path, "0 1 10\n1 2 4\n")
    nw = EmpiricalTemporalNetwork(path, EdgeDurationKind.FINITE_DURATION, 2.0)
    rng = random.Random(0)
    assert nw.nodes() == 3
    assert nw.next(rng) == 4 - 1.0
    events = _drain(nw, rng)
    times = [ev.time for ev in events]
    assert times == sorted(times)
    assert [ev.kind for ev in events] == [
        NetworkEventKind.NEIGHBOUR_ADDED,
        NetworkEventKind.NEIGHBOUR_REMOVED,
        NetworkEventKind.NEIGHBOUR_ADDED,
        NetworkEventKind.NEIGHBOUR_REMOVED,
    ]
    assert (events[0].source_node, events[0].target_node) == (1, 2)
    assert not nw.has_edge(0, 1)
    assert nw.next(rng) == math.inf


def test_redundant_events_are_skipped(tmp_path):
    path = _write(tmp_path, "0 1 1.0\n0 1 1.0\n")
    nw = EmpiricalTemporalNetwork(path, EdgeDurationKind.FINITE_DURATION, 1.0)
    rng = random.Random(0)
    events = _drain(nw, rng)
    assert len(events) == 2
    assert nw.outdegree(0) == 0


def test_step_respects_max_time(tmp_path):
    path = _write(tmp_path, "0 1 10\n")
    nw = EmpiricalTemporalNetwork(path, EdgeDurationKind.FINITE_DURATION, 2.0)
    rng = random.Random(0)
    first = nw.step(rng, 10.0)
    assert first.kind is NetworkEventKind.NEIGHBOUR_ADDED
    assert nw.has_edge(0, 1)
    assert nw.step(rng, 10.0) is None
    assert nw.has_edge(0, 1)
    assert nw.step(rng).kind is NetworkEventKind.NEIGHBOUR_REMOVED


def test_infinitesimal_contacts(tmp_path):
    path = _write(tmp_path, "2 0 3.5\n")
    nw = EmpiricalTemporalNetwork(path, EdgeDurationKind.INFINITESIMAL_DURATION, 0.25)
    rng = random.Random(0)
    assert nw.next(rng) == 3.5
    ev = nw.step(rng)
    assert ev.kind is NetworkEventKind.INSTANTANEOUS_CONTACT
    assert ev.weight == 0.25
    assert ev.time == 3.5
    assert nw.outdegree(2) == 0


def test_compute_number_of_edges(tmp_path):
    path = _write(tmp_path, "0 1 10\n1 2 10\n")
    nw = EmpiricalTemporalNetwork(path, EdgeDurationKind.FINITE_DURATION, 2.0)
    counts = [c for _, c in nw.compute_number_of_edges(random.Random(0))]
    assert counts == [1, 2, 1, 0]


def test_empty_file_has_one_node(tmp_path):
    path = _write(tmp_path, "")
    nw = EmpiricalTemporalNetwork(path, EdgeDurationKind.FINITE_DURATION, 1.0)
    assert nw.nodes() == 1
    assert nw.step(random.Random(0)) is None


@pytest.mark.parametrize("line", ["0 x 1\n", "0 1\n", "-1 2 3\n", "\n"])
def test_unparseable_lines_raise(tmp_path, line):
    path = _write(tmp_path, line)
    with pytest.raises(ValueError):
        EmpiricalTemporalNetwork(path, EdgeDurationKind.FINITE_DURATION, 1.0)


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        EmpiricalTemporalNetwork(tmp_path / "absent.txt", EdgeDurationKind.FINITE_DURATION, 1.0)