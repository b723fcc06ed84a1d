import random

import pytest

from tempnet.indexedset import IndexedSet


def test_add_reports_novelty():
    s = IndexedSet()
    assert s.add(3) is True
    assert s.add(3) is False
    assert len(s) == 1
    assert 3 in s


def test_discard_reports_presence():
    s = IndexedSet([1, 2, 3])
    assert s.discard(2) is True
    assert s.discard(2) is False
    assert 2 not in s
    assert sorted(s) == [1, 3]


def test_positions_cover_all_elements_after_removals():
    s = IndexedSet(range(10))
    for x in (0, 5, 9, 3):
        s.discard(x)
    by_index = {s[i] for i in range(len(s))}
    assert by_index == set(s) == {1, 2, 4, 6, 7, 8}


def test_getitem_in_insertion_order_without_removals():
    s = IndexedSet([7, 4, 9])
    assert [s[i] for i in range(len(s))] == [7, 4, 9]
    with pytest.raises(IndexError):
        s[3]


def test_choice_draws_only_members_and_all_of_them():
    s = IndexedSet([1, 2, 3, 5])
    s.discard(2)
    rng = random.Random(42)
    drawn = [s.choice(rng) for _ in range(3000)]
    assert set(drawn) == {1, 3, 5}


def test_choice_on_empty_set_raises():
    with pytest.raises(IndexError):
        IndexedSet().choice(random.Random(0))