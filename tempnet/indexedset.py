"""A set supporting constant-time membership, removal and uniform sampling."""

from __future__ import annotations

import random
from typing import Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class IndexedSet(Generic[T]):
    """Set whose elements can also be accessed by position.

    Removal moves the last element into the freed slot, so positions are
    stable only until the next removal.
    """

    __slots__ = ("_items", "_positions")

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        self._positions: dict[T, int] = {}
        for item in items:
            self.add(item)

    def add(self, item: T) -> bool:
        """Insert ``item``; return True if it was not present before."""
        if item in self._positions:
            return False
        self._positions[item] = len(self._items)
        self._items.append(item)
        return True

    def discard(self, item: T) -> bool:
        """Remove ``item``; return True if it was present."""
        pos = self._positions.pop(item, None)
        if pos is None:
            return False
        last = self._items.pop()
        if pos < len(self._items):
            self._items[pos] = last
            self._positions[last] = pos
        return True

    def choice(self, rng: random.Random) -> T:
        """Return an element drawn uniformly at random."""
        if not self._items:
            raise IndexError("cannot choose from an empty set")
        return self._items[rng.randrange(len(self._items))]

    def __contains__(self, item: object) -> bool:
        return item in self._positions

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"