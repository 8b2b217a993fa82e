"""A growable array of integers that doubles its capacity when full."""

from __future__ import annotations

from typing import Iterable, Iterator

INITIAL_CAPACITY = 5


class DynamicArray:
    """An array that starts with room for five elements and doubles as it fills."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        self._capacity = INITIAL_CAPACITY
        for value in values:
            self.add(value)

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, element: int) -> None:
        """Append ``element``, doubling the capacity when full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(element)

    def get(self, i: int) -> int:
        """The element at index ``i``."""
        if not 0 <= i < len(self._items):
            raise IndexError(f"index {i} out of range")
        return self._items[i]

    def set_at(self, i: int, element: int) -> None:
        """Replace the element at ``i``, or append when ``i`` is the length.

        Indexes past the end are ignored.
        """
        if i < 0:
            raise IndexError(f"index {i} out of range")
        if i < len(self._items):
            self._items[i] = element
        elif i == len(self._items):
            self.add(element)

    def copy(self) -> DynamicArray:
        """An independent copy with the same elements and capacity."""
        clone = DynamicArray()
        clone._items = list(self._items)
        clone._capacity = self._capacity
        return clone

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        return " ".join(map(str, self._items))

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"