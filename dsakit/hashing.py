"""Hash map exercises and a map with separate chaining."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

V = TypeVar("V")

INITIAL_BUCKETS = 5
MAX_LOAD_FACTOR = 0.7
_HASH_BASE = 37


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """The values with repeats dropped, in order of first appearance."""
    return list(dict.fromkeys(values))


def highest_frequency(values: Iterable[int]) -> int:
    """The most frequent value; on ties, the one that appears first."""
    counts = Counter(values)
    if not counts:
        raise ValueError("no values given")
    return max(counts, key=counts.__getitem__)


def unique_chars(text: str) -> str:
    """The characters of ``text`` with repeats dropped, in order of first appearance."""
    return "".join(dict.fromkeys(text))


def count_zero_sum_pairs(values: Iterable[int]) -> int:
    """Number of index pairs whose values add up to zero."""
    seen: Counter[int] = Counter()
    pairs = 0
    for value in values:
        pairs += seen[-value]
        seen[value] += 1
    return pairs


def intersection(values1: Iterable[int], values2: Iterable[int]) -> list[int]:
    """Values of ``values2``, in its order, matched one for one against ``values1``."""
    available = Counter(values1)
    common = []
    for value in values2:
        if available[value] > 0:
            common.append(value)
            available[value] -= 1
    return common


def longest_zero_sum_length(values: Iterable[int]) -> int:
    """Length of the longest run of consecutive values summing to zero; 0 if none."""
    first_seen = {0: -1}
    total = 0
    longest = 0
    for index, value in enumerate(values):
        total += value
        if total in first_seen:
            longest = max(longest, index - first_seen[total])
        else:
            first_seen[total] = index
    return longest


def pairs_with_difference(values: Iterable[int], k: int) -> int:
    """Number of index pairs whose values differ by exactly ``|k|``."""
    counts = Counter(values)
    k = abs(k)
    if k == 0:
        return sum(c * (c - 1) // 2 for c in counts.values())
    return sum(c * counts.get(value + k, 0) for value, c in counts.items())


def longest_consecutive_sequence(values: Iterable[int]) -> tuple[int, int]:
    """First and last number of the longest run of consecutive integers present.

    On ties the run whose first number was last seen earliest in ``values`` wins.
    """
    last_index = {value: index for index, value in enumerate(values)}
    if not last_index:
        raise ValueError("no values given")
    runs = []
    for start in last_index:
        if start - 1 in last_index:
            continue
        end = start
        while end + 1 in last_index:
            end += 1
        runs.append((start, end))
    return min(runs, key=lambda run: (run[0] - run[1], last_index[run[0]]))


@dataclass
class _Entry(Generic[V]):
    key: str
    value: V


class ChainedMap(Generic[V]):
    """A string-keyed map of buckets holding chains, doubling past a load of 0.7."""

    def __init__(self) -> None:
        self._buckets: list[list[_Entry[V]]] = [[] for _ in range(INITIAL_BUCKETS)]
        self._count = 0

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        return self._count / len(self._buckets)

    def _bucket_index(self, key: str) -> int:
        buckets = len(self._buckets)
        code = 0
        coefficient = 1
        for ch in reversed(key):
            code = (code + ord(ch) * coefficient) % buckets
            coefficient = (coefficient * _HASH_BASE) % buckets
        return code % buckets

    def _find(self, key: str) -> Optional[_Entry[V]]:
        for entry in self._buckets[self._bucket_index(key)]:
            if entry.key == key:
                return entry
        return None

    def insert(self, key: str, value: V) -> None:
        """Set ``key`` to ``value``, replacing any value it had."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._buckets[self._bucket_index(key)].insert(0, _Entry(key, value))
        self._count += 1
        if self.load_factor > MAX_LOAD_FACTOR:
            self._rehash()

    def _rehash(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old))]
        self._count = 0
        for chain in old:
            for entry in chain:
                self.insert(entry.key, entry.value)

    def get(self, key: str) -> V:
        """The value stored under ``key``; raises KeyError if absent."""
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def remove(self, key: str) -> V:
        """Remove ``key`` and return its value; raises KeyError if absent."""
        chain = self._buckets[self._bucket_index(key)]
        for position, entry in enumerate(chain):
            if entry.key == key:
                del chain[position]
                self._count -= 1
                return entry.value
        raise KeyError(key)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __getitem__(self, key: str) -> V:
        return self.get(key)

    def __setitem__(self, key: str, value: V) -> None:
        self.insert(key, value)

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def __iter__(self) -> Iterator[str]:
        return (entry.key for chain in self._buckets for entry in chain)