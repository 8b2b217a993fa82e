"""Assorted algorithms: disjoint sets, Fibonacci, SCCs, inversions, KMP, hashing."""

from __future__ import annotations

from typing import Iterable, Sequence

_Matrix = list[list[int]]

_HASH_P1 = 31
_HASH_P2 = 29
_HASH_MOD = 10**9 + 9
_ALPHABET_SIZE = 26


class DisjointSet:
    """Union-find over the elements ``0`` to ``n`` with union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"element {node} out of range")

    def find(self, node: int) -> int:
        """The representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; False if they were already one."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_u] > self._rank[root_v]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1
        return True


def _mat_mul(a: _Matrix, b: _Matrix) -> _Matrix:
    return [
        [sum(a[i][k] * b[k][j] for k in range(len(b))) for j in range(len(b[0]))]
        for i in range(len(a))
    ]


def _mat_pow(a: _Matrix, n: int) -> _Matrix:
    if n == 0:
        return [[int(i == j) for j in range(len(a))] for i in range(len(a))]
    half = _mat_pow(a, n // 2)
    result = _mat_mul(half, half)
    return _mat_mul(result, a) if n % 2 else result


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, by fast matrix exponentiation."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _mat_pow([[1, 1], [1, 0]], n)[0][1]


def count_scc(n: int, adj: Sequence[Iterable[int]]) -> int:
    """Number of strongly connected components of a directed graph (Kosaraju)."""
    neighbours = [list(adj[i]) for i in range(n)]
    visited = [False] * n
    order: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(neighbours[start]))]
        while stack:
            node, pending = stack[-1]
            for nxt in pending:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(neighbours[nxt])))
                    break
            else:
                stack.pop()
                order.append(node)

    reverse: list[list[int]] = [[] for _ in range(n)]
    for node, targets in enumerate(neighbours):
        for target in targets:
            reverse[target].append(node)

    visited = [False] * n
    components = 0
    for start in reversed(order):
        if visited[start]:
            continue
        components += 1
        visited[start] = True
        stack_nodes = [start]
        while stack_nodes:
            node = stack_nodes.pop()
            for nxt in reverse[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack_nodes.append(nxt)
    return components


def _sort_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_count(values[:mid])
    right, right_count = _sort_count(values[mid:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(nums: Iterable[int]) -> int:
    """Number of index pairs ``i < j`` with ``nums[i] > nums[j]``."""
    return _sort_count(list(nums))[1]


def kmp_prefix(pattern: str) -> list[int]:
    """For each position, the index of the last character of the longest proper
    prefix that also ends there, or -1 when there is none."""
    table = [-1] * len(pattern)
    i, j = 1, 0
    while i < len(pattern):
        if pattern[i] == pattern[j]:
            table[i] = j
            i += 1
            j += 1
        elif j > 0:
            j = table[j - 1] + 1
        else:
            i += 1
    return table


def kmp_contains(text: str, pattern: str) -> bool:
    """Whether ``pattern`` occurs in ``text``, by Knuth-Morris-Pratt."""
    table = kmp_prefix(pattern)
    i = j = 0
    while j != len(pattern) and i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
        elif j > 0:
            j = table[j - 1] + 1
        else:
            i += 1
    return j == len(pattern)


def count_good_substrings(s: str, good: str, max_bad: int) -> int:
    """Number of distinct substrings of ``s`` with at most ``max_bad`` bad letters.

    ``good`` has one '0' or '1' per letter a to z; '0' marks the letter bad.
    Substrings are told apart by a pair of polynomial hashes.
    """
    if len(good) != _ALPHABET_SIZE or set(good) - {"0", "1"}:
        raise ValueError("good must be 26 characters of '0' and '1'")
    if any(not "a" <= ch <= "z" for ch in s):
        raise ValueError("s must hold lowercase letters a to z only")
    seen: set[tuple[int, int]] = set()
    for start in range(len(s)):
        hash1 = hash2 = 0
        power1 = power2 = 1
        bad = 0
        for ch in s[start:]:
            code = ord(ch) - ord("a")
            hash1 = (hash1 + (code + 1) * power1) % _HASH_MOD
            hash2 = (hash2 + (code + 1) * power2) % _HASH_MOD
            power1 = power1 * _HASH_P1 % _HASH_MOD
            power2 = power2 * _HASH_P2 % _HASH_MOD
            if good[code] == "0":
                bad += 1
            if bad > max_bad:
                break
            seen.add((hash1, hash2))
    return len(seen)