"""Graph and grid exercises: paths, components, triangles and flood fills."""

from __future__ import annotations

from collections import deque
from itertools import combinations
from typing import Iterable, Optional, Sequence

Matrix = Sequence[Sequence[int]]

DEFAULT_WORD = "CODINGNINJA"

_KING_MOVES = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)
_ROOK_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def adjacency_matrix(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """An ``n`` by ``n`` matrix with 1 for each undirected edge and 0 elsewhere."""
    if n < 0:
        raise ValueError("the number of vertices must not be negative")
    matrix = [[0] * n for _ in range(n)]
    for first, second in edges:
        for vertex in (first, second):
            if not 0 <= vertex < n:
                raise IndexError(f"vertex {vertex} out of range")
        matrix[first][second] = 1
        matrix[second][first] = 1
    return matrix


def _check_vertex(matrix: Matrix, vertex: int) -> None:
    if not 0 <= vertex < len(matrix):
        raise IndexError(f"vertex {vertex} out of range")


def _neighbours(matrix: Matrix, vertex: int) -> Iterable[int]:
    return (i for i, edge in enumerate(matrix[vertex]) if edge == 1)


def path_bfs(matrix: Matrix, v1: int, v2: int) -> Optional[list[int]]:
    """A shortest path found breadth first, listed from ``v2`` back to ``v1``.

    Returns None when ``v2`` cannot be reached from ``v1``.
    """
    _check_vertex(matrix, v1)
    _check_vertex(matrix, v2)
    if v1 == v2:
        return [v1]
    parent: dict[int, int] = {}
    visited = {v1}
    pending = deque([v1])
    while pending:
        current = pending.popleft()
        for vertex in _neighbours(matrix, current):
            if vertex in visited:
                continue
            visited.add(vertex)
            parent[vertex] = current
            if vertex == v2:
                path = [v2]
                while path[-1] != v1:
                    path.append(parent[path[-1]])
                return path
            pending.append(vertex)
    return None


def path_dfs(matrix: Matrix, v1: int, v2: int) -> Optional[list[int]]:
    """A path found depth first, listed from ``v2`` back to ``v1``, or None."""
    _check_vertex(matrix, v1)
    _check_vertex(matrix, v2)
    visited: set[int] = set()

    def search(vertex: int) -> Optional[list[int]]:
        if vertex == v2:
            return [vertex]
        visited.add(vertex)
        for neighbour in _neighbours(matrix, vertex):
            if neighbour in visited:
                continue
            path = search(neighbour)
            if path is not None:
                path.append(vertex)
                return path
        return None

    return search(v1)


def connected_components(matrix: Matrix) -> list[list[int]]:
    """The vertices of each connected component, each sorted, ordered by smallest vertex."""
    visited: set[int] = set()
    components: list[list[int]] = []
    for start in range(len(matrix)):
        if start in visited:
            continue
        visited.add(start)
        component = [start]
        pending = deque([start])
        while pending:
            current = pending.popleft()
            for vertex in _neighbours(matrix, current):
                if vertex not in visited:
                    visited.add(vertex)
                    component.append(vertex)
                    pending.append(vertex)
        components.append(sorted(component))
    return components


def has_word_path(board: Sequence[str], word: str = DEFAULT_WORD) -> bool:
    """Whether ``word`` can be traced through cells touching by edge or corner,
    using each cell at most once."""
    if not word:
        return True
    rows = len(board)
    used: set[tuple[int, int]] = set()

    def letter_at(x: int, y: int) -> Optional[str]:
        if 0 <= x < rows and 0 <= y < len(board[x]):
            return board[x][y]
        return None

    def extend(x: int, y: int, index: int) -> bool:
        if index == len(word):
            return True
        used.add((x, y))
        try:
            for dx, dy in _KING_MOVES:
                nx, ny = x + dx, y + dy
                if (
                    (nx, ny) not in used
                    and letter_at(nx, ny) == word[index]
                    and extend(nx, ny, index + 1)
                ):
                    return True
            return False
        finally:
            used.discard((x, y))

    return any(
        letter == word[0] and extend(x, y, 1)
        for x, row in enumerate(board)
        for y, letter in enumerate(row)
    )


def biggest_piece(cake: Sequence[Sequence[int]]) -> int:
    """Size of the largest group of 1 cells joined by shared edges."""
    seen: set[tuple[int, int]] = set()
    best = 0

    def is_one(x: int, y: int) -> bool:
        return 0 <= x < len(cake) and 0 <= y < len(cake[x]) and cake[x][y] == 1

    for x, row in enumerate(cake):
        for y, value in enumerate(row):
            if value != 1 or (x, y) in seen:
                continue
            seen.add((x, y))
            stack = [(x, y)]
            size = 0
            while stack:
                cx, cy = stack.pop()
                size += 1
                for dx, dy in _ROOK_STEPS:
                    nx, ny = cx + dx, cy + dy
                    if (nx, ny) not in seen and is_one(nx, ny):
                        seen.add((nx, ny))
                        stack.append((nx, ny))
            best = max(best, size)
    return best


def count_triangles(matrix: Matrix) -> int:
    """Number of cycles made of three vertices."""
    return sum(
        1
        for i, j, k in combinations(range(len(matrix)), 3)
        if matrix[i][j] == 1 and matrix[j][k] == 1 and matrix[i][k] == 1
    )


def has_colour_cycle(board: Sequence[str]) -> bool:
    """Whether cells of one colour, joined by shared edges, form a cycle."""
    parent: dict[tuple[int, int], tuple[int, int]] = {}

    def find(cell: tuple[int, int]) -> tuple[int, int]:
        parent.setdefault(cell, cell)
        while parent[cell] != cell:
            parent[cell] = parent[parent[cell]]
            cell = parent[cell]
        return cell

    for x, row in enumerate(board):
        for y, colour in enumerate(row):
            for nx, ny in ((x + 1, y), (x, y + 1)):
                if nx < len(board) and ny < len(board[nx]) and board[nx][ny] == colour:
                    a, b = find((x, y)), find((nx, ny))
                    if a == b:
                        return True
                    parent[a] = b
    return False