"""General (n-ary) trees: building, traversals and queries."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A tree node holding an integer and any number of ordered children."""

    data: int
    children: list[TreeNode] = field(default_factory=list)


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def build_recursive(values: Iterable[int]) -> TreeNode:
    """Build a tree from ``data, child count, children...`` given depth first."""
    stream = iter(values)

    def build() -> TreeNode:
        node = TreeNode(_take(stream))
        count = _take(stream)
        node.children = [build() for _ in range(count)]
        return node

    return build()


def build_level_order(values: Iterable[int]) -> TreeNode:
    """Build a tree from the root value, then for each node in level order
    its child count followed by its children's values."""
    stream = iter(values)
    root = TreeNode(_take(stream))
    pending = deque([root])
    while pending:
        front = pending.popleft()
        count = _take(stream)
        for _ in range(count):
            child = TreeNode(_take(stream))
            front.children.append(child)
            pending.append(child)
    return root


def _walk(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def describe(root: Optional[TreeNode]) -> list[str]:
    """One line per node in preorder, e.g. ``1:2,3,``."""
    return [
        f"{node.data}:" + "".join(f"{child.data}," for child in node.children)
        for node in _walk(root)
    ]


def describe_level_wise(root: Optional[TreeNode]) -> list[str]:
    """One line per node in level order, e.g. ``1:2,3``."""
    lines: list[str] = []
    pending = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        pending.extend(node.children)
        lines.append(f"{node.data}:" + ",".join(str(c.data) for c in node.children))
    return lines


def count_nodes(root: Optional[TreeNode]) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _walk(root))


def sum_nodes(root: Optional[TreeNode]) -> int:
    """Sum of all node values."""
    return sum(node.data for node in _walk(root))


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max((height(child) for child in root.children), default=0)


def contains(root: Optional[TreeNode], x: int) -> bool:
    """Whether any node holds ``x``."""
    return any(node.data == x for node in _walk(root))


def nodes_at_depth(root: Optional[TreeNode], k: int) -> list[int]:
    """Values of the nodes ``k`` levels below the root, left to right."""
    if root is None:
        return []
    if k == 0:
        return [root.data]
    return [value for child in root.children for value in nodes_at_depth(child, k - 1)]


def count_leaves(root: Optional[TreeNode]) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _walk(root) if not node.children)


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values with each node before its children."""
    return [node.data for node in _walk(root)]


def _postorder(root: TreeNode) -> Iterator[int]:
    for child in root.children:
        yield from _postorder(child)
    yield root.data


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values with each node after its children."""
    return [] if root is None else list(_postorder(root))


def max_data_node(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """The node with the largest value; the earliest one in preorder on ties."""
    best: Optional[TreeNode] = None
    for node in _walk(root):
        if best is None or node.data > best.data:
            best = node
    return best


def _child_sum(node: TreeNode) -> int:
    return sum(child.data for child in node.children)


def max_child_sum_node(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """The node whose children's values add up to the most."""
    if root is None:
        return None
    best, best_sum = root, _child_sum(root)
    for child in root.children:
        candidate = max_child_sum_node(child)
        candidate_sum = _child_sum(candidate)
        if best_sum < candidate_sum:
            best, best_sum = candidate, candidate_sum
    return best


def are_identical(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Whether both trees have the same shape and values; False if either is missing."""
    if root1 is None or root2 is None:
        return False
    if root1.data != root2.data or len(root1.children) != len(root2.children):
        return False
    return all(are_identical(a, b) for a, b in zip(root1.children, root2.children))


def next_larger(root: Optional[TreeNode], x: int) -> Optional[TreeNode]:
    """The node with the smallest value greater than ``x``, or None."""
    if root is None:
        return None
    best: Optional[TreeNode] = None
    best_value = math.inf
    for child in root.children:
        candidate = next_larger(child, x)
        if candidate is not None and candidate.data < best_value:
            best, best_value = candidate, candidate.data
    if x < root.data < best_value:
        return root
    return best


def replace_with_depth(root: Optional[TreeNode]) -> None:
    """Replace every node's value with its depth, the root being at depth 0."""
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        node.data = depth
        stack.extend((child, depth + 1) for child in node.children)


def count_greater(root: Optional[TreeNode], x: int) -> int:
    """Number of nodes whose value is greater than ``x``."""
    return sum(1 for node in _walk(root) if node.data > x)