"""Binary trees: building from value streams, traversals and measurements."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

NULL_MARKER = -1


@dataclass
class BinaryTreeNode:
    """A node of a binary tree holding an integer."""

    data: int
    left: Optional[BinaryTreeNode] = None
    right: Optional[BinaryTreeNode] = None


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def build_preorder(values: Iterable[int]) -> Optional[BinaryTreeNode]:
    """Build a tree from values given in preorder, -1 marking a missing child."""
    stream = iter(values)

    def build() -> Optional[BinaryTreeNode]:
        value = _take(stream)
        if value == NULL_MARKER:
            return None
        node = BinaryTreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order(values: Iterable[int]) -> Optional[BinaryTreeNode]:
    """Build a tree from values given level by level, -1 marking a missing child."""
    stream = iter(values)
    root_value = _take(stream)
    if root_value == NULL_MARKER:
        return None
    root = BinaryTreeNode(root_value)
    pending = deque([root])

    def child() -> Optional[BinaryTreeNode]:
        value = _take(stream)
        if value == NULL_MARKER:
            return None
        node = BinaryTreeNode(value)
        pending.append(node)
        return node

    while pending:
        front = pending.popleft()
        front.left = child()
        front.right = child()
    return root


def _preorder_nodes(root: Optional[BinaryTreeNode]) -> Iterator[BinaryTreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def describe_nodes(root: Optional[BinaryTreeNode]) -> list[str]:
    """One line per node in preorder: the node and its children, e.g. ``1 : L2 R3``."""
    lines = []
    for node in _preorder_nodes(root):
        line = f"{node.data} :"
        if node.left is not None:
            line += f" L{node.left.data}"
        if node.right is not None:
            line += f" R{node.right.data}"
        lines.append(line)
    return lines


def describe_level_wise(root: Optional[BinaryTreeNode]) -> list[str]:
    """One line per node in level order, e.g. ``1:L:2,R:-1``."""
    lines: list[str] = []
    if root is None:
        return lines
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = NULL_MARKER if node.left is None else node.left.data
        right = NULL_MARKER if node.right is None else node.right.data
        lines.append(f"{node.data}:L:{left},R:{right}")
        pending.extend(c for c in (node.left, node.right) if c is not None)
    return lines


def count_nodes(root: Optional[BinaryTreeNode]) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _preorder_nodes(root))


def height(root: Optional[BinaryTreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def contains(root: Optional[BinaryTreeNode], x: int) -> bool:
    """Whether any node holds ``x``."""
    return any(node.data == x for node in _preorder_nodes(root))


def _inorder(root: Optional[BinaryTreeNode]) -> Iterator[int]:
    stack: list[BinaryTreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right


def _postorder(root: Optional[BinaryTreeNode]) -> Iterator[int]:
    if root is None:
        return
    yield from _postorder(root.left)
    yield from _postorder(root.right)
    yield root.data


def inorder(root: Optional[BinaryTreeNode]) -> list[int]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def preorder(root: Optional[BinaryTreeNode]) -> list[int]:
    """Values in root, left, right order."""
    return [node.data for node in _preorder_nodes(root)]


def postorder(root: Optional[BinaryTreeNode]) -> list[int]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def height_and_diameter(root: Optional[BinaryTreeNode]) -> tuple[int, int]:
    """Height and diameter (edges on the longest path) computed in one pass."""
    if root is None:
        return 0, 0
    left_height, left_diameter = height_and_diameter(root.left)
    right_height, right_diameter = height_and_diameter(root.right)
    return (
        max(left_height, right_height) + 1,
        max(left_diameter, right_diameter, left_height + right_height),
    )


def diameter(root: Optional[BinaryTreeNode]) -> int:
    """Number of edges on the longest path between two nodes."""
    return height_and_diameter(root)[1]


def root_to_node_path(root: Optional[BinaryTreeNode], data: int) -> Optional[list[int]]:
    """Values from the node holding ``data`` up to the root, or None if absent."""
    if root is None:
        return None
    if root.data == data:
        return [root.data]
    for child in (root.left, root.right):
        path = root_to_node_path(child, data)
        if path is not None:
            path.append(root.data)
            return path
    return None