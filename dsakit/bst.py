"""Binary search trees: queries on plain nodes and a BST container."""

from __future__ import annotations

import math
from collections import deque
from typing import Iterable, Iterator, Optional

from dsakit.binary_tree import BinaryTreeNode, inorder


def bst_search(root: Optional[BinaryTreeNode], k: int) -> bool:
    """Whether ``k`` is in the search tree rooted at ``root``."""
    node = root
    while node is not None:
        if node.data == k:
            return True
        node = node.left if k < node.data else node.right
    return False


def elements_in_range(root: Optional[BinaryTreeNode], k1: int, k2: int) -> list[int]:
    """Values between ``k1`` and ``k2`` inclusive, in ascending order."""
    result: list[int] = []

    def visit(node: Optional[BinaryTreeNode]) -> None:
        if node is None:
            return
        if node.data > k2:
            visit(node.left)
        elif node.data < k1:
            visit(node.right)
        else:
            visit(node.left)
            result.append(node.data)
            visit(node.right)

    visit(root)
    return result


def is_bst(root: Optional[BinaryTreeNode]) -> bool:
    """Whether every node is strictly greater than its left subtree and less than its right."""

    def check(node: Optional[BinaryTreeNode]) -> tuple[bool, float, float]:
        if node is None:
            return True, math.inf, -math.inf
        left_ok, left_min, left_max = check(node.left)
        right_ok, right_min, right_max = check(node.right)
        ok = left_ok and right_ok and left_max < node.data < right_min
        return (
            ok,
            min(left_min, node.data, right_min),
            max(left_max, node.data, right_max),
        )

    return check(root)[0]


def bst_path(root: Optional[BinaryTreeNode], data: int) -> Optional[list[int]]:
    """Values from the node holding ``data`` up to the root, or None if absent."""
    if root is None:
        return None
    if root.data == data:
        return [root.data]
    child = root.left if data < root.data else root.right
    path = bst_path(child, data)
    if path is None:
        return None
    path.append(root.data)
    return path


def level_lists(root: Optional[BinaryTreeNode]) -> list[list[int]]:
    """The values of each level of the tree, top level first."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def insert_duplicate_nodes(root: Optional[BinaryTreeNode]) -> Optional[BinaryTreeNode]:
    """Give every node a copy of itself as its new left child; returns the root."""
    if root is None:
        return None
    old_left = insert_duplicate_nodes(root.left)
    root.right = insert_duplicate_nodes(root.right)
    root.left = BinaryTreeNode(root.data, left=old_left)
    return root


def _remove(node: Optional[BinaryTreeNode], data: int) -> Optional[BinaryTreeNode]:
    if node is None:
        return None
    if data > node.data:
        node.right = _remove(node.right, data)
        return node
    if data < node.data:
        node.left = _remove(node.left, data)
        return node
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.data = successor.data
    node.right = _remove(node.right, successor.data)
    return node


class BST:
    """A binary search tree of integers; equal values go to the left."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[BinaryTreeNode] = None
        for value in values:
            self.insert(value)

    def insert(self, data: int) -> None:
        """Add ``data`` to the tree."""
        new_node = BinaryTreeNode(data)
        if self.root is None:
            self.root = new_node
            return
        node = self.root
        while True:
            if data <= node.data:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def remove(self, data: int) -> None:
        """Remove one occurrence of ``data``; absent values are ignored."""
        self.root = _remove(self.root, data)

    def search(self, data: int) -> bool:
        """Whether ``data`` is in the tree."""
        return bst_search(self.root, data)

    def describe(self) -> list[str]:
        """One line per node in preorder, e.g. ``5:L:3,R:8``."""
        lines: list[str] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            line = f"{node.data}:"
            if node.left is not None:
                line += f"L:{node.left.data},"
            if node.right is not None:
                line += f"R:{node.right.data}"
            lines.append(line)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return lines

    def __contains__(self, data: object) -> bool:
        return isinstance(data, int) and self.search(data)

    def __iter__(self) -> Iterator[int]:
        return iter(inorder(self.root))