"""Singly linked lists of integers: building, queries and rearrangements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A list node holding an integer and a link to the next node."""

    data: int
    next: Optional[Node] = None

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in _nodes(self))


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _link(nodes: Iterable[Node]) -> Optional[Node]:
    """Chain the given nodes in order and return the first one."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for node in list(nodes):
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    if tail is not None:
        tail.next = None
    return head


def from_iterable(values: Iterable[int]) -> Optional[Node]:
    """Build a list holding ``values`` in order; None when there are none."""
    return _link(Node(value) for value in values)


def to_list(head: Optional[Node]) -> list[int]:
    """The values of the list in order."""
    return [node.data for node in _nodes(head)]


def length(head: Optional[Node]) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def ith(head: Optional[Node], i: int) -> int:
    """The value at index ``i``."""
    if i >= 0:
        for index, node in enumerate(_nodes(head)):
            if index == i:
                return node.data
    raise IndexError(f"index {i} out of range")


def find(head: Optional[Node], value: int) -> int:
    """Index of the first node holding ``value``, or -1 if there is none."""
    for index, node in enumerate(_nodes(head)):
        if node.data == value:
            return index
    return -1


def insert_at(head: Optional[Node], i: int, data: int) -> Optional[Node]:
    """Insert ``data`` before the node at index ``i``; other indexes change nothing."""
    nodes = list(_nodes(head))
    if not 0 <= i < len(nodes):
        return head
    new_node = Node(data, nodes[i])
    if i == 0:
        return new_node
    nodes[i - 1].next = new_node
    return head


def delete_at(head: Optional[Node], i: int) -> Optional[Node]:
    """Remove the node at index ``i``; other indexes change nothing."""
    nodes = list(_nodes(head))
    if not 0 <= i < len(nodes):
        return head
    if i == 0:
        return nodes[0].next
    nodes[i - 1].next = nodes[i].next
    return head


def remove_nth_from_end(head: Optional[Node], n: int) -> Optional[Node]:
    """Remove the ``n``-th node counted from the end, the last being 1."""
    size = length(head)
    if not 1 <= n <= size:
        raise IndexError(f"no node {n} from the end in a list of {size}")
    return delete_at(head, size - n)


def append_last_n_to_first(head: Optional[Node], n: int) -> Optional[Node]:
    """Move the last ``n`` nodes, in order, to the front of the list."""
    if head is None:
        return None
    nodes = list(_nodes(head))
    size = len(nodes)
    if not 0 <= n <= size:
        raise ValueError(f"cannot move {n} nodes of a list of {size}")
    if n in (0, size):
        return head
    nodes[size - n - 1].next = None
    nodes[-1].next = head
    return nodes[size - n]


def is_palindrome(head: Optional[Node]) -> bool:
    """Whether the values read the same forwards and backwards."""
    values = to_list(head)
    return values == values[::-1]


def remove_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Drop nodes equal to the one before them, as in a sorted list."""
    node = head
    while node is not None:
        while node.next is not None and node.next.data == node.data:
            node.next = node.next.next
        node = node.next
    return head


def midpoint(head: Optional[Node]) -> Optional[Node]:
    """The middle node; the first of the two middles when the length is even."""
    if head is None:
        return None
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return slow


def merge_sorted(head1: Optional[Node], head2: Optional[Node]) -> Optional[Node]:
    """Merge two sorted lists into one; on ties nodes of ``head2`` come first."""
    dummy = Node(0)
    tail = dummy
    while head1 is not None and head2 is not None:
        if head2.data <= head1.data:
            tail.next, head2 = head2, head2.next
        else:
            tail.next, head1 = head1, head1.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return dummy.next


def merge_sort(head: Optional[Node]) -> Optional[Node]:
    """Sort the list by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    middle = midpoint(head)
    assert middle is not None
    second = middle.next
    middle.next = None
    return merge_sorted(merge_sort(head), merge_sort(second))


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list in place and return the new head."""
    previous: Optional[Node] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def bubble_sort(head: Optional[Node]) -> Optional[Node]:
    """Sort the list by bubble sort, swapping values between nodes."""
    if head is None:
        return None
    end: Optional[Node] = None
    while end is not head:
        node = head
        while node.next is not end:
            following = node.next
            assert following is not None
            if node.data > following.data:
                node.data, following.data = following.data, node.data
            node = following
        end = node
    return head


def even_after_odd(head: Optional[Node]) -> Optional[Node]:
    """Relink the list so odd values come first, then even ones, each in order."""
    nodes = list(_nodes(head))
    odd = [node for node in nodes if node.data % 2 != 0]
    even = [node for node in nodes if node.data % 2 == 0]
    return _link(odd + even)


def swap_nodes(head: Optional[Node], i: int, j: int) -> Optional[Node]:
    """Swap the values at indexes ``i`` and ``j``."""
    nodes = list(_nodes(head))
    for index in (i, j):
        if not 0 <= index < len(nodes):
            raise IndexError(f"index {index} out of range")
    nodes[i].data, nodes[j].data = nodes[j].data, nodes[i].data
    return head


def k_reverse(head: Optional[Node], k: int) -> Optional[Node]:
    """Reverse each run of ``k`` nodes, including a shorter final run."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0:
        return head
    nodes = list(_nodes(head))
    return _link(
        node
        for start in range(0, len(nodes), k)
        for node in reversed(nodes[start:start + k])
    )


def skip_m_delete_n(head: Optional[Node], m: int, n: int) -> Optional[Node]:
    """Keep ``m`` nodes, drop the next ``n``, and repeat to the end of the list."""
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if n == 0:
        return head
    if m == 0:
        return None
    period = m + n
    return _link(
        node for index, node in enumerate(_nodes(head)) if index % period < m
    )