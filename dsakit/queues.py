"""Queues: a bounded circular queue, a growing one, and linked queue and deque."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain, islice
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class QueueEmpty(IndexError):
    """Raised when reading from an empty queue."""


class QueueFull(OverflowError):
    """Raised when adding to a bounded queue that is full."""


class _CircularQueue(Generic[T]):
    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._first = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        ordered = chain(self._slots[self._first:], self._slots[: self._first])
        return islice(ordered, self._size)

    def _peek(self) -> T:
        if self._size == 0:
            raise QueueEmpty("queue is empty")
        return self._slots[self._first]

    def _pop(self) -> T:
        value = self._peek()
        self._slots[self._first] = None
        self._first = (self._first + 1) % self.capacity
        self._size -= 1
        return value

    def _push(self, element: T) -> None:
        self._slots[(self._first + self._size) % self.capacity] = element
        self._size += 1


class BoundedQueue(_CircularQueue[T]):
    """A first-in first-out queue holding at most ``capacity`` elements."""

    def is_empty(self) -> bool:
        """Whether the queue holds no elements."""
        return self._size == 0

    def front(self) -> T:
        """The oldest element, left in place."""
        return self._peek()

    def dequeue(self) -> T:
        """Remove and return the oldest element."""
        return self._pop()

    def enqueue(self, element: T) -> None:
        """Add ``element`` at the back; raises QueueFull when full."""
        if self._size == self.capacity:
            raise QueueFull("queue is full")
        self._push(element)


class DynamicQueue(_CircularQueue[T]):
    """A first-in first-out queue whose capacity doubles when it fills up."""

    def is_empty(self) -> bool:
        """Whether the queue holds no elements."""
        return self._size == 0

    def front(self) -> T:
        """The oldest element, left in place."""
        return self._peek()

    def dequeue(self) -> T:
        """Remove and return the oldest element."""
        return self._pop()

    def enqueue(self, element: T) -> None:
        """Add ``element`` at the back, growing the storage if needed."""
        if self._size == self.capacity:
            self._slots = list(self) + [None] * self.capacity
            self._first = 0
        self._push(element)


@dataclass
class _Link(Generic[T]):
    data: T
    next: Optional[_Link[T]] = None
    prev: Optional[_Link[T]] = None


class LinkedQueue(Generic[T]):
    """A first-in first-out queue of linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Link[T]] = None
        self._tail: Optional[_Link[T]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def is_empty(self) -> bool:
        """Whether the queue holds no elements."""
        return self._head is None

    def enqueue(self, element: T) -> None:
        """Add ``element`` at the back."""
        node = _Link(element)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def front(self) -> T:
        """The oldest element, left in place."""
        if self._head is None:
            raise QueueEmpty("queue is empty")
        return self._head.data

    def dequeue(self) -> T:
        """Remove and return the oldest element."""
        if self._head is None:
            raise QueueEmpty("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data


class LinkedDeque(Generic[T]):
    """A double-ended queue of doubly linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Link[T]] = None
        self._tail: Optional[_Link[T]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def is_empty(self) -> bool:
        """Whether the deque holds no elements."""
        return self._head is None

    def push_back(self, element: T) -> None:
        """Add ``element`` at the rear."""
        node = _Link(element, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push_front(self, element: T) -> None:
        """Add ``element`` at the front."""
        node = _Link(element, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the front element."""
        if self._head is None:
            raise QueueEmpty("deque is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.data

    def pop_back(self) -> T:
        """Remove and return the rear element."""
        if self._tail is None:
            raise QueueEmpty("deque is empty")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.data

    def front(self) -> T:
        """The front element, left in place."""
        if self._head is None:
            raise QueueEmpty("deque is empty")
        return self._head.data

    def rear(self) -> T:
        """The rear element, left in place."""
        if self._tail is None:
            raise QueueEmpty("deque is empty")
        return self._tail.data