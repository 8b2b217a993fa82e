"""Classic stack and queue exercises: brackets, spans and reversals."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, MutableSequence

_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_PAIRS.values())


def is_balanced(expression: str) -> bool:
    """Whether the brackets of ``expression`` are balanced.

    A closing bracket with nothing open makes it unbalanced; one that does not
    match the innermost open bracket is skipped.
    """
    stack: list[str] = []
    for ch in expression:
        if ch in _PAIRS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack:
                return False
            if _PAIRS[stack[-1]] == ch:
                stack.pop()
    return not stack


def reverse_stack(stack: MutableSequence[Any]) -> None:
    """Reverse a stack held in a list, top at the end, in place."""
    stack.reverse()


def has_redundant_brackets(expression: str) -> bool:
    """Whether some pair of parentheses encloses at most one character."""
    stack: list[str] = []
    for ch in expression:
        if ch != ")":
            stack.append(ch)
            continue
        enclosed = 0
        while True:
            if not stack:
                raise ValueError("unmatched ')' in expression")
            if stack.pop() == "(":
                break
            enclosed += 1
        if enclosed <= 1:
            return True
    return False


def count_bracket_reversals(text: str) -> int:
    """Fewest brace flips that balance ``text``; odd lengths raise ValueError."""
    if len(text) % 2 != 0:
        raise ValueError("a string of odd length cannot be balanced")
    stack: list[str] = []
    for ch in text:
        if stack and stack[-1] == "{" and ch == "}":
            stack.pop()
        else:
            stack.append(ch)
    flips = 0
    while stack:
        top = stack.pop()
        below = stack.pop()
        flips += 2 if top != below else 1
    return flips


def stock_span(prices: Iterable[int]) -> list[int]:
    """For each day, the number of consecutive days up to it with prices not above it."""
    values = list(prices)
    spans: list[int] = []
    stack: list[int] = []
    for i, price in enumerate(values):
        while stack and values[stack[-1]] < price:
            stack.pop()
        spans.append(i - stack[-1] if stack else i + 1)
        stack.append(i)
    return spans


def reverse_queue(queue: deque[Any]) -> None:
    """Reverse the order of a queue in place."""
    queue.reverse()