from collections import deque

import pytest

from dsakit.stack_problems import (
    count_bracket_reversals,
    has_redundant_brackets,
    is_balanced,
    reverse_queue,
    reverse_stack,
    stock_span,
)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("{a+[b*(c)]}", True),
        ("", True),
        ("(()", False),
        (")(", False),
        ("[]{}()", True),
        ("([)", False),
    ],
)
def test_is_balanced(expression, expected):
    assert is_balanced(expression) is expected


def test_reverse_stack():
    stack = [1, 2, 3, 4, 5]
    original = list(stack)
    reverse_stack(stack)
    assert stack == original[::-1]


def test_reverse_empty_stack():
    stack = []
    reverse_stack(stack)
    assert stack == []


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("((a+b))", True),
        ("(a+b)", False),
        ("(a)", True),
        ("a+(b)+c", True),
        ("((a+b)*c)", False),
        ("abc", False),
    ],
)
def test_has_redundant_brackets(expression, expected):
    assert has_redundant_brackets(expression) is expected


def test_has_redundant_brackets_unmatched():
    with pytest.raises(ValueError):
        has_redundant_brackets("a+b)")


def test_count_bracket_reversals():
    assert count_bracket_reversals("{}{}") == 0
    assert count_bracket_reversals("{{{{") == 2
    assert count_bracket_reversals("}{") == 2


def test_count_bracket_reversals_odd_length():
    with pytest.raises(ValueError):
        count_bracket_reversals("{{{")


def test_count_bracket_reversals_agrees_with_balance():
    for text in ["{}", "{{}}", "{}{{}}"]:
        assert is_balanced(text)
        assert count_bracket_reversals(text) == 0


def _check_spans(prices, spans):
    assert len(spans) == len(prices)
    for i, span in enumerate(spans):
        assert 1 <= span <= i + 1
        assert all(p <= prices[i] for p in prices[i - span + 1:i + 1])
        if i - span >= 0:
            assert prices[i - span] > prices[i]


def test_stock_span_increasing_and_decreasing():
    rising = [1, 2, 3, 4, 5]
    falling = rising[::-1]
    assert stock_span(rising) == list(range(1, len(rising) + 1))
    assert stock_span(falling) == [1] * len(falling)
    assert stock_span([]) == []


def test_reverse_queue():
    queue = deque([1, 2, 3, 4, 5, 67, 7])
    original = list(queue)
    reverse_queue(queue)
    assert list(queue) == original[::-1]
    assert queue.popleft() == original[-1]