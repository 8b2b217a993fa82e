import pytest

from dsakit.linked_list import (
    Node,
    append_last_n_to_first,
    bubble_sort,
    delete_at,
    even_after_odd,
    find,
    from_iterable,
    insert_at,
    is_palindrome,
    k_reverse,
    length,
    merge_sort,
    merge_sorted,
    midpoint,
    remove_duplicates,
    remove_nth_from_end,
    reverse,
    skip_m_delete_n,
    swap_nodes,
    to_list,
)

VALUES = [10, 6, 77, 90, 61, 67, 100]


def test_round_trip():
    assert to_list(from_iterable(VALUES)) == VALUES


def test_empty_list():
    assert from_iterable([]) is None
    assert to_list(None) == []
    assert length(None) == 0


def test_node_iteration():
    head = from_iterable(VALUES)
    assert list(head) == VALUES


def test_length():
    assert length(from_iterable(VALUES)) == len(VALUES)


def test_ith():
    head = from_iterable(VALUES)
    assert [ith_value for ith_value in (VALUES[i] for i in range(len(VALUES)))] == [
        __import_free_ith(head, i) for i in range(len(VALUES))
    ]


def __import_free_ith(head, i):
    from dsakit.linked_list import ith

    return ith(head, i)


@pytest.mark.parametrize("index", [-1, len(VALUES)])
def test_ith_out_of_range(index):
    from dsakit.linked_list import ith

    with pytest.raises(IndexError):
        ith(from_iterable(VALUES), index)


def test_find():
    head = from_iterable(VALUES)
    for value in VALUES:
        assert find(head, value) == VALUES.index(value)
    assert find(head, 12345) == -1


@pytest.mark.parametrize("i", range(len(VALUES)))
def test_insert_at(i):
    head = insert_at(from_iterable(VALUES), i, 999)
    assert to_list(head) == VALUES[:i] + [999] + VALUES[i:]


@pytest.mark.parametrize("i", [-1, len(VALUES), len(VALUES) + 3])
def test_insert_at_out_of_range_is_ignored(i):
    assert to_list(insert_at(from_iterable(VALUES), i, 999)) == VALUES


@pytest.mark.parametrize("i", range(len(VALUES)))
def test_delete_at(i):
    assert to_list(delete_at(from_iterable(VALUES), i)) == VALUES[:i] + VALUES[i + 1:]


def test_delete_at_out_of_range_is_ignored():
    assert to_list(delete_at(from_iterable(VALUES), len(VALUES))) == VALUES


@pytest.mark.parametrize("n", range(1, len(VALUES) + 1))
def test_remove_nth_from_end(n):
    k = len(VALUES) - n
    assert to_list(remove_nth_from_end(from_iterable(VALUES), n)) == VALUES[:k] + VALUES[k + 1:]


@pytest.mark.parametrize("n", [0, len(VALUES) + 1])
def test_remove_nth_from_end_invalid(n):
    with pytest.raises(IndexError):
        remove_nth_from_end(from_iterable(VALUES), n)


def test_append_last_n_to_first_example():
    head = append_last_n_to_first(from_iterable(VALUES), 4)
    assert to_list(head) == [90, 61, 67, 100, 10, 6, 77]


def test_append_last_n_to_first_zero_and_all():
    assert to_list(append_last_n_to_first(from_iterable(VALUES), 0)) == VALUES
    assert to_list(append_last_n_to_first(from_iterable(VALUES), len(VALUES))) == VALUES


def test_append_last_n_to_first_too_many():
    with pytest.raises(ValueError):
        append_last_n_to_first(from_iterable(VALUES), len(VALUES) + 1)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 2, 1], True),
        ([1, 2, 2, 1], True),
        ([1, 2, 3], False),
        ([1, 2], False),
        ([7], True),
        ([], True),
    ],
)
def test_is_palindrome(values, expected):
    assert is_palindrome(from_iterable(values)) is expected


def test_is_palindrome_keeps_list():
    head = from_iterable([1, 2, 1])
    is_palindrome(head)
    assert to_list(head) == [1, 2, 1]


def test_remove_duplicates():
    values = [1, 1, 2, 3, 3, 3, 4, 5, 5]
    assert to_list(remove_duplicates(from_iterable(values))) == sorted(set(values))


def test_midpoint_odd_and_even():
    odd = [1, 2, 3, 4, 5]
    even = [1, 2, 3, 4]
    assert midpoint(from_iterable(odd)).data == odd[2]
    assert midpoint(from_iterable(even)).data == even[1]
    assert midpoint(None) is None


def test_merge_sorted():
    a, b = [1, 4, 5, 9], [2, 3, 6, 10, 11]
    assert to_list(merge_sorted(from_iterable(a), from_iterable(b))) == sorted(a + b)


def test_merge_sorted_ties_take_second_first():
    first = from_iterable([1, 3])
    second = from_iterable([1, 2])
    merged = merge_sorted(first, second)
    assert merged is second
    assert merged.next is first


def test_merge_sorted_with_empty():
    assert to_list(merge_sorted(None, from_iterable([1, 2]))) == [1, 2]
    assert to_list(merge_sorted(from_iterable([1, 2]), None)) == [1, 2]


@pytest.mark.parametrize(
    "values", [VALUES, [], [5], [3, 3, 1, 2, 2], [9, 8, 7, 6, 5, 4], [-2, 4, -7, 0]]
)
def test_merge_sort(values):
    assert to_list(merge_sort(from_iterable(values))) == sorted(values)


@pytest.mark.parametrize("values", [VALUES, [], [5], [3, 3, 1, 2, 2]])
def test_bubble_sort(values):
    assert to_list(bubble_sort(from_iterable(values))) == sorted(values)


@pytest.mark.parametrize("values", [VALUES, [], [1], [1, 2]])
def test_reverse(values):
    assert to_list(reverse(from_iterable(values))) == values[::-1]


def test_even_after_odd():
    values = [1, 4, 5, 2, 8, 7, 3, -3, 6]
    result = to_list(even_after_odd(from_iterable(values)))
    assert sorted(result) == sorted(values)
    parities = [v % 2 == 0 for v in result]
    assert parities == sorted(parities)
    assert [v for v in result if v % 2] == [v for v in values if v % 2]
    assert [v for v in result if v % 2 == 0] == [v for v in values if v % 2 == 0]


def test_swap_nodes():
    expected = list(VALUES)
    expected[1], expected[5] = expected[5], expected[1]
    assert to_list(swap_nodes(from_iterable(VALUES), 1, 5)) == expected


def test_swap_nodes_out_of_range():
    with pytest.raises(IndexError):
        swap_nodes(from_iterable(VALUES), 0, len(VALUES))


def test_k_reverse_example():
    head = k_reverse(from_iterable(range(1, 11)), 3)
    assert to_list(head) == [3, 2, 1, 6, 5, 4, 9, 8, 7, 10]


def test_k_reverse_edges():
    assert to_list(k_reverse(from_iterable(VALUES), 0)) == VALUES
    assert to_list(k_reverse(from_iterable(VALUES), 1)) == VALUES
    assert to_list(k_reverse(from_iterable(VALUES), len(VALUES) + 2)) == VALUES[::-1]
    with pytest.raises(ValueError):
        k_reverse(from_iterable(VALUES), -1)


def test_skip_m_delete_n_example():
    head = skip_m_delete_n(from_iterable(range(1, 9)), 2, 2)
    assert to_list(head) == [1, 2, 5, 6]


def test_skip_m_delete_n_edges():
    assert to_list(skip_m_delete_n(from_iterable(VALUES), 3, 0)) == VALUES
    assert skip_m_delete_n(from_iterable(VALUES), 0, 2) is None
    assert to_list(skip_m_delete_n(from_iterable(VALUES), len(VALUES), 1)) == VALUES
    with pytest.raises(ValueError):
        skip_m_delete_n(from_iterable(VALUES), -1, 1)


def test_node_links():
    tail = Node(2)
    head = Node(1, tail)
    assert to_list(head) == [1, 2]