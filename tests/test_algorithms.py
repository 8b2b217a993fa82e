from itertools import combinations

import pytest

from dsakit.algorithms import (
    DisjointSet,
    count_good_substrings,
    count_inversions,
    count_scc,
    fibonacci,
    kmp_contains,
    kmp_prefix,
)

ALL_GOOD = "1" * 26


def test_disjoint_set_union_joins_sets():
    ds = DisjointSet(6)
    assert ds.union(1, 2)
    assert ds.union(3, 4)
    assert ds.union(2, 4)
    assert ds.find(1) == ds.find(3)
    assert ds.find(5) != ds.find(1)


def test_disjoint_set_union_of_same_set_is_false():
    ds = DisjointSet(3)
    ds.union(0, 1)
    assert not ds.union(1, 0)


def test_disjoint_set_fresh_elements_are_own_roots():
    ds = DisjointSet(4)
    assert [ds.find(i) for i in range(5)] == list(range(5))


def test_disjoint_set_out_of_range():
    with pytest.raises(IndexError):
        DisjointSet(2).find(3)


@pytest.mark.parametrize("n", range(0, 30))
def test_fibonacci_recurrence(n):
    assert fibonacci(n + 2) == fibonacci(n + 1) + fibonacci(n)


def test_fibonacci_start():
    assert fibonacci(1) == fibonacci(2)
    assert fibonacci(0) < fibonacci(1)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_count_scc_cycle_and_single():
    adj = [[1], [2], [0], [2]]
    assert count_scc(4, adj) == 2


def test_count_scc_no_edges():
    n = 5
    assert count_scc(n, [[] for _ in range(n)]) == n


def test_count_scc_full_cycle_is_one_component():
    n = 6
    adj = [[(i + 1) % n] for i in range(n)]
    assert count_scc(n, adj) == count_scc(1, [[]])


def test_count_inversions_sorted_is_zero():
    assert count_inversions(range(10)) == 0


def test_count_inversions_reversed_counts_all_pairs():
    values = list(range(9, -1, -1))
    assert count_inversions(values) == len(list(combinations(values, 2)))


def test_count_inversions_does_not_mutate():
    values = [3, 1, 2]
    count_inversions(values)
    assert values == [3, 1, 2]


def test_kmp_prefix_example():
    assert kmp_prefix("aab") == [-1, 0, -1]


def test_kmp_prefix_no_repeats():
    assert kmp_prefix("abcd") == [-1] * len("abcd")


@pytest.mark.parametrize(
    "text, pattern",
    [("aefoaefcdaefcdaed", "aefcdaed"), ("testwhereissue", "where"), ("abc", "")],
)
def test_kmp_contains_present(text, pattern):
    assert kmp_contains(text, pattern)


def test_count_good_substrings_worked_example():
    assert count_good_substrings("ababab", "01" + "0" * 24, 1) == 5


def test_count_good_substrings_no_bad_allowed_and_all_bad():
    assert count_good_substrings("abc", "0" * 26, 0) == 0


def test_count_good_substrings_single_letter_run():
    assert count_good_substrings("aaaa", ALL_GOOD, 0) == len("aaaa")


def test_count_good_substrings_invalid_good():
    with pytest.raises(ValueError):
        count_good_substrings("abc", "01", 1)


def test_count_good_substrings_invalid_letters():
    with pytest.raises(ValueError):
        count_good_substrings("aBc", ALL_GOOD, 1)