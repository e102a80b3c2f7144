import random

import pytest

from algokit.stress import (
    ApCase,
    Discrepancy,
    ap_sum_brute,
    ap_sum_formula,
    random_ap_case,
    random_distinct_sequence,
    random_tree_shuffled,
    random_tree_simple,
    random_watermelon,
    second_smallest_brute,
    second_smallest_sorted,
    stress_compare,
    watermelon_brute,
    watermelon_fast,
)
from algokit.unionfind import UnionFind


def _is_tree(n, edges):
    if len(edges) != n - 1:
        return False
    uf = UnionFind(n + 1)
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            return False
        if not uf.union(a, b):
            return False
    return uf.count() == 2


def test_second_smallest_distinct_agree():
    values = [5, 1, 3]
    assert second_smallest_sorted(values) == 3
    assert second_smallest_brute(values) == 3


def test_second_smallest_with_repeated_minimum_differs():
    values = [1, 1, 2]
    assert second_smallest_sorted(values) == 1
    with pytest.raises(ValueError):
        second_smallest_brute(values)


@pytest.mark.parametrize("values", [[], [7]])
def test_second_smallest_too_short(values):
    with pytest.raises(ValueError):
        second_smallest_sorted(values)
    with pytest.raises(ValueError):
        second_smallest_brute(values)


@pytest.mark.parametrize("seed", range(20))
def test_generated_sequence_properties_and_agreement(seed):
    seq = random_distinct_sequence(random.Random(seed))
    assert 2 <= len(seq) <= 50
    assert len(set(seq)) == len(seq)
    assert all(1 <= x <= 50 for x in seq)
    assert second_smallest_sorted(seq) == second_smallest_brute(seq)


def test_generators_are_deterministic_per_seed():
    first_seq = random_distinct_sequence(random.Random(3))
    second_seq = random_distinct_sequence(random.Random(3))
    assert list(first_seq) == list(second_seq)
    assert 2 <= len(first_seq) <= 50

    first_tree = random_tree_shuffled(random.Random(4))
    second_tree = random_tree_shuffled(random.Random(4))
    assert first_tree == second_tree
    n, edges = first_tree
    assert _is_tree(n, edges)

    sequences = {tuple(random_distinct_sequence(random.Random(s))) for s in range(10)}
    assert len(sequences) > 1


@pytest.mark.parametrize("seed", range(20))
def test_simple_tree(seed):
    n, edges = random_tree_simple(random.Random(seed))
    assert 2 <= n <= 20
    assert [b for _, b in edges] == list(range(2, n + 1))
    assert all(a < b for a, b in edges)
    assert _is_tree(n, edges)


@pytest.mark.parametrize("seed", range(20))
def test_shuffled_tree(seed):
    n, edges = random_tree_shuffled(random.Random(seed))
    assert 2 <= n <= 20
    assert _is_tree(n, edges)


@pytest.mark.parametrize("seed", range(20))
def test_ap_case_ranges_and_sums_agree(seed):
    case = random_ap_case(random.Random(seed))
    assert 1 <= case.a <= 1000
    assert 1 <= case.n <= 1000
    assert -1000 <= case.d <= 1000
    assert ap_sum_brute(case) == ap_sum_formula(case)


def test_ap_sum_single_term_is_first_term():
    case = ApCase(a=42, n=1, d=-999)
    assert ap_sum_brute(case) == 42
    assert ap_sum_formula(case) == 42


def test_ap_sum_zero_step_is_product():
    case = ApCase(a=7, n=13, d=0)
    assert ap_sum_brute(case) == 7 * 13
    assert ap_sum_formula(case) == 7 * 13


def test_stress_compare_finds_no_discrepancy():
    assert stress_compare(200, random.Random(11)) is None


def test_stress_compare_rejects_negative_trials():
    with pytest.raises(ValueError):
        stress_compare(-1, random.Random(0))


def test_discrepancy_holds_values():
    case = ApCase(1, 2, 3)
    found = Discrepancy(case, 5, 6)
    assert (found.case, found.brute, found.formula) == (case, 5, 6)


@pytest.mark.parametrize("weight", range(1, 101))
def test_watermelon_solutions_agree(weight):
    assert watermelon_brute(weight) == watermelon_fast(weight)


def test_watermelon_known_values():
    assert watermelon_fast(8) is True
    assert watermelon_fast(2) is False
    assert watermelon_brute(7) is False


@pytest.mark.parametrize("seed", range(20))
def test_random_watermelon_range(seed):
    assert 1 <= random_watermelon(random.Random(seed)) <= 100