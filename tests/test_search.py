import bisect

import pytest

from algokit.search import binary_search, n_queens


SAMPLE = [1, 4, 5, 7, 10]


def test_missing_key_past_the_end_reports_insertion_at_length():
    result = binary_search(SAMPLE, 15)
    assert result.found is False
    assert result.index == len(SAMPLE)


@pytest.mark.parametrize("key", SAMPLE)
def test_present_keys_are_found_at_their_index(key):
    found, index = binary_search(SAMPLE, key)
    assert found is True
    assert SAMPLE[index] == key


@pytest.mark.parametrize("key", [0, 2, 3, 6, 8, 9, 11])
def test_missing_keys_report_bisect_position(key):
    found, index = binary_search(SAMPLE, key)
    assert found is False
    assert index == bisect.bisect_left(SAMPLE, key)


def test_empty_sequence_inserts_at_zero():
    assert binary_search([], 3) == (False, 0)


def test_four_queens_solutions():
    assert n_queens(4) == [(2, 4, 1, 3), (3, 1, 4, 2)]


def test_eight_queens_count():
    assert len(n_queens(8)) == 92


def test_single_queen():
    assert n_queens(1) == [(1,)]


@pytest.mark.parametrize("n", range(1, 9))
def test_solutions_never_attack(n):
    for solution in n_queens(n):
        assert sorted(solution) == list(range(1, n + 1))
        for r1, c1 in enumerate(solution, start=1):
            for r2, c2 in enumerate(solution, start=1):
                if r1 < r2:
                    assert abs(r1 - r2) != abs(c1 - c2)


@pytest.mark.parametrize("n", range(1, 9))
def test_solutions_are_unique_and_ordered(n):
    solutions = n_queens(n)
    assert solutions == sorted(set(solutions))


@pytest.mark.parametrize("n", [0, -1, 9])
def test_board_size_out_of_range(n):
    with pytest.raises(ValueError):
        n_queens(n)