"""Stress-testing helpers: random case generators and pairs of solutions to compare."""

import random
from dataclasses import dataclass

_SEQUENCE_LENGTH = (2, 50)
_SEQUENCE_VALUES = (1, 50)
_TREE_SIZE = (2, 20)
_AP_FIRST = (1, 1000)
_AP_TERMS = (1, 1000)
_AP_STEP = (-1000, 1000)
_WATERMELON_WEIGHT = (1, 100)

Edge = tuple[int, int]


@dataclass(frozen=True)
class ApCase:
    """An arithmetic progression: first term ``a``, ``n`` terms, common difference ``d``."""

    a: int
    n: int
    d: int


@dataclass(frozen=True)
class Discrepancy:
    """A case on which the brute-force and formula answers disagree."""

    case: ApCase
    brute: int
    formula: int


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _require_two(values: list[int]) -> None:
    if len(values) < 2:
        raise ValueError("at least two values are required")


def second_smallest_sorted(values: list[int]) -> int:
    """The second element after sorting; wrong when the minimum is repeated."""
    _require_two(values)
    return sorted(values)[1]


def second_smallest_brute(values: list[int]) -> int:
    """The first value with exactly one strictly smaller value in ``values``."""
    _require_two(values)
    for x in values:
        if sum(1 for y in values if y < x) == 1:
            return x
    raise ValueError("no value has exactly one smaller value")


def random_distinct_sequence(rng: random.Random | None = None) -> list[int]:
    """Between 2 and 50 distinct integers drawn from 1..50."""
    rng = _rng(rng)
    n = rng.randint(*_SEQUENCE_LENGTH)
    used: set[int] = set()
    sequence = []
    while len(sequence) < n:
        x = rng.randint(*_SEQUENCE_VALUES)
        if x not in used:
            used.add(x)
            sequence.append(x)
    return sequence


def random_tree_simple(rng: random.Random | None = None) -> tuple[int, list[Edge]]:
    """A tree on 2..20 nodes where node ``i`` hangs off a smaller node."""
    rng = _rng(rng)
    n = rng.randint(*_TREE_SIZE)
    edges = [(rng.randint(1, i - 1), i) for i in range(2, n + 1)]
    return n, edges


def random_tree_shuffled(rng: random.Random | None = None) -> tuple[int, list[Edge]]:
    """A random tree with relabelled nodes, shuffled edges and shuffled endpoints."""
    rng = _rng(rng)
    n = rng.randint(*_TREE_SIZE)
    edges = [(rng.randint(1, i - 1), i) for i in range(2, n + 1)]
    labels = list(range(1, n + 1))
    rng.shuffle(labels)
    perm = dict(zip(range(1, n + 1), labels))
    rng.shuffle(edges)
    result = []
    for a, b in edges:
        if rng.randrange(2):
            a, b = b, a
        result.append((perm[a], perm[b]))
    return n, result


def random_ap_case(rng: random.Random | None = None) -> ApCase:
    """A random progression with ``a`` and ``n`` in 1..1000 and ``d`` in -1000..1000."""
    rng = _rng(rng)
    return ApCase(
        a=rng.randint(*_AP_FIRST),
        n=rng.randint(*_AP_TERMS),
        d=rng.randint(*_AP_STEP),
    )


def ap_sum_brute(case: ApCase) -> int:
    """Sum of the progression term by term."""
    total = 0
    term = case.a
    for _ in range(case.n):
        total += term
        term += case.d
    return total


def ap_sum_formula(case: ApCase) -> int:
    """Sum of the progression by the closed form ``n(2a + (n-1)d) / 2``."""
    return case.n * (2 * case.a + (case.n - 1) * case.d) // 2


def stress_compare(
    trials: int = 1000, rng: random.Random | None = None
) -> Discrepancy | None:
    """Compare both progression sums on random cases; return the first mismatch."""
    if trials < 0:
        raise ValueError("trials must be non-negative")
    rng = _rng(rng)
    for _ in range(trials):
        case = random_ap_case(rng)
        brute = ap_sum_brute(case)
        formula = ap_sum_formula(case)
        if brute != formula:
            return Discrepancy(case, brute, formula)
    return None


def watermelon_brute(weight: int) -> bool:
    """Whether ``weight`` splits into two positive even parts, by trying every split."""
    return any(
        pete % 2 == 0 and (weight - pete) % 2 == 0 for pete in range(1, weight)
    )


def watermelon_fast(weight: int) -> bool:
    """Whether ``weight`` splits into two positive even parts: even and not 2."""
    return weight % 2 == 0 and weight != 2


def random_watermelon(rng: random.Random | None = None) -> int:
    """A random watermelon weight in 1..100."""
    return _rng(rng).randint(*_WATERMELON_WEIGHT)