"""Solutions to small contest problems and token-stream input helpers."""

from bisect import bisect_left
from collections.abc import Callable, Iterable, Iterator, Sequence
from string import digits
from typing import TypeVar

T = TypeVar("T")

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53)
_NEIGHBOURS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx or dy]
_MINE = "*"
_EMPTY = "."


def weird_sort(values: Sequence[int], positions: Iterable[int]) -> bool:
    """Whether ``values`` can be sorted by swapping only at the given positions.

    Position ``p`` (1-based) allows swapping elements ``p`` and ``p + 1``.
    """
    items = list(values)
    n = len(items)
    allowed = set()
    for p in positions:
        if not 1 <= p < n:
            raise ValueError(f"position {p} outside 1..{n - 1}")
        allowed.add(p - 1)
    for i in range(n):
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                if j not in allowed:
                    return False
                items[j], items[j + 1] = items[j + 1], items[j]
    return True


def minesweeper_valid(grid: Sequence[str]) -> bool:
    """Whether every number and empty cell agrees with the mines around it."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    for row in grid:
        if len(row) != width:
            raise ValueError("grid rows must have equal length")
        for cell in row:
            if cell != _MINE and cell != _EMPTY and cell not in digits:
                raise ValueError(f"invalid cell {cell!r}")
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == _MINE:
                continue
            mines = sum(
                1
                for dx, dy in _NEIGHBOURS
                if 0 <= i + dx < height
                and 0 <= j + dy < width
                and grid[i + dx][j + dy] == _MINE
            )
            expected = 0 if cell == _EMPTY else int(cell)
            if mines != expected:
                return False
    return True


def next_prime(n: int) -> int:
    """The smallest prime greater than ``n``, for ``n`` below 53."""
    index = bisect_left(_SMALL_PRIMES, n + 1)
    if index == len(_SMALL_PRIMES):
        raise ValueError(f"no tabulated prime greater than {n}")
    return _SMALL_PRIMES[index]


def is_next_prime(n: int, m: int) -> bool:
    """Whether ``m`` is the prime that immediately follows ``n``."""
    return next_prime(n) == m


def answer_queries(queries: Iterable[tuple[int, int]]) -> list[int]:
    """Process set queries: ``(1, y)`` adds ``y``; any other kind asks for the
    smallest stored value not below ``y``, answered with -1 when none exists."""
    stored: list[int] = []
    answers = []
    for kind, y in queries:
        index = bisect_left(stored, y)
        if kind == 1:
            if index == len(stored) or stored[index] != y:
                stored.insert(index, y)
        else:
            answers.append(stored[index] if index < len(stored) else -1)
    return answers


def read_ints(text: str) -> Iterator[int]:
    """Yield the integers in ``text``, skipping any other characters.

    Every ``-`` met while skipping flips the sign of the next number. The
    character that ends a number is consumed along with it.
    """
    chars = iter(text)
    sign = 1
    for ch in chars:
        if ch not in digits:
            if ch == "-":
                sign = -sign
            continue
        value = int(ch)
        for ch in chars:
            if ch not in digits:
                break
            value = value * 10 + int(ch)
        yield sign * value
        sign = 1


def multiply_pairs(text: str) -> list[int]:
    """Read a count followed by that many pairs and return each pair's product."""
    numbers = read_ints(text)
    count = next(numbers, None)
    if count is None:
        raise ValueError("missing pair count")
    products = []
    for _ in range(count):
        a = next(numbers, None)
        b = next(numbers, None)
        if a is None or b is None:
            raise ValueError("input ended before all pairs were read")
        products.append(a * b)
    return products


def run_cases(text: str, solve_one: Callable[[Iterator[str]], T]) -> list[T]:
    """Read a case count, then call ``solve_one`` once per case on the token stream."""
    tokens = iter(text.split())
    first = next(tokens, None)
    if first is None:
        raise ValueError("missing case count")
    count = int(first)
    return [solve_one(tokens) for _ in range(count)]