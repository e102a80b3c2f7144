"""Binary search with insertion point, and N-queens backtracking."""

from collections.abc import Sequence
from typing import Any, NamedTuple

MAX_QUEENS = 8


class SearchResult(NamedTuple):
    """Outcome of a binary search.

    ``index`` is the position of the key when ``found`` is true, otherwise
    the position where the key would have to be inserted.
    """

    found: bool
    index: int


def binary_search(items: Sequence[Any], key: Any) -> SearchResult:
    """Search the ascending sequence ``items`` for ``key``."""
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if key == items[mid]:
            return SearchResult(True, mid)
        if key < items[mid]:
            hi = mid - 1
        else:
            lo = mid + 1
    return SearchResult(False, lo)


def n_queens(n: int) -> list[tuple[int, ...]]:
    """Every placement of ``n`` non-attacking queens on an ``n`` x ``n`` board.

    Each solution lists the 1-based column of the queen in rows ``1..n``.
    Solutions come in lexicographic order. Boards from 1 to 8 are supported.
    """
    if not 1 <= n <= MAX_QUEENS:
        raise ValueError(f"board size must be between 1 and {MAX_QUEENS}")
    solutions: list[tuple[int, ...]] = []
    columns: list[int] = []

    def promising(col: int) -> bool:
        row = len(columns) + 1
        return all(
            col != placed and abs(row - placed_row) != abs(col - placed)
            for placed_row, placed in enumerate(columns, start=1)
        )

    def place() -> None:
        for col in range(1, n + 1):
            if not promising(col):
                continue
            columns.append(col)
            if len(columns) == n:
                solutions.append(tuple(columns))
            else:
                place()
            columns.pop()

    place()
    return solutions