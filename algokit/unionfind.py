"""Weighted quick-union disjoint sets."""


class UnionFind:
    """Disjoint sets over ``0..size-1`` that merge the smaller tree under the larger."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._size = [1] * size
        self._components = size

    def _check(self, p: int) -> None:
        if not 0 <= p < len(self._parent):
            raise IndexError(f"element {p} outside 0..{len(self._parent) - 1}")

    def find(self, p: int) -> int:
        """Root of the set holding ``p``."""
        self._check(p)
        while p != self._parent[p]:
            p = self._parent[p]
        return p

    def connected(self, p: int, q: int) -> bool:
        """True when ``p`` and ``q`` are in the same set."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """Merge the sets of ``p`` and ``q``; False if they were already one."""
        i, j = self.find(p), self.find(q)
        if i == j:
            return False
        if self._size[i] < self._size[j]:
            i, j = j, i
        self._parent[j] = i
        self._size[i] += self._size[j]
        self._components -= 1
        return True

    def count(self) -> int:
        """Number of disjoint sets."""
        return self._components