"""Unweighted graph traversals: BFS, DFS, reachability and tree DP."""

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum

Adjacency = Mapping[int, Sequence[int]]


class Color(IntEnum):
    """Visit state of a node during a traversal."""

    WHITE = 1
    GRAY = 2
    BLACK = 3


@dataclass
class BfsResult:
    """Colours, hop distances and BFS-tree parents from one source."""

    source: int
    color: dict[int, Color]
    dist: dict[int, int | None]
    parent: dict[int, int | None]


@dataclass
class DfsResult:
    """Colours, discovery and finish times, and DFS-forest parents."""

    color: dict[int, Color]
    discovered: dict[int, int]
    finished: dict[int, int]
    parent: dict[int, int | None]


def build_adjacency(
    nodes: int, edges: Iterable[tuple[int, int]], directed: bool = False
) -> dict[int, list[int]]:
    """Build an adjacency list for nodes ``1..nodes`` in edge order."""
    if nodes < 0:
        raise ValueError("node count must be non-negative")
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, nodes + 1)}
    for u, v in edges:
        for end in (u, v):
            if end not in adjacency:
                raise ValueError(f"node {end} outside 1..{nodes}")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def _require_node(adjacency: Adjacency, node: int) -> None:
    if node not in adjacency:
        raise ValueError(f"unknown node {node}")


def bfs(adjacency: Adjacency, source: int) -> BfsResult:
    """Breadth-first search; unreached nodes keep no distance and no parent."""
    _require_node(adjacency, source)
    color = dict.fromkeys(adjacency, Color.WHITE)
    dist: dict[int, int | None] = dict.fromkeys(adjacency)
    parent: dict[int, int | None] = dict.fromkeys(adjacency)
    color[source] = Color.GRAY
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adjacency[u]:
            if color[v] is Color.WHITE:
                color[v] = Color.GRAY
                dist[v] = dist[u] + 1
                parent[v] = u
                queue.append(v)
        color[u] = Color.BLACK
    return BfsResult(source, color, dist, parent)


def bfs_path(result: BfsResult, source: int, target: int) -> list[int]:
    """Follow BFS parents from ``target`` back to ``source``; empty if unreachable."""
    path = []
    node = target
    while node != source:
        previous = result.parent.get(node)
        if previous is None:
            return []
        path.append(node)
        node = previous
    path.append(source)
    path.reverse()
    return path


def dfs(adjacency: Adjacency) -> DfsResult:
    """Depth-first search over every node in ascending order, with timestamps."""
    color = dict.fromkeys(adjacency, Color.WHITE)
    discovered: dict[int, int] = {}
    finished: dict[int, int] = {}
    parent: dict[int, int | None] = dict.fromkeys(adjacency)
    time = 0
    for root in sorted(adjacency):
        if color[root] is not Color.WHITE:
            continue
        color[root] = Color.GRAY
        time += 1
        discovered[root] = time
        stack = [(root, iter(adjacency[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if color[v] is Color.WHITE:
                    parent[v] = u
                    color[v] = Color.GRAY
                    time += 1
                    discovered[v] = time
                    stack.append((v, iter(adjacency[v])))
                    break
            else:
                stack.pop()
                color[u] = Color.BLACK
                time += 1
                finished[u] = time
    return DfsResult(color, discovered, finished, parent)


def reachable(adjacency: Adjacency, start: int) -> set[int]:
    """Every node reachable from ``start``, ``start`` included."""
    _require_node(adjacency, start)
    seen = {start}
    stack = [start]
    while stack:
        u = stack.pop()
        for v in adjacency[u]:
            if v not in seen:
                seen.add(v)
                stack.append(v)
    return seen


def bfs_order_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """BFS visiting order over a 0-indexed 0/1 adjacency matrix."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start {start} outside 0..{size - 1}")
    seen = {start}
    order = []
    queue = deque([start])
    while queue:
        x = queue.popleft()
        order.append(x)
        for i, linked in enumerate(matrix[x]):
            if linked == 1 and i not in seen:
                seen.add(i)
                queue.append(i)
    return order


def bfs_distances(
    nodes: int, edges: Iterable[tuple[int, int]], start: int
) -> list[int]:
    """Hop distances from ``start`` over directed edges on nodes ``1..nodes``.

    Entry ``i`` holds the distance of node ``i + 1``; unreachable nodes get -1.
    """
    result = bfs(build_adjacency(nodes, edges, directed=True), start)
    return [
        -1 if result.dist[node] is None else result.dist[node]
        for node in range(1, nodes + 1)
    ]


def max_independent_set(nodes: int, edges: Iterable[tuple[int, int]]) -> int:
    """Size of a maximum independent set of a forest on nodes ``1..nodes``."""
    adjacency = build_adjacency(nodes, edges)
    visited: set[int] = set()
    total = 0
    for root in range(1, nodes + 1):
        if root in visited:
            continue
        parent = {root: 0}
        order = []
        visited.add(root)
        stack = [root]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in adjacency[u]:
                if v == parent[u]:
                    continue
                if v in visited:
                    raise ValueError("graph is not a forest")
                visited.add(v)
                parent[v] = u
                stack.append(v)
        without = dict.fromkeys(order, 0)
        taken = dict.fromkeys(order, 1)
        for u in reversed(order):
            p = parent[u]
            if p:
                without[p] += max(without[u], taken[u])
                taken[p] += without[u]
        total += max(without[root], taken[root])
    return total