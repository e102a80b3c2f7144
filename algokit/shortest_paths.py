"""Weighted shortest paths and minimum spanning tree weight on undirected graphs."""

import heapq
import math
from collections import deque
from collections.abc import Iterable

Edge = tuple[int, int, int]


def _weighted_graph(
    nodes: int, edges: Iterable[Edge], first: int
) -> dict[int, list[tuple[int, int]]]:
    """Undirected adjacency for nodes ``first..first+nodes-1``; weights must be >= 0."""
    if nodes < 0:
        raise ValueError("node count must be non-negative")
    graph: dict[int, list[tuple[int, int]]] = {
        node: [] for node in range(first, first + nodes)
    }
    for u, v, w in edges:
        for end in (u, v):
            if end not in graph:
                raise ValueError(f"node {end} outside {first}..{first + nodes - 1}")
        if w < 0:
            raise ValueError(f"negative edge weight {w}")
        graph[u].append((v, w))
        graph[v].append((u, w))
    return graph


def _require(graph: dict, node: int) -> None:
    if node not in graph:
        raise ValueError(f"unknown node {node}")


def relax_bfs(nodes: int, edges: Iterable[Edge], source: int) -> list[int | None]:
    """Distances on nodes ``0..nodes-1`` by FIFO edge relaxation; None if unreachable."""
    graph = _weighted_graph(nodes, edges, 0)
    _require(graph, source)
    dist: list[int | None] = [None] * nodes
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, w in graph[u]:
            candidate = dist[u] + w
            if dist[v] is None or candidate < dist[v]:
                dist[v] = candidate
                queue.append(v)
    return dist


def _dijkstra(
    graph: dict[int, list[tuple[int, int]]], source: int
) -> tuple[dict[int, int | None], dict[int, int | None]]:
    dist: dict[int, int | None] = dict.fromkeys(graph)
    parent: dict[int, int | None] = dict.fromkeys(graph)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in graph[u]:
            candidate = d + w
            if dist[v] is None or candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u
                heapq.heappush(heap, (candidate, v))
    return dist, parent


def dijkstra(nodes: int, edges: Iterable[Edge], source: int) -> dict[int, int | None]:
    """Distances from ``source`` to nodes ``1..nodes``; None if unreachable."""
    graph = _weighted_graph(nodes, edges, 1)
    _require(graph, source)
    return _dijkstra(graph, source)[0]


def shortest_path(
    nodes: int, edges: Iterable[Edge], source: int, target: int
) -> list[int] | None:
    """A lightest path from ``source`` to ``target`` on nodes ``1..nodes``, or None."""
    graph = _weighted_graph(nodes, edges, 1)
    _require(graph, source)
    _require(graph, target)
    dist, parent = _dijkstra(graph, source)
    if dist[target] is None:
        return None
    path = [target]
    while path[-1] != source:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def floyd_warshall(nodes: int, edges: Iterable[Edge]) -> list[list[int | None]]:
    """All-pairs distances on nodes ``0..nodes-1``.

    A repeated edge replaces the earlier weight. The diagonal is not seeded
    with zero, so ``d[i][i]`` is the lightest closed walk through ``i``.
    Unreachable pairs are None.
    """
    if nodes < 0:
        raise ValueError("node count must be non-negative")
    d = [[math.inf] * nodes for _ in range(nodes)]
    for u, v, w in edges:
        for end in (u, v):
            if not 0 <= end < nodes:
                raise ValueError(f"node {end} outside 0..{nodes - 1}")
        d[u][v] = d[v][u] = w
    for k in range(nodes):
        row_k = d[k]
        for row in d:
            via = row[k]
            if via == math.inf:
                continue
            for j, through in enumerate(row_k):
                if via + through < row[j]:
                    row[j] = via + through
    return [[None if x == math.inf else x for x in row] for row in d]


def prim_mst_weight(nodes: int, edges: Iterable[Edge], source: int) -> int:
    """Weight of a minimum spanning tree of the component holding ``source``."""
    graph = _weighted_graph(nodes, edges, 0)
    _require(graph, source)
    taken = set()
    total = 0
    heap = [(0, source)]
    while heap:
        w, u = heapq.heappop(heap)
        if u in taken:
            continue
        taken.add(u)
        total += w
        for v, weight in graph[u]:
            if v not in taken:
                heapq.heappush(heap, (weight, v))
    return total