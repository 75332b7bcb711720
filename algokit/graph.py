"""Graph traversals and classic graph algorithms on adjacency lists.

A graph is given as a sequence whose i-th entry lists the neighbours of
vertex i; vertices are the integers ``0 .. len(adj) - 1``.
"""

import heapq
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from math import inf

Adjacency = Sequence[Iterable[int]]
_Graph = list[tuple[int, ...]]


def _normalise(adj: Adjacency) -> _Graph:
    graph = [tuple(neighbours) for neighbours in adj]
    size = len(graph)
    for vertex, neighbours in enumerate(graph):
        for neighbour in neighbours:
            if not 0 <= neighbour < size:
                raise ValueError(
                    f"vertex {vertex} has neighbour {neighbour} outside 0..{size - 1}"
                )
    return graph


def _check_start(graph: _Graph, start: int) -> None:
    if not 0 <= start < len(graph):
        raise ValueError(f"start vertex {start} is not in a graph of {len(graph)} vertices")


def _depth_first(
    graph: Sequence[Sequence[int]], root: int, visited: set[int]
) -> Iterator[tuple[int, bool]]:
    """Yield ``(vertex, leaving)`` events of a recursive-order DFS from ``root``."""
    visited.add(root)
    yield root, False
    stack = [(root, iter(graph[root]))]
    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour not in visited:
                visited.add(neighbour)
                yield neighbour, False
                stack.append((neighbour, iter(graph[neighbour])))
                break
        else:
            stack.pop()
            yield vertex, True


def bfs(adj: Adjacency, start: int) -> list[int]:
    """Vertices reachable from ``start`` in breadth-first order."""
    graph = _normalise(adj)
    _check_start(graph, start)
    visited = {start}
    queue = deque([start])
    order = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in graph[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adj: Adjacency, start: int) -> list[int]:
    """Vertices reachable from ``start`` in recursive depth-first preorder."""
    graph = _normalise(adj)
    _check_start(graph, start)
    return [vertex for vertex, leaving in _depth_first(graph, start, set()) if not leaving]


def dfs_iterative(adj: Adjacency, start: int) -> list[int]:
    """Depth-first order using an explicit stack, marking vertices when pushed."""
    graph = _normalise(adj)
    _check_start(graph, start)
    visited = {start}
    stack = [start]
    order = []
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for neighbour in graph[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(neighbour)
    return order


def is_bipartite(adj: Adjacency) -> bool:
    """Whether the vertices can be two-coloured with every edge joining both colours.

    Edges are treated as undirected.
    """
    graph = _normalise(adj)
    undirected: list[set[int]] = [set() for _ in graph]
    for vertex, neighbours in enumerate(graph):
        for neighbour in neighbours:
            undirected[vertex].add(neighbour)
            undirected[neighbour].add(vertex)

    colour: dict[int, int] = {}
    for root in range(len(graph)):
        if root in colour:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            vertex = queue.popleft()
            for neighbour in undirected[vertex]:
                if neighbour not in colour:
                    colour[neighbour] = 1 - colour[vertex]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[vertex]:
                    return False
    return True


def is_cyclic(adj: Adjacency) -> bool:
    """Whether the directed graph contains a cycle (self-loops included)."""
    graph = _normalise(adj)
    on_path: set[int] = set()
    done: set[int] = set()
    for root in range(len(graph)):
        if root in done:
            continue
        on_path.add(root)
        stack = [(root, iter(graph[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour in on_path:
                    return True
                if neighbour not in done:
                    on_path.add(neighbour)
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
            else:
                stack.pop()
                on_path.discard(vertex)
                done.add(vertex)
    return False


def dijkstra(adj: Adjacency, start: int) -> list[float]:
    """Shortest distances from ``start`` with every edge of weight 1.

    Unreachable vertices get ``math.inf``.
    """
    graph = _normalise(adj)
    _check_start(graph, start)
    dist: list[float] = [inf] * len(graph)
    dist[start] = 0
    heap = [(0, start)]
    while heap:
        current_dist, vertex = heapq.heappop(heap)
        if current_dist > dist[vertex]:
            continue
        for neighbour in graph[vertex]:
            candidate = current_dist + 1
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return dist


def _greedy_order(
    graph: _Graph,
    start: int,
    first: tuple[int, ...],
    entry: Callable[[int, int], tuple[int, ...]],
) -> list[int]:
    heap = [first]
    visited: set[int] = set()
    order = []
    while heap:
        vertex = heapq.heappop(heap)[-1]
        if vertex in visited:
            continue
        visited.add(vertex)
        order.append(vertex)
        for neighbour in graph[vertex]:
            if neighbour not in visited:
                heapq.heappush(heap, entry(vertex, neighbour))
    return order


def kruskal(adj: Adjacency, start: int) -> list[int]:
    """Order in which unit-weight edges ``(from, to)`` add vertices to the tree from ``start``.

    Ties between equal weights are broken by the edge's source, then its target.
    """
    graph = _normalise(adj)
    _check_start(graph, start)
    return _greedy_order(
        graph, start, (0, start, start), lambda vertex, neighbour: (1, vertex, neighbour)
    )


def prims(adj: Adjacency, start: int) -> list[int]:
    """Order in which Prim's algorithm with unit weights adds vertices from ``start``.

    Ties between equal weights are broken by the smaller vertex.
    """
    graph = _normalise(adj)
    _check_start(graph, start)
    return _greedy_order(
        graph, start, (0, start), lambda vertex, neighbour: (1, neighbour)
    )


def _finish_order(graph: _Graph) -> list[int]:
    visited: set[int] = set()
    finished: list[int] = []
    for root in range(len(graph)):
        if root not in visited:
            finished.extend(
                vertex for vertex, leaving in _depth_first(graph, root, visited) if leaving
            )
    return finished


def strongly_connected_components(adj: Adjacency) -> list[list[int]]:
    """Strongly connected components of a directed graph (Kosaraju's algorithm).

    Components come in topological order of the condensed graph; each lists
    its vertices in the order they were discovered.
    """
    graph = _normalise(adj)
    transpose: list[list[int]] = [[] for _ in graph]
    for vertex, neighbours in enumerate(graph):
        for neighbour in neighbours:
            transpose[neighbour].append(vertex)

    visited: set[int] = set()
    components = []
    for root in reversed(_finish_order(graph)):
        if root not in visited:
            components.append(
                [
                    vertex
                    for vertex, leaving in _depth_first(transpose, root, visited)
                    if not leaving
                ]
            )
    return components


def topological_sort(adj: Adjacency) -> list[int]:
    """Vertices in reverse DFS finishing order: a topological order for a DAG."""
    graph = _normalise(adj)
    return list(reversed(_finish_order(graph)))