"""Graph exercises: cloning, point MST, course order, bipartiteness and reachability."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from math import inf

from algokit.graph import bfs, is_cyclic
from algokit.graph import is_bipartite as _two_colourable


@dataclass(eq=False)
class Node:
    """A vertex of an undirected graph holding a value and its neighbours."""

    val: int = 0
    neighbors: list[Node] = field(default_factory=list, repr=False)


def clone_graph(node: Node | None) -> Node | None:
    """Deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies = {node: Node(node.val)}
    stack = [node]
    while stack:
        original = stack.pop()
        duplicate = copies[original]
        for neighbour in original.neighbors:
            if neighbour not in copies:
                copies[neighbour] = Node(neighbour.val)
                stack.append(neighbour)
            duplicate.neighbors.append(copies[neighbour])
    return copies[node]


def min_cost_connect_points(points: Iterable[Sequence[int]]) -> int:
    """Total Manhattan length of a minimum spanning tree over the points."""
    coords = [(x, y) for x, y in points]
    if not coords:
        return 0
    pending: dict[int, float] = dict.fromkeys(range(len(coords)), inf)
    pending[0] = 0
    total = 0
    while pending:
        current = min(pending, key=pending.__getitem__)
        total += pending.pop(current)
        cx, cy = coords[current]
        for other in pending:
            ox, oy = coords[other]
            pending[other] = min(pending[other], abs(cx - ox) + abs(cy - oy))
    return int(total)


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Whether all courses can be taken; each pair is ``(course, prerequisite)``."""
    adj: list[list[int]] = [[] for _ in range(num_courses)]
    for course, prerequisite in prerequisites:
        for value in (course, prerequisite):
            if not 0 <= value < num_courses:
                raise ValueError(f"course {value} is not in 0..{num_courses - 1}")
        adj[prerequisite].append(course)
    return not is_cyclic(adj)


def is_bipartite(graph: Sequence[Iterable[int]]) -> bool:
    """Whether the undirected graph can be split into two independent sets."""
    return _two_colourable(graph)


def can_visit_all_rooms(rooms: Sequence[Iterable[int]]) -> bool:
    """Whether every room can be opened starting from room 0 with the keys found."""
    if not rooms:
        return True
    return len(bfs(rooms, 0)) == len(rooms)