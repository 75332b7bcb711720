from math import inf

import pytest

from algokit.graph import (
    bfs,
    dfs,
    dfs_iterative,
    dijkstra,
    is_bipartite,
    is_cyclic,
    kruskal,
    prims,
    strongly_connected_components,
    topological_sort,
)

SAMPLE = [[1, 2], [3], [4], [], []]
CYCLE5 = [[1], [2], [3], [4], [0]]
TWO_SCCS = [[1], [2], [0, 3], [4], [3]]


def _edges(adj):
    return [(u, v) for u, neighbours in enumerate(adj) for v in neighbours]


def _reachable(adj, start):
    seen = {start}
    frontier = [start]
    while frontier:
        vertex = frontier.pop()
        for neighbour in adj[vertex]:
            if neighbour not in seen:
                seen.add(neighbour)
                frontier.append(neighbour)
    return seen


def test_bfs_sample_order():
    assert bfs(SAMPLE, 0) == [0, 1, 2, 3, 4]


def test_bfs_visits_each_reachable_vertex_once():
    adj = [[1], [], [0]]
    order = bfs(adj, 0)
    assert order[0] == 0
    assert len(order) == len(set(order))
    assert set(order) == _reachable(adj, 0)


def test_bfs_levels_do_not_decrease():
    order = bfs(TWO_SCCS, 0)
    dist = dijkstra(TWO_SCCS, 0)
    levels = [dist[v] for v in order]
    assert levels == sorted(levels)


@pytest.mark.parametrize("func", [bfs, dfs, dfs_iterative, dijkstra, kruskal, prims])
def test_start_out_of_range_is_rejected(func):
    with pytest.raises(ValueError):
        func(SAMPLE, 5)


@pytest.mark.parametrize("func", [bfs, dfs, dfs_iterative])
def test_negative_start_is_rejected(func):
    with pytest.raises(ValueError):
        func(SAMPLE, -1)


def test_neighbour_out_of_range_is_rejected():
    with pytest.raises(ValueError):
        topological_sort([[1], [7]])


def test_dfs_sample_order():
    assert dfs(SAMPLE, 0) == [0, 1, 3, 2, 4]


def test_dfs_each_vertex_follows_a_visited_predecessor():
    order = dfs(TWO_SCCS, 0)
    assert set(order) == _reachable(TWO_SCCS, 0)
    for index, vertex in enumerate(order[1:], start=1):
        assert any(vertex in TWO_SCCS[earlier] for earlier in order[:index])


def test_dfs_handles_long_paths():
    size = 5000
    path = [[i + 1] for i in range(size - 1)] + [[]]
    assert dfs(path, 0) == list(range(size))
    assert topological_sort(path) == list(range(size))


def test_dfs_iterative_covers_same_vertices_in_other_order():
    recursive = dfs(SAMPLE, 0)
    iterative = dfs_iterative(SAMPLE, 0)
    assert sorted(iterative) == sorted(recursive)
    assert iterative[0] == 0
    assert iterative != recursive


def test_is_bipartite_even_cycle():
    assert is_bipartite([[1], [2], [3], [0]]) is True


def test_is_bipartite_odd_cycle():
    assert is_bipartite(CYCLE5) is False


def test_is_bipartite_self_loop():
    assert is_bipartite([[0]]) is False


def test_is_bipartite_ignores_edge_direction():
    assert is_bipartite([[], [0, 2], []]) is True


def test_is_bipartite_empty_graph():
    assert is_bipartite([]) is True


def test_is_cyclic_tree_has_no_cycle():
    assert is_cyclic(SAMPLE) is False


def test_is_cyclic_directed_cycle():
    assert is_cyclic(CYCLE5) is True


def test_is_cyclic_self_loop():
    assert is_cyclic([[0]]) is True


def test_is_cyclic_diamond_is_acyclic():
    assert is_cyclic([[1, 2], [3], [3], []]) is False


def test_dijkstra_distances_are_consistent():
    dist = dijkstra(TWO_SCCS, 0)
    assert dist[0] == 0
    for u, v in _edges(TWO_SCCS):
        assert dist[v] <= dist[u] + 1
    for v in range(1, len(TWO_SCCS)):
        assert any(dist[u] + 1 == dist[v] for u, w in _edges(TWO_SCCS) if w == v)


def test_dijkstra_unreachable_is_infinite():
    assert dijkstra([[], [0]], 0) == [0, inf]


def test_prims_and_kruskal_visit_all_reachable():
    assert sorted(prims(SAMPLE, 0)) == list(range(5))
    assert sorted(kruskal(SAMPLE, 0)) == list(range(5))


def test_prims_breaks_ties_by_vertex():
    assert prims([[3, 1], [2], [], []], 0) == [0, 1, 2, 3]


def test_kruskal_breaks_ties_by_edge():
    assert kruskal([[3, 1], [2], [], []], 0) == [0, 1, 3, 2]


def test_scc_single_cycle_is_one_component():
    components = strongly_connected_components(CYCLE5)
    assert len(components) == 1
    assert sorted(components[0]) == list(range(5))


def test_scc_dag_gives_singletons():
    components = strongly_connected_components(SAMPLE)
    assert sorted(c[0] for c in components) == list(range(5))
    assert all(len(c) == 1 for c in components)


def test_scc_components_are_mutually_reachable_and_partition():
    components = strongly_connected_components(TWO_SCCS)
    flat = [v for component in components for v in component]
    assert sorted(flat) == list(range(len(TWO_SCCS)))
    assert {frozenset(c) for c in components} == {frozenset({0, 1, 2}), frozenset({3, 4})}
    for component in components:
        for u in component:
            assert set(component) <= _reachable(TWO_SCCS, u)


def test_scc_order_follows_condensation():
    components = strongly_connected_components(TWO_SCCS)
    index = {v: i for i, c in enumerate(components) for v in c}
    for u, v in _edges(TWO_SCCS):
        assert index[u] <= index[v]


def test_topological_sort_respects_edges():
    adj = [[1, 2], [3], [3, 4], [], [], [0]]
    order = topological_sort(adj)
    assert sorted(order) == list(range(len(adj)))
    position = {v: i for i, v in enumerate(order)}
    for u, v in _edges(adj):
        assert position[u] < position[v]


def test_topological_sort_empty_graph():
    assert topological_sort([]) == []