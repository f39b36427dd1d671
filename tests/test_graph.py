from collections import Counter

import pytest

from algonotebook.graph import (
    LowestCommonAncestor,
    eulerian_path,
    strongly_connected_components,
)

PARENTS = [-1, 0, 0, 1, 1, 2, 3, 3, 5]


def ancestors(parents, node):
    chain = []
    while node != -1:
        chain.append(node)
        node = parents[node]
    return chain


def test_depth_follows_parent_links():
    lca = LowestCommonAncestor(PARENTS)
    for node, parent in enumerate(PARENTS):
        if parent == -1:
            assert lca.depth(node) == 0
        else:
            assert lca.depth(node) == lca.depth(parent) + 1


def test_lca_is_deepest_common_ancestor():
    lca = LowestCommonAncestor(PARENTS)
    n = len(PARENTS)
    for p in range(n):
        for q in range(n):
            a = lca.query(p, q)
            common = set(ancestors(PARENTS, p)) & set(ancestors(PARENTS, q))
            assert a in common
            assert all(lca.depth(c) <= lca.depth(a) for c in common)


def test_lca_on_chain():
    n = 20
    parents = [-1] + list(range(n - 1))
    lca = LowestCommonAncestor(parents)
    for p in range(n):
        for q in range(n):
            assert lca.query(p, q) == min(p, q)


def test_lca_rejects_forest():
    with pytest.raises(ValueError):
        LowestCommonAncestor([-1, -1, 0])


def edge_multiset(edges):
    return Counter(frozenset(e) for e in edges)


def test_eulerian_path_uses_each_edge_once():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2), (0, 0)]
    path = eulerian_path(5, edges, 0)
    assert path[0] == 0
    walked = list(zip(path, path[1:]))
    assert edge_multiset(walked) == edge_multiset(edges)


def test_eulerian_path_from_odd_vertex():
    edges = [(0, 1), (1, 2), (2, 0), (0, 3)]
    path = eulerian_path(4, edges, 3)
    assert path[0] == 3
    assert edge_multiset(zip(path, path[1:])) == edge_multiset(edges)


def test_eulerian_path_wrong_start_raises():
    with pytest.raises(ValueError):
        eulerian_path(4, [(0, 1), (1, 2), (2, 0), (0, 3)], 1)


def test_eulerian_path_disconnected_raises():
    with pytest.raises(ValueError):
        eulerian_path(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)], 0)


def test_scc_components_and_order():
    adj = [[1], [2], [0, 3], [4], [3]]
    comps = strongly_connected_components(adj)
    assert [set(c) for c in comps] == [{0, 1, 2}, {3, 4}]


def test_scc_partitions_vertices():
    adj = [[1], [0, 2], [3], [], [3, 5], [4]]
    comps = strongly_connected_components(adj)
    flat = [v for c in comps for v in c]
    assert sorted(flat) == list(range(len(adj)))
    assert {frozenset(c) for c in comps} == {
        frozenset({0, 1}),
        frozenset({2}),
        frozenset({3}),
        frozenset({4, 5}),
    }