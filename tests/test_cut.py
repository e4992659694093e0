import itertools

import numpy as np
import pytest

from min_cut.cut import Cut, cut_weight
from min_cut.supernodes import SupernodePartition
from min_cut.weighted_graph import WeightedGraph


def brute_force_weight(graph, cut):
    return sum(graph.weight(u, v) for u in cut.first for v in cut.second)


def test_cut_is_unordered():
    a = Cut([0, 1], [2, 3])
    b = Cut({3, 2}, (1, 0))

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Cut([0], [1, 2, 3])


def test_cut_sides_must_be_valid():
    with pytest.raises(AssertionError):
        Cut([], [0, 1])
    with pytest.raises(AssertionError):
        Cut([0, 1], [1, 2])


def test_from_partition():
    p = SupernodePartition(4)
    p.merge(0, 2)
    p.merge(1, 3)
    assert Cut.from_partition(p) == Cut([0, 2], [1, 3])


def test_from_partition_needs_two_live_slots():
    with pytest.raises(AssertionError):
        Cut.from_partition(SupernodePartition(3))


def test_smaller_side():
    assert Cut([4, 5, 6], [1]).smaller_side() == {1}


def test_bridge_cut_weight(cliques):
    bridge = Cut([0, 1, 2, 3], [4, 5, 6, 7])
    assert cut_weight(cliques, bridge) == 1
    assert cut_weight(cliques, Cut([0], range(1, 8))) == 3
    assert cut_weight(cliques, Cut([3], [0, 1, 2, 4, 5, 6, 7])) == 4


def test_cut_weight_is_symmetric_and_pure(rng):
    m = rng.integers(0, 5, size=(7, 7))
    m = np.triu(m, k=1)
    g = WeightedGraph.from_matrix(m + m.T)
    before = g.matrix.copy()

    for size in range(1, 7):
        for side in itertools.combinations(range(7), size):
            rest = [v for v in range(7) if v not in side]
            w = cut_weight(g, Cut(side, rest))
            assert w == cut_weight(g, Cut(rest, side))
            assert w == cut_weight(g, Cut(side, rest))
            assert w == brute_force_weight(g, Cut(side, rest))

    assert np.array_equal(g.matrix, before)


def test_cut_must_cover_graph(cliques):
    with pytest.raises(AssertionError):
        cut_weight(cliques, Cut([0, 1], [2, 3]))
