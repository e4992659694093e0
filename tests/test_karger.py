import networkx as nx
import numpy as np
import pytest

from benchmarking import repeated_min_cut
from conftest import assert_valid_cut
from graph_generators.erdos_renyi import generate_er
from min_cut.contraction import ContractionStats
from min_cut.cut import Cut, cut_weight
from min_cut.errors import DegenerateGraph
from min_cut.karger import karger_min_cut
from min_cut.weighted_graph import WeightedGraph


@pytest.mark.parametrize("seed", range(5))
def test_returns_a_partition_of_the_vertices(seed):
    rng = np.random.default_rng(seed)
    g = generate_er(15, 0.3, rng, max_weight=5)
    cut = karger_min_cut(g, rng)
    assert_valid_cut(cut, g.size)


def test_does_not_modify_input(cliques, rng):
    before = cliques.matrix.copy()
    degrees = cliques.degrees.copy()
    karger_min_cut(cliques, rng)
    assert np.array_equal(cliques.matrix, before)
    assert np.array_equal(cliques.degrees, degrees)


def test_deterministic_under_fixed_seed(cliques):
    cuts = [karger_min_cut(cliques, np.random.default_rng(11)) for _ in range(3)]
    assert cuts[0] == cuts[1] == cuts[2]


def test_contracts_n_minus_two_times(k10, rng):
    stats = ContractionStats()
    karger_min_cut(k10, rng, stats)
    assert stats.contractions == 8
    assert stats.branches == 0


def test_two_vertices_need_no_contraction(rng):
    g = WeightedGraph.from_edges(2, [(0, 1, 3)])
    stats = ContractionStats()
    assert karger_min_cut(g, rng, stats) == Cut([0], [1])
    assert stats.contractions == 0


def test_repetition_finds_bridge(cliques, rng):
    cut, weight = repeated_min_cut(karger_min_cut, cliques, 300, rng)
    assert weight == 1
    assert cut == Cut([0, 1, 2, 3], [4, 5, 6, 7])


def test_complete_graph(k10, rng):
    for _ in range(50):
        cut = karger_min_cut(k10, rng)
        w = cut_weight(k10, cut)
        # K_10 cut weight is |A| * |B|
        assert w == len(cut.first) * len(cut.second)
        assert w >= 9

    cut, weight = repeated_min_cut(karger_min_cut, k10, 100, rng)
    assert weight == 9
    assert len(cut.smaller_side()) == 1


def test_matches_stoer_wagner(rng):
    g = generate_er(10, 0.4, rng, max_weight=4)
    true_value, _ = nx.stoer_wagner(g.to_networkx(), weight='weight')
    _, weight = repeated_min_cut(karger_min_cut, g, 500, rng)
    assert weight == true_value


def test_disconnected_graph_raises(rng):
    g = WeightedGraph.from_edges(4, [(0, 1), (2, 3)])
    with pytest.raises(DegenerateGraph):
        karger_min_cut(g, rng)


def test_default_rng(cliques):
    assert_valid_cut(karger_min_cut(cliques), cliques.size)


def test_two_vertices_without_an_edge_raise(rng):
    with pytest.raises(DegenerateGraph):
        karger_min_cut(WeightedGraph(2), rng)
