import numpy as np
import pytest

from graph_generators.cliques import complete_graph, two_cliques


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def cliques():
    # two K4 on {0,1,2,3} and {4,5,6,7} joined by (3, 4)
    return two_cliques(4)


@pytest.fixture
def k10():
    return complete_graph(10)


def assert_valid_cut(cut, n):
    assert cut.first and cut.second
    assert not (cut.first & cut.second)
    assert cut.first | cut.second == set(range(n))
