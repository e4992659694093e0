from min_cut.weighted_graph import WeightedGraph


def complete_graph(n: int, weight: int = 1) -> WeightedGraph:
    """K_n; every singleton {v} is a minimum cut of weight (n - 1) * weight."""
    graph = WeightedGraph(n)
    for u in range(n):
        for v in range(u + 1, n):
            graph.add_edge(u, v, weight)
    return graph


def two_cliques(k: int, bridge_weight: int = 1) -> WeightedGraph:
    """
    Two copies of K_k on {0..k-1} and {k..2k-1} joined by the single edge
    (k-1, k). For k >= 2 and bridge_weight < k - 1 the bridge is the unique
    minimum cut.
    """
    if k < 1:
        raise ValueError("k must be >= 1")

    graph = WeightedGraph(2 * k)
    for offset in (0, k):
        for u in range(k):
            for v in range(u + 1, k):
                graph.add_edge(offset + u, offset + v)
    graph.add_edge(k - 1, k, bridge_weight)
    return graph


def bridge_cut(k: int):
    """Vertex sets of the bridge cut of two_cliques(k)."""
    return set(range(k)), set(range(k, 2 * k))
