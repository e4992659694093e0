import numpy as np

from min_cut.weighted_graph import WeightedGraph


def generate_ba(n: int, m: int, rng: np.random.Generator, max_weight: int = 1) -> WeightedGraph:
    """
    Generates a Barabási-Albert (BA) random graph using preferential attachment.

    Args:
        n (int): Total number of nodes.
        m (int): Number of edges to attach from a new node to existing nodes.
                 The seed graph is a clique on max(m, 2) nodes.
        rng (np.random.Generator): Source of randomness.
        max_weight (int): Edge weights are drawn uniformly from 1..max_weight.

    Returns:
        WeightedGraph: connected graph on n nodes.
    """
    if m < 1:
        raise ValueError("m must be >= 1")
    m0 = max(m, 2)
    if n < m0:
        raise ValueError("n must be >= max(m, 2)")

    graph = WeightedGraph(n)
    for u in range(m0):
        for v in range(u + 1, m0):
            graph.add_edge(u, v, int(rng.integers(1, max_weight + 1)))

    # attachment is proportional to the number of incident edges, not weight
    edge_counts = np.zeros(n, dtype=np.int64)
    edge_counts[:m0] = m0 - 1

    for i in range(m0, n):
        probabilities = edge_counts[:i] / edge_counts[:i].sum()
        targets = rng.choice(i, size=m, replace=False, p=probabilities)

        for t in targets:
            graph.add_edge(i, int(t), int(rng.integers(1, max_weight + 1)))

        edge_counts[i] = m
        edge_counts[targets] += 1

    return graph
