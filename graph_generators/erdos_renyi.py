import networkx as nx
import numpy as np

from min_cut.weighted_graph import WeightedGraph


def generate_er(n: int, p: float, rng: np.random.Generator, max_weight: int = 1) -> WeightedGraph:
    """
    Generates an Erdős-Rényi (G(n, p)) random graph restricted to its largest
    connected component.

    Args:
        n (int): Number of nodes before taking the largest component.
        p (float): Edge probability.
        rng (np.random.Generator): Source of randomness.
        max_weight (int): Edge weights are drawn uniformly from 1..max_weight.

    Returns:
        WeightedGraph: connected graph, nodes relabelled 0..k-1.
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    if not 0.0 <= p <= 1.0:
        raise ValueError("p must be in [0, 1]")

    matrix = np.zeros((n, n), dtype=np.int64)

    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)

    edges = rng.random(rows.size) < p
    weights = rng.integers(1, max_weight + 1, size=int(edges.sum()))
    matrix[rows[edges], cols[edges]] = weights

    # mirror the matrix to make it symmetric (undirected)
    matrix[cols[edges], rows[edges]] = weights

    # ER does not guarantee a connected graph, keep the largest component
    G = nx.from_numpy_array(matrix)
    largest_cc_nodes = max(nx.connected_components(G), key=len)
    if len(largest_cc_nodes) < 2:
        raise ValueError(f"G({n}, {p}) produced no edges; increase p")
    H = nx.convert_node_labels_to_integers(G.subgraph(largest_cc_nodes), ordering="sorted")
    return WeightedGraph.from_networkx(H)
