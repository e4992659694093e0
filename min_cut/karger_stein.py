import logging
from typing import Optional

import numpy as np

from min_cut.contraction import ContractionStats, check_live_degrees, contract, make_rng
from min_cut.cut import Cut, cut_weight
from min_cut.supernodes import SupernodePartition
from min_cut.weighted_graph import WeightedGraph

logger = logging.getLogger('min_cut')


def karger_stein_recursive(original_graph: WeightedGraph,
                           graph: WeightedGraph,
                           partition: SupernodePartition,
                           rng: np.random.Generator,
                           stats: Optional[ContractionStats] = None,
                           depth: int = 0) -> Cut:
    """
    Recursive step of Karger-Stein.

    Contracts the current graph down to n / sqrt(2) supernodes, then solves
    two independent copies of the result and keeps the lighter cut, measured
    on original_graph. graph and partition are consumed by the call.
    """
    n = partition.num_live

    if n == 2:
        check_live_degrees(graph, partition)
        return Cut.from_partition(partition)

    threshold = n / np.sqrt(2)
    while partition.num_live > threshold:
        contract(graph, partition, rng, stats)

    logger.debug("depth %d: contracted %d -> %d supernodes", depth, n, partition.num_live)

    # each branch gets its own matrix, degrees and supernodes
    if stats is not None:
        stats.branches += 2
    cut1 = karger_stein_recursive(original_graph, graph.copy(), partition.copy(),
                                  rng, stats, depth + 1)
    cut2 = karger_stein_recursive(original_graph, graph.copy(), partition.copy(),
                                  rng, stats, depth + 1)

    w1 = cut_weight(original_graph, cut1)
    w2 = cut_weight(original_graph, cut2)
    return cut1 if w1 <= w2 else cut2


def karger_stein_min_cut(graph: WeightedGraph,
                         rng: Optional[np.random.Generator] = None,
                         stats: Optional[ContractionStats] = None) -> Cut:
    """
    Karger-Stein minimum cut, O(n^2 log n) work per call with success
    probability Omega(1 / log n). The input graph is not modified.
    """
    rng = make_rng(rng)
    partition = SupernodePartition(graph.size)
    cut = karger_stein_recursive(graph, graph.copy(), partition, rng, stats)
    logger.debug("karger-stein cut %s", cut)
    return cut
