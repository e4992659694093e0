import logging
from typing import Optional

import numpy as np

from min_cut.contraction import ContractionStats, check_live_degrees, contract, make_rng
from min_cut.cut import Cut
from min_cut.supernodes import SupernodePartition
from min_cut.weighted_graph import WeightedGraph

logger = logging.getLogger('min_cut')


def karger_min_cut(graph: WeightedGraph,
                   rng: Optional[np.random.Generator] = None,
                   stats: Optional[ContractionStats] = None) -> Cut:
    """
    One run of Karger's contraction algorithm, O(n^2).

    Contracts random edges until two supernodes remain and returns them as
    the cut. A single run returns a minimum cut with probability at least
    1 / C(n, 2); keeping the lightest of repeated runs is up to the caller.
    The input graph is not modified.
    """
    rng = make_rng(rng)
    g = graph.copy()
    partition = SupernodePartition(g.size)

    while partition.num_live > 2:
        contract(g, partition, rng, stats)
    check_live_degrees(g, partition)

    cut = Cut.from_partition(partition)
    logger.debug("karger cut %s", cut)
    return cut
