import logging
from typing import Optional, Tuple

import numpy as np

from min_cut.errors import ContractionStalled, DegenerateGraph
from min_cut.supernodes import SupernodePartition
from min_cut.weighted_graph import WeightedGraph

logger = logging.getLogger('min_cut')

# bound on neighbour redraws that land on the sampled slot itself
MAX_REDRAWS = 100


class ContractionStats:
    __slots__ = ['contractions', 'redraws', 'branches']

    def __init__(self):
        self.contractions = 0
        self.redraws = 0
        self.branches = 0

    def __repr__(self):
        return (f"ContractionStats(contractions={self.contractions}, "
                f"redraws={self.redraws}, branches={self.branches})")


def make_rng(seed=None) -> np.random.Generator:
    """Accepts a Generator (returned as is), an int seed or None."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def sample_proportional(weights: np.ndarray, rng: np.random.Generator) -> int:
    """
    Draws index k with probability weights[k] / sum(weights).
    O(n) cumulative sum rebuilt on every call; exact for integer weights.
    """
    cumulative = np.cumsum(weights)
    total = int(cumulative[-1])
    if total <= 0:
        raise DegenerateGraph("cannot sample from an all-zero weight vector")
    r = rng.integers(total)
    return int(np.searchsorted(cumulative, r, side='right'))


def check_live_degrees(graph: WeightedGraph, partition: SupernodePartition):
    """Raises DegenerateGraph if a live supernode has no incident weight."""
    live = np.fromiter((bool(group) for group in partition.members),
                       dtype=bool, count=len(partition))
    isolated = np.flatnonzero(live & (graph.degrees == 0))
    if isolated.size > 0:
        raise DegenerateGraph(
            f"supernode {int(isolated[0])} has no incident edges while "
            f"{partition.num_live} supernodes remain; the input graph is disconnected")


def contract(graph: WeightedGraph,
             partition: SupernodePartition,
             rng: np.random.Generator,
             stats: Optional[ContractionStats] = None,
             max_redraws: int = MAX_REDRAWS) -> Tuple[int, int]:
    """
    Contracts one random edge, chosen with probability proportional to its
    weight, mutating graph and partition in place.

    Args:
        graph: contracted graph of the current run (matrix and degrees).
        partition: supernodes of the current run, same slot indexing.
        rng: source of randomness, advanced by the draws made here.
        stats: optional counters updated in place.
        max_redraws: how many times the neighbour draw may hit i itself.

    Returns:
        (i, j): j was merged into i.
    """
    if partition.num_live < 2:
        raise DegenerateGraph("nothing left to contract")
    check_live_degrees(graph, partition)

    # O(n) pick a random edge (i, j) with probability W[i, j] / total weight
    i = sample_proportional(graph.degrees, rng)
    for _ in range(max_redraws + 1):
        j = sample_proportional(graph.matrix[i], rng)
        if j != i:
            break
        if stats is not None:
            stats.redraws += 1
    else:
        raise ContractionStalled(
            f"neighbour draw for slot {i} returned the slot itself {max_redraws + 1} times")

    # O(n) fold j into i, O(1) degree and supernode bookkeeping
    shared = graph.merge_slots(i, j)
    partition.merge(i, j)
    assert graph.degrees[j] == 0 and graph.matrix[i, i] == 0

    if stats is not None:
        stats.contractions += 1
    logger.debug("merged %d into %d (shared weight %d), %d supernodes left",
                 j, i, shared, partition.num_live)
    return i, j
