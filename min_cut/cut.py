from typing import FrozenSet, Iterable

import numpy as np

from min_cut.supernodes import SupernodePartition
from min_cut.weighted_graph import WeightedGraph


class Cut:
    """
    Unordered pair of disjoint, nonempty vertex sets covering the graph.
    Cut(A, B) == Cut(B, A).
    """
    __slots__ = ['first', 'second']

    def __init__(self, first: Iterable[int], second: Iterable[int]):
        self.first: FrozenSet[int] = frozenset(first)
        self.second: FrozenSet[int] = frozenset(second)
        assert self.first and self.second, "cut sides must be nonempty"
        assert not (self.first & self.second), "cut sides must be disjoint"

    @classmethod
    def from_partition(cls, partition: SupernodePartition) -> 'Cut':
        live = partition.live_slots()
        assert len(live) == 2, f"a cut needs exactly 2 live supernodes, got {len(live)}"
        return cls(partition.members[live[0]], partition.members[live[1]])

    def __iter__(self):
        yield self.first
        yield self.second

    def __eq__(self, other):
        if not isinstance(other, Cut):
            return NotImplemented
        return {self.first, self.second} == {other.first, other.second}

    def __hash__(self):
        return hash(frozenset((self.first, self.second)))

    def __repr__(self):
        return f"Cut({sorted(self.first)} | {sorted(self.second)})"

    @property
    def vertices(self) -> FrozenSet[int]:
        return self.first | self.second

    def smaller_side(self) -> FrozenSet[int]:
        return min(self, key=lambda side: (len(side), sorted(side)))

    def covers(self, n: int) -> bool:
        return self.vertices == frozenset(range(n))


def cut_weight(original_graph: WeightedGraph, cut: Cut) -> int:
    """
    Total weight of original edges crossing the cut.

    Always evaluated against the uncontracted graph so that cuts produced by
    independent contraction runs are comparable.
    """
    assert cut.covers(original_graph.size), "cut does not cover the graph's vertices"
    rows = sorted(cut.first)
    cols = sorted(cut.second)
    return int(original_graph.matrix[np.ix_(rows, cols)].sum())
