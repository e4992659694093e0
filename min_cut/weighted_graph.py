import networkx as nx
import numpy as np

from min_cut.errors import InvalidGraph


class WeightedGraph:
    """
    Undirected multigraph stored as a symmetric (n x n) integer adjacency
    matrix plus the vector of weighted degrees.

    matrix[i, j] is the number (or total weight) of parallel edges between
    slots i and j. The diagonal is always zero and degrees[i] is always the
    sum of row i.
    """
    __slots__ = ['matrix', 'degrees']

    def __init__(self, n: int):
        if n < 2:
            raise InvalidGraph(f"a graph needs at least 2 vertices, got {n}")
        self.matrix = np.zeros((n, n), dtype=np.int64)
        self.degrees = np.zeros(n, dtype=np.int64)

    @classmethod
    def build(cls, n: int) -> 'WeightedGraph':
        return cls(n)

    @classmethod
    def from_matrix(cls, matrix) -> 'WeightedGraph':
        """
        Validates and copies an adjacency matrix.

        Args:
            matrix: (n, n) array-like of nonnegative integer weights,
                    symmetric with a zero diagonal. Float matrices (e.g. from
                    nx.to_numpy_array) are accepted if integer valued.

        Returns:
            WeightedGraph: a graph owning its own copy of the matrix.
        """
        arr = np.asarray(matrix)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise InvalidGraph(f"adjacency matrix must be square, got shape {arr.shape}")
        if not np.issubdtype(arr.dtype, np.number) or np.issubdtype(arr.dtype, np.complexfloating):
            raise InvalidGraph(f"adjacency matrix must be numeric, got dtype {arr.dtype}")
        if not np.all(np.isfinite(arr)) or not np.array_equal(arr, np.round(arr)):
            raise InvalidGraph("edge weights must be integers")
        if np.any(arr < 0):
            raise InvalidGraph("edge weights must be nonnegative")
        if not np.array_equal(arr, arr.T):
            raise InvalidGraph("adjacency matrix must be symmetric")
        if np.any(np.diag(arr) != 0):
            raise InvalidGraph("self-loops are not allowed")

        graph = cls(arr.shape[0])
        graph.matrix[:, :] = arr.astype(np.int64)
        graph.degrees[:] = graph.matrix.sum(axis=1)
        return graph

    @classmethod
    def from_edges(cls, n: int, edges) -> 'WeightedGraph':
        """Builds a graph from (u, v) or (u, v, weight) tuples."""
        graph = cls(n)
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    @classmethod
    def from_networkx(cls, G: nx.Graph, weight: str = 'weight') -> 'WeightedGraph':
        """
        Nodes are relabelled 0..n-1 in sorted order. Parallel edges of a
        multigraph are summed and self-loops are dropped, since neither
        changes which cuts are minimal.
        """
        H = G.copy()
        H.remove_edges_from(list(nx.selfloop_edges(H)))
        nodelist = sorted(H.nodes())
        return cls.from_matrix(nx.to_numpy_array(H, nodelist=nodelist, weight=weight))

    def to_networkx(self) -> nx.Graph:
        return nx.from_numpy_array(self.matrix)

    @property
    def size(self) -> int:
        return self.matrix.shape[0]

    def __len__(self):
        return self.size

    def __repr__(self):
        return f"WeightedGraph(n={self.size}, total_weight={self.total_weight()})"

    def _check_slot(self, i: int):
        if not 0 <= i < self.size:
            raise InvalidGraph(f"vertex {i} out of range for a graph of size {self.size}")

    def add_edge(self, i: int, j: int, weight: int = 1):
        # repeated calls accumulate parallel edges
        self._check_slot(i)
        self._check_slot(j)
        if i == j:
            raise InvalidGraph(f"self-loop on vertex {i} is not allowed")
        if weight < 0 or int(weight) != weight:
            raise InvalidGraph(f"edge weight must be a nonnegative integer, got {weight}")

        weight = int(weight)
        self.matrix[i, j] += weight
        self.matrix[j, i] += weight
        self.degrees[i] += weight
        self.degrees[j] += weight

    def degree(self, i: int) -> int:
        return int(self.degrees[i])

    def weight(self, i: int, j: int) -> int:
        return int(self.matrix[i, j])

    def total_weight(self) -> int:
        return int(np.triu(self.matrix, k=1).sum())

    def is_connected(self) -> bool:
        return nx.is_connected(self.to_networkx())

    def degrees_consistent(self) -> bool:
        return np.array_equal(self.degrees, self.matrix.sum(axis=1))

    def copy(self) -> 'WeightedGraph':
        clone = WeightedGraph.__new__(WeightedGraph)
        clone.matrix = self.matrix.copy()
        clone.degrees = self.degrees.copy()
        return clone

    def merge_slots(self, i: int, j: int) -> int:
        """
        Folds slot j into slot i and isolates j. Parallel edges are kept as
        accumulated weight so later draws see contracted super-edges with the
        right multiplicity. The i-j edges become internal and are dropped.

        Returns:
            int: the weight that was shared between i and j.
        """
        shared = int(self.matrix[i, j])

        # O(n) fold column j into column i, then row j into row i
        self.matrix[:, i] += self.matrix[:, j]
        self.matrix[i, :] += self.matrix[j, :]

        # O(n) isolate j and drop the self-loop created on i
        self.matrix[j, :] = 0
        self.matrix[:, j] = 0
        self.matrix[i, i] = 0

        # the i-j weight was counted in both old degrees
        self.degrees[i] += self.degrees[j] - 2 * shared
        self.degrees[j] = 0
        return shared
