class MinCutError(Exception):
    """Base class for errors raised by the contraction algorithms."""


class InvalidGraph(MinCutError, ValueError):
    """
    Raised at construction time: fewer than 2 vertices, a non-square,
    asymmetric or negative matrix, non-integer weights or a self-loop.
    """


class DegenerateGraph(MinCutError, RuntimeError):
    """
    A live supernode has no incident weight while other supernodes remain,
    i.e. the input graph was disconnected.
    """


class ContractionStalled(MinCutError, RuntimeError):
    """The neighbour draw kept landing on the sampled slot itself."""
