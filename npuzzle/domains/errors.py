class NPuzzleError(Exception):
    """Base class for puzzle errors."""


class InvalidGridError(NPuzzleError, ValueError):
    """The start grid is not a square permutation of 0..N with one blank."""


class UnknownHeuristicError(NPuzzleError, ValueError):
    """A heuristic selector did not match any known heuristic."""
