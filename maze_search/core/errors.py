"""
Exceptions raised by the maze grid model and search engine.

Every error is terminal for the run that raised it. Nothing here is
retried: the search is deterministic, so a second attempt cannot change
the outcome.
"""


class MazeError(Exception):
    """Base class for all maze errors."""

    pass


class MalformedGridError(MazeError):
    """Exception raised when maze text is not a usable rectangular grid."""

    pass


class InvalidStartError(MazeError):
    """Exception raised when the fixed entry cell is not a passageway."""

    pass


class InvalidGoalError(MazeError):
    """Exception raised when the fixed exit cell is not a passageway."""

    pass


class NoSolutionError(MazeError):
    """Exception raised when the frontier is exhausted before the goal is reached."""

    pass


class UnknownAlgorithmError(MazeError, ValueError):
    """Exception raised when a search algorithm name is not registered."""

    pass
