"""Maze search engine: grid model plus BFS, DFS and priority search."""

from maze_search.core import *  # noqa: F401,F403
from maze_search.core import __all__ as _core_all
from maze_search.schemas import CellCounts, SolveSummary

__version__ = "1.0.0"

__all__ = [*_core_all, "CellCounts", "SolveSummary"]
