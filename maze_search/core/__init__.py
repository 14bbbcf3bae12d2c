# Core module
from .errors import (
    MazeError,
    MalformedGridError,
    InvalidStartError,
    InvalidGoalError,
    NoSolutionError,
    UnknownAlgorithmError,
)
from .maze_grid import Cell, CellClass, CellIdentity, CellType, MazeGrid
from .maze_parser import ParsedMaze, parse_maze_text, validate_maze_text
from .search_engine import (
    SEARCH_ALGORITHMS,
    AStarSearch,
    BFSSearch,
    DFSSearch,
    DijkstraSearch,
    PrioritySearch,
    SearchAlgorithm,
    cell_counts,
    get_algorithm,
    solve,
    solve_bfs,
    solve_dfs,
    solve_priority,
)

__all__ = [
    "MazeError",
    "MalformedGridError",
    "InvalidStartError",
    "InvalidGoalError",
    "NoSolutionError",
    "UnknownAlgorithmError",
    "Cell",
    "CellClass",
    "CellIdentity",
    "CellType",
    "MazeGrid",
    "ParsedMaze",
    "parse_maze_text",
    "validate_maze_text",
    "SEARCH_ALGORITHMS",
    "AStarSearch",
    "BFSSearch",
    "DFSSearch",
    "DijkstraSearch",
    "PrioritySearch",
    "SearchAlgorithm",
    "cell_counts",
    "get_algorithm",
    "solve",
    "solve_bfs",
    "solve_dfs",
    "solve_priority",
]
