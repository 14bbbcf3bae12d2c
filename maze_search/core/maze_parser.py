"""
Maze text validation helpers.

Checks maze text without running a search and extracts its metadata.
All structural rules live in MazeGrid; this module only reports them.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import MalformedGridError, MazeError
from .maze_grid import MazeGrid


@dataclass
class ParsedMaze:
    """Parsed maze metadata."""

    grid_data: str
    width: int
    height: int
    start_row: int
    start_col: int
    goal_row: int
    goal_col: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "grid_data": self.grid_data,
            "width": self.width,
            "height": self.height,
            "start_row": self.start_row,
            "start_col": self.start_col,
            "goal_row": self.goal_row,
            "goal_col": self.goal_col,
        }


def parse_maze_text(maze_text: str) -> ParsedMaze:
    """
    Parse maze text and extract metadata.

    Args:
        maze_text: Multi-line string representing the maze grid.

    Returns:
        ParsedMaze with grid data and the fixed entry/exit coordinates.

    Raises:
        MalformedGridError: If the text is empty or not a valid grid.
        InvalidStartError: If the entry cell is a wall.
        InvalidGoalError: If the exit cell is a wall.
    """
    # whitespace is a passageway, so only truly empty text is rejected here
    if not maze_text:
        raise MalformedGridError("Maze text is empty")

    grid = MazeGrid(maze_text)

    return ParsedMaze(
        grid_data=grid.to_text(),
        width=grid.width,
        height=grid.height,
        start_row=grid.start.row,
        start_col=grid.start.col,
        goal_row=grid.goal.row,
        goal_col=grid.goal.col,
    )


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Args:
        maze_text: Multi-line string representing the maze grid.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except MazeError as e:
        return False, str(e)
