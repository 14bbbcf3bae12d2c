"""Tests for maze text parsing and validation helpers."""

import pytest

from maze_search.core.errors import InvalidStartError, MalformedGridError
from maze_search.core.maze_parser import ParsedMaze, parse_maze_text, validate_maze_text


SIMPLE_MAZE = "\n".join([
    "#####",
    "    #",
    "# # #",
    "#    ",
    "#####",
])


class TestMazeParser:
    """Tests for maze parser functionality."""

    def test_parse_simple_maze(self):
        """Test parsing a simple valid maze."""
        result = parse_maze_text(SIMPLE_MAZE)

        assert isinstance(result, ParsedMaze)
        assert result.width == 5
        assert result.height == 5
        assert result.start_row == 1
        assert result.start_col == 0
        assert result.goal_row == 3
        assert result.goal_col == 4

    def test_parse_maze_preserves_grid_data(self):
        """Test that grid data is preserved exactly."""
        result = parse_maze_text(SIMPLE_MAZE)
        assert result.grid_data == SIMPLE_MAZE

    def test_parse_empty_maze_raises_error(self):
        """Test that empty maze raises MalformedGridError."""
        with pytest.raises(MalformedGridError, match="Maze text is empty"):
            parse_maze_text("")

    def test_parse_whitespace_only_maze(self):
        """Test that an all-space block is an open maze, not empty input."""
        result = parse_maze_text("   \n   \n   ")
        assert result.width == 3
        assert result.height == 3

    def test_parse_maze_walled_start_raises_error(self):
        """Test that maze with a wall at the entry raises error."""
        maze = SIMPLE_MAZE.replace("\n    #", "\n#   #", 1)
        with pytest.raises(InvalidStartError):
            parse_maze_text(maze)

    def test_parse_maze_invalid_char_raises_error(self):
        """Test that maze with invalid character raises error."""
        maze = SIMPLE_MAZE.replace("# # #", "# ? #")
        with pytest.raises(MalformedGridError, match="Invalid character"):
            parse_maze_text(maze)

    def test_to_dict(self):
        """Test ParsedMaze.to_dict() method."""
        d = parse_maze_text(SIMPLE_MAZE).to_dict()

        assert d["width"] == 5
        assert d["height"] == 5
        assert d["start_row"] == 1
        assert d["start_col"] == 0
        assert d["goal_row"] == 3
        assert d["goal_col"] == 4
        assert "grid_data" in d


class TestValidateMazeText:
    """Tests for maze validation helper."""

    def test_validate_valid_maze(self):
        """Test validation of valid maze returns True."""
        is_valid, error = validate_maze_text(SIMPLE_MAZE)
        assert is_valid is True
        assert error is None

    def test_validate_walled_goal(self):
        """Test validation of a maze with a walled exit."""
        maze = SIMPLE_MAZE.replace("#    ", "#   #")
        is_valid, error = validate_maze_text(maze)
        assert is_valid is False
        assert "Goal cell" in error

    def test_validate_non_rectangular(self):
        """Test validation of a ragged maze."""
        is_valid, error = validate_maze_text("#####\n    \n#####")
        assert is_valid is False
        assert "rectangular" in error

    def test_validate_empty(self):
        """Test validation of empty text."""
        is_valid, error = validate_maze_text("")
        assert is_valid is False
        assert "empty" in error
