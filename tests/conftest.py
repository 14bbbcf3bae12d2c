"""Pytest configuration and fixtures."""

import pytest

from maze_search.config import get_settings
from maze_search.core.maze_grid import MazeGrid


# Single winding passage, no cycles
PERFECT_MAZE = "\n".join([
    "#######",
    "      #",
    "## ## #",
    "## ## #",
    "## ####",
    "##     ",
    "#######",
])

# Two routes to the exit; depth-first takes the longer one
CYCLIC_MAZE = "\n".join([
    "#######",
    "      #",
    "# ### #",
    "# #   #",
    "# # # #",
    "#   #  ",
    "#######",
])

# Start and goal separated by walls
DISCONNECTED_MAZE = "\n".join([
    "#####",
    "  # #",
    "# # #",
    "# #  ",
    "#####",
])

# Smallest legal maze: entry and exit one cell apart
TINY_MAZE = "\n".join([
    "###",
    "   ",
    "###",
])


def corridor(width: int) -> str:
    """Three-row maze whose middle row is open end to end."""
    return "\n".join(["#" * width, " " * width, "#" * width])


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def perfect_text() -> str:
    return PERFECT_MAZE


@pytest.fixture
def make_corridor():
    return corridor


@pytest.fixture
def perfect_grid() -> MazeGrid:
    return MazeGrid(PERFECT_MAZE)


@pytest.fixture
def cyclic_grid() -> MazeGrid:
    return MazeGrid(CYCLIC_MAZE)


@pytest.fixture
def disconnected_grid() -> MazeGrid:
    return MazeGrid(DISCONNECTED_MAZE)


@pytest.fixture
def tiny_grid() -> MazeGrid:
    return MazeGrid(TINY_MAZE)
