"""
Maze grid model.

Holds the maze as a 2D lattice of cells and answers the questions the
search engine asks of it: which cells are adjacent and open, whether a cell
is the goal, and which identity token de-duplicates a cell.

Maze Format:
    # = Wall (impassable)
      = Passageway (space)

Output-only markers written by a search run:
    @ = Solution
    F = Frontier
    V = Visited
"""

import copy
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from .errors import InvalidGoalError, InvalidStartError, MalformedGridError

MIN_ROWS = 3
MIN_COLS = 3


class CellType(Enum):
    """Types of cells in the maze."""
    WALL = "#"
    PASSAGEWAY = " "
    SOLUTION = "@"
    FRONTIER = "F"
    VISITED = "V"

    @classmethod
    def input_chars(cls) -> frozenset[str]:
        """Characters accepted in maze input text."""
        return frozenset({cls.WALL.value, cls.PASSAGEWAY.value})

    @classmethod
    def from_char(cls, char: str) -> "CellType":
        """Convert an input character to CellType."""
        mapping = {
            "#": cls.WALL,
            " ": cls.PASSAGEWAY,
        }
        if char not in mapping:
            raise MalformedGridError(
                f"Invalid character {char!r}. "
                f"Valid characters: {', '.join(repr(c) for c in sorted(cls.input_chars()))}"
            )
        return mapping[char]


class CellClass(Enum):
    """Coarse kind used to build identity tokens."""
    WALL = "wall"
    # a cell doesn't stop being a passageway when it becomes part of a solution
    PASSAGEWAY = "passageway"
    MARKED = "marked"

    @classmethod
    def of(cls, kind: CellType) -> "CellClass":
        classes = {
            CellType.WALL: cls.WALL,
            CellType.PASSAGEWAY: cls.PASSAGEWAY,
            CellType.SOLUTION: cls.PASSAGEWAY,
            CellType.FRONTIER: cls.MARKED,
            CellType.VISITED: cls.MARKED,
        }
        return classes[kind]


@dataclass(frozen=True)
class CellIdentity:
    """Hashable de-duplication key for a cell: (class, row, col)."""
    cell_class: CellClass
    row: int
    col: int

    def as_passageway(self) -> "CellIdentity":
        """Return the token this cell carries while walkable."""
        return CellIdentity(CellClass.PASSAGEWAY, self.row, self.col)


@dataclass(eq=False)
class Cell:
    """
    One lattice position.

    Coordinates are fixed at construction; kind and priority are mutated by
    search runs. Equality is object identity: use MazeGrid.identity() to
    compare cells by value.
    """
    _row: int
    _col: int
    kind: CellType
    # only used by priority-based search
    priority: float = field(default=math.inf)

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def char(self) -> str:
        return self.kind.value

    @property
    def is_walkable(self) -> bool:
        return self.kind in (CellType.PASSAGEWAY, CellType.SOLUTION)

    def __repr__(self) -> str:
        return f"Cell(row={self._row}, col={self._col}, kind={self.kind.name})"


# down, right, up, left. DFS path discovery depends on this order.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


class MazeGrid:
    """
    Rectangular maze grid built from plain text.

    The outer border is reserved as boundary. The entry is carved at row 1,
    column 0 and the exit at the second-to-last row, last column.

    Example usage:
        grid = MazeGrid(maze_text)
        for neighbor in grid.neighbors(grid.start):
            ...
    """

    def __init__(self, maze_text: str):
        """
        Initialize the grid from maze text.

        Args:
            maze_text: Newline-separated rows of single-character cell codes.

        Raises:
            MalformedGridError: If the text is not a rectangular grid of at
                least 3x3 legal characters.
            InvalidStartError: If the entry cell is not a passageway.
            InvalidGoalError: If the exit cell is not a passageway.
        """
        self.rows: list[list[Cell]] = []
        self._parse_grid(maze_text)

        self.start: Cell = self.rows[1][0]
        self.goal: Cell = self.rows[-2][-1]

        if self.start.kind != CellType.PASSAGEWAY:
            raise InvalidStartError(
                f"Start cell at [1,0] must be a passageway, found {self.start.char!r}"
            )
        if self.goal.kind != CellType.PASSAGEWAY:
            raise InvalidGoalError(
                f"Goal cell at [{self.goal.row},{self.goal.col}] must be a passageway, "
                f"found {self.goal.char!r}"
            )

    @classmethod
    def from_text(cls, maze_text: str) -> "MazeGrid":
        return cls(maze_text)

    def _parse_grid(self, maze_text: str) -> None:
        """Parse maze text into rows of cells."""
        text = maze_text.replace("\r\n", "\n")
        if text.endswith("\n"):
            text = text[:-1]
        lines = text.split("\n")

        if len(lines) < MIN_ROWS:
            raise MalformedGridError(
                f"Maze must have at least {MIN_ROWS} rows, found {len(lines)}"
            )

        width = len(lines[0])
        if width < MIN_COLS:
            raise MalformedGridError(
                f"Maze must have at least {MIN_COLS} columns, found {width}"
            )

        for row, line in enumerate(lines):
            if len(line) != width:
                raise MalformedGridError(
                    f"Maze must be rectangular: row {row} has {len(line)} columns, "
                    f"expected {width}"
                )
            try:
                self.rows.append(
                    [Cell(row, col, CellType.from_char(char)) for col, char in enumerate(line)]
                )
            except MalformedGridError as e:
                raise MalformedGridError(f"Row {row}: {e}") from e

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at a position."""
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell [{row},{col}] is outside the {self.height}x{self.width} grid")
        return self.rows[row][col]

    def __iter__(self) -> Iterator[list[Cell]]:
        return iter(self.rows)

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        for row in self.rows:
            yield from row

    def _adjacent(self, cell: Cell) -> Iterator[Cell]:
        for dr, dc in NEIGHBOR_OFFSETS:
            row, col = cell.row + dr, cell.col + dc
            if self.in_bounds(row, col):
                yield self.rows[row][col]

    def neighbors(self, cell: Cell) -> list[Cell]:
        """
        Return the adjacent passageways of a cell.

        Order is down, right, up, left. Cells already marked by the current
        run (frontier, visited, solution) and walls are excluded. This does
        not consult any visited set; callers still de-duplicate by identity.
        """
        return [
            neighbor for neighbor in self._adjacent(cell)
            if neighbor.kind == CellType.PASSAGEWAY
        ]

    def open_neighbors(self, cell: Cell) -> list[Cell]:
        """Return adjacent passageways and frontier cells, in neighbor order."""
        return [
            neighbor for neighbor in self._adjacent(cell)
            if neighbor.kind in (CellType.PASSAGEWAY, CellType.FRONTIER)
        ]

    def is_goal(self, cell: Cell) -> bool:
        """Check whether a cell sits at the goal coordinates."""
        return self.goal.row == cell.row and self.goal.col == cell.col

    def identity(self, cell: Cell) -> CellIdentity:
        """Get the de-duplication token for a cell's current state."""
        return CellIdentity(CellClass.of(cell.kind), cell.row, cell.col)

    def reset(self) -> None:
        """Clear search markings so the grid can be solved again."""
        for cell in self.iter_cells():
            if cell.kind != CellType.WALL:
                cell.kind = CellType.PASSAGEWAY
            cell.priority = math.inf

    def copy(self) -> "MazeGrid":
        """Return an independent copy, including current markings."""
        return copy.deepcopy(self)

    def to_text(self) -> str:
        """Render the grid with one character per cell."""
        return "\n".join("".join(cell.char for cell in row) for row in self.rows)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"MazeGrid(height={self.height}, width={self.width})"
