"""
Maze Search Engine

Graph search over a MazeGrid from its fixed entry to its fixed exit:
- Breadth-first search (shortest path in moves)
- Depth-first search with an explicit backtracking stack
- Priority search extension point (Dijkstra, A*)
- Cell count summary of a finished run

Every run mutates the grid in place. Discovered cells are marked
Frontier, processed cells Visited, and the reconstructed path Solution.
A grid is solved by one run at a time; copy it for independent runs.
"""

import itertools
import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Callable, Optional, Protocol

from maze_search.config import get_settings
from maze_search.schemas.counts import CellCounts, SolveSummary

from .errors import NoSolutionError, UnknownAlgorithmError
from .maze_grid import Cell, CellIdentity, CellType, MazeGrid

logger = logging.getLogger(__name__)

Heuristic = Callable[[MazeGrid, Cell], float]

STEP_COST = 1


class SearchAlgorithm(Protocol):
    name: str

    def solve(self, grid: MazeGrid) -> list[Cell]:
        ...


@dataclass
class SearchRun:
    """
    Bookkeeping for a single search run.

    visited holds identity tokens of every discovered cell. parents maps a
    token to the cell it was discovered from, or None for the start.
    """
    grid: MazeGrid
    visited: set[CellIdentity] = field(default_factory=set)
    parents: dict[CellIdentity, Optional[Cell]] = field(default_factory=dict)

    @classmethod
    def begin(cls, grid: MazeGrid) -> "SearchRun":
        run = cls(grid)
        run.record(grid.start, None)
        return run

    def key(self, cell: Cell) -> CellIdentity:
        return self.grid.identity(cell)

    def seen(self, cell: Cell) -> bool:
        return self.key(cell) in self.visited

    def record(self, cell: Cell, parent: Optional[Cell],
               key: Optional[CellIdentity] = None) -> None:
        """Add a cell to the visited set and remember its predecessor."""
        if key is None:
            key = self.key(cell)
        self.visited.add(key)
        self.parents[key] = parent

    def backtrack(self, cell: Cell) -> list[Cell]:
        """
        Mark the path ending at cell as Solution.

        A solution cell keys the same as the passageway it was when its
        parent was recorded, so lookups work after relabelling.

        Returns:
            Cells from start to cell, inclusive.
        """
        path = []
        current: Optional[Cell] = cell
        while current is not None:
            current.kind = CellType.SOLUTION
            path.append(current)
            current = self.parents[self.key(current)]
        path.reverse()
        return path

    def fail(self, algorithm: str) -> NoSolutionError:
        logger.warning(
            f"{algorithm}: frontier exhausted after {len(self.visited)} cells, "
            f"goal [{self.grid.goal.row},{self.grid.goal.col}] unreachable"
        )
        return NoSolutionError(
            f"No path from [{self.grid.start.row},{self.grid.start.col}] "
            f"to [{self.grid.goal.row},{self.grid.goal.col}]"
        )

    def finish(self, algorithm: str, goal: Cell) -> list[Cell]:
        path = self.backtrack(goal)
        logger.info(
            f"{algorithm}: reached goal, path of {len(path)} cells, "
            f"{len(self.visited)} cells discovered"
        )
        return path


class BFSSearch:
    """Breadth-first search. The marked path is a shortest path in moves."""

    name = "bfs"

    def solve(self, grid: MazeGrid) -> list[Cell]:
        run = SearchRun.begin(grid)
        frontier: deque[Cell] = deque([grid.start])

        while frontier:
            current = frontier.popleft()
            current.kind = CellType.VISITED

            if grid.is_goal(current):
                return run.finish(self.name, current)

            for neighbor in grid.neighbors(current):
                if run.seen(neighbor):
                    continue
                run.record(neighbor, current)
                frontier.append(neighbor)
                neighbor.kind = CellType.FRONTIER

        raise run.fail(self.name)


class DFSSearch:
    """
    Depth-first search with an explicit backtracking stack.

    Only the first neighbor (down, right, up, left) is followed at each
    step; the others are reconsidered when the walk backtracks into the
    cell. The path found depends on that order and is not necessarily the
    shortest. Completeness is only assured on perfect mazes, where a single
    simple path joins any two passageways.
    """

    name = "dfs"

    def solve(self, grid: MazeGrid) -> list[Cell]:
        run = SearchRun.begin(grid)
        stack: list[Cell] = []
        current: Optional[Cell] = grid.start
        current.kind = CellType.VISITED

        while current is not None:
            current.kind = CellType.VISITED

            if grid.is_goal(current):
                return run.finish(self.name, current)

            neighbors = grid.neighbors(current)
            if neighbors and not run.seen(neighbors[0]):
                candidate = neighbors[0]
                run.record(candidate, current)
                candidate.kind = CellType.FRONTIER
                stack.append(current)
                current = candidate
                continue

            # dead end: resume from the previous cell on the walk
            current = stack.pop() if stack else None

        raise run.fail(self.name)


class PrioritySearch(ABC):
    """
    Best-first search over a min-priority frontier.

    Each move costs STEP_COST. A cell's priority is its accumulated cost
    plus heuristic(grid, cell); subclasses provide the heuristic. Frontier
    cells may be relaxed to a cheaper cost until they are popped, so the
    path is a shortest one for any heuristic that never overestimates.
    """

    name = "priority"

    @abstractmethod
    def heuristic(self, grid: MazeGrid, cell: Cell) -> float:
        """Estimated remaining cost from cell to the goal."""
        ...

    def solve(self, grid: MazeGrid) -> list[Cell]:
        run = SearchRun.begin(grid)
        order = itertools.count()

        start = grid.start
        cost: dict[CellIdentity, float] = {run.key(start): 0}
        start.priority = self.heuristic(grid, start)
        heap: list[tuple[float, int, Cell]] = [(start.priority, next(order), start)]

        while heap:
            priority, _, current = heappop(heap)
            # stale entry left behind by a relaxation
            if current.kind == CellType.VISITED or priority > current.priority:
                continue

            current.kind = CellType.VISITED
            if grid.is_goal(current):
                return run.finish(self.name, current)

            current_cost = cost[run.key(current).as_passageway()]
            for neighbor in grid.open_neighbors(current):
                key = run.key(neighbor).as_passageway()
                new_cost = current_cost + STEP_COST
                if key in cost and new_cost >= cost[key]:
                    continue
                cost[key] = new_cost
                run.record(neighbor, current, key)
                neighbor.priority = new_cost + self.heuristic(grid, neighbor)
                neighbor.kind = CellType.FRONTIER
                heappush(heap, (neighbor.priority, next(order), neighbor))

        raise run.fail(self.name)


class DijkstraSearch(PrioritySearch):
    """Uniform-cost search: no heuristic."""

    name = "dijkstra"

    def heuristic(self, grid: MazeGrid, cell: Cell) -> float:
        return 0


class AStarSearch(PrioritySearch):
    """A* with Manhattan distance to the goal."""

    name = "astar"

    def heuristic(self, grid: MazeGrid, cell: Cell) -> float:
        return abs(cell.row - grid.goal.row) + abs(cell.col - grid.goal.col)


class HeuristicSearch(PrioritySearch):
    """Priority search driven by a caller-supplied heuristic."""

    def __init__(self, heuristic: Heuristic, name: str = "priority"):
        self._heuristic = heuristic
        self.name = name

    def heuristic(self, grid: MazeGrid, cell: Cell) -> float:
        return self._heuristic(grid, cell)


SEARCH_ALGORITHMS: dict[str, SearchAlgorithm] = {
    algo.name: algo
    for algo in (BFSSearch(), DFSSearch(), DijkstraSearch(), AStarSearch())
}


def get_algorithm(name: str) -> SearchAlgorithm:
    """
    Look up a registered search algorithm.

    Raises:
        UnknownAlgorithmError: If no algorithm is registered under name.
    """
    algo = SEARCH_ALGORITHMS.get(name.strip().lower())
    if algo is None:
        raise UnknownAlgorithmError(
            f"Unknown search algorithm '{name}'. "
            f"Must be one of: {', '.join(sorted(SEARCH_ALGORITHMS))}"
        )
    return algo


def solve_bfs(grid: MazeGrid) -> list[Cell]:
    """Solve the maze breadth-first and mark the shortest path."""
    return SEARCH_ALGORITHMS["bfs"].solve(grid)


def solve_dfs(grid: MazeGrid) -> list[Cell]:
    """Solve the maze depth-first and mark the path found."""
    return SEARCH_ALGORITHMS["dfs"].solve(grid)


def solve_priority(grid: MazeGrid, heuristic: Heuristic) -> list[Cell]:
    """Solve the maze best-first, ordering the frontier by cost plus heuristic."""
    return HeuristicSearch(heuristic).solve(grid)


def cell_counts(grid: MazeGrid) -> CellCounts:
    """Count solution, visited (including solution) and frontier cells."""
    solution = visited = frontier = 0
    for cell in grid.iter_cells():
        if cell.kind == CellType.SOLUTION:
            solution += 1
        if cell.kind in (CellType.SOLUTION, CellType.VISITED):
            visited += 1
        if cell.kind == CellType.FRONTIER:
            frontier += 1
    return CellCounts(solution=solution, visited=visited, frontier=frontier)


def solve(grid: MazeGrid, algorithm: Optional[str] = None) -> SolveSummary:
    """
    Run a registered search algorithm against a grid.

    Args:
        grid: Grid to solve. Mutated in place.
        algorithm: Registered algorithm name. Defaults to the configured
            default_algorithm.

    Returns:
        SolveSummary with counts and the rendered final grid.

    Raises:
        UnknownAlgorithmError: If the algorithm name is not registered.
        NoSolutionError: If the goal cannot be reached.
    """
    if algorithm is None:
        algorithm = get_settings().default_algorithm
    algo = get_algorithm(algorithm)

    logger.info(f"Solving {grid.height}x{grid.width} maze with {algo.name}")
    path = algo.solve(grid)
    counts = cell_counts(grid)
    logger.debug(
        f"{algo.name}: solution={counts.solution} visited={counts.visited} "
        f"frontier={counts.frontier}"
    )

    return SolveSummary(
        algorithm=algo.name,
        counts=counts,
        path_length=len(path),
        grid=grid.to_text(),
    )
