"""4-neighbor maze problems on a numpy wall grid.

Mazes are written as text rows::

    S..#....
    .#.#.##.
    .#...#.G

``#`` is a wall, ``S`` the start, ``G`` the goal, anything else is open.
Cells are ``(row, col)`` tuples and edge labels are direction names.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from astar_search.core.data_models import MAX, Score, SearchResult
from astar_search.search.engine import search

Cell = Tuple[int, int]

MOVES: Dict[str, Tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}

WALL = '#'
START = 'S'
GOAL = 'G'
PATH_MARK = '*'


class GridMaze:
    """Maze with unit-cost 4-directional moves and a Manhattan heuristic."""

    def __init__(self, walls: np.ndarray, start: Cell, goal: Cell):
        walls = np.asarray(walls, dtype=bool)
        if walls.ndim != 2:
            raise ValueError(f"walls must be a 2-D array, got shape {walls.shape}")
        self.walls = walls
        self.start = (int(start[0]), int(start[1]))
        self.goal = (int(goal[0]), int(goal[1]))

        for name, cell in (("start", self.start), ("goal", self.goal)):
            if not self.in_bounds(cell):
                raise ValueError(f"{name} {cell} is outside the {self.shape} grid")
            if self.is_wall(cell):
                raise ValueError(f"{name} {cell} is a wall")

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'GridMaze':
        """Parse a maze from text rows. Rows must all have the same width."""
        rows = [row for row in rows if row.strip()]
        if not rows:
            raise ValueError("Maze has no rows")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Maze rows must all have the same width")

        chars = np.array([list(row) for row in rows])
        starts = np.argwhere(chars == START)
        goals = np.argwhere(chars == GOAL)
        if len(starts) != 1 or len(goals) != 1:
            raise ValueError(
                f"Maze needs exactly one {START!r} and one {GOAL!r}, "
                f"got {len(starts)} and {len(goals)}"
            )
        return cls(chars == WALL, tuple(starts[0]), tuple(goals[0]))

    @classmethod
    def from_text(cls, text: str) -> 'GridMaze':
        return cls.from_rows(text.splitlines())

    @property
    def shape(self) -> Tuple[int, int]:
        return self.walls.shape

    def in_bounds(self, cell: Cell) -> bool:
        rows, cols = self.walls.shape
        return 0 <= cell[0] < rows and 0 <= cell[1] < cols

    def is_wall(self, cell: Cell) -> bool:
        return bool(self.walls[cell[0], cell[1]])

    def neighbors(self, cell: Cell) -> List[Tuple[str, Cell]]:
        """Open cells one step away, as ``(direction, cell)`` pairs."""
        r, c = cell
        result = []
        for name, (dr, dc) in MOVES.items():
            nxt = (r + dr, c + dc)
            if self.in_bounds(nxt) and not self.is_wall(nxt):
                result.append((name, nxt))
        return result

    def manhattan(self, cell: Cell) -> int:
        return abs(cell[0] - self.goal[0]) + abs(cell[1] - self.goal[1])

    def score(self, path: Sequence[Any], cell: Cell) -> Score:
        """Negated A* cost ``g + h`` so that the cheapest cell pops first."""
        if cell == self.goal:
            return MAX
        return -(self.manhattan(cell) + len(path))

    def cells_along(self, labels: Iterable[str], start: Optional[Cell] = None) -> List[Cell]:
        """Replay direction labels (oldest first) into the visited cells.

        The returned list starts with ``start`` (the maze start by default).
        """
        cell = self.start if start is None else start
        cells = [cell]
        for label in labels:
            dr, dc = MOVES[label]
            cell = (cell[0] + dr, cell[1] + dc)
            cells.append(cell)
        return cells

    def is_connected_path(self, cells: Sequence[Cell]) -> bool:
        """True if consecutive cells are adjacent, in bounds and open."""
        for cell in cells:
            if not self.in_bounds(cell) or self.is_wall(cell):
                return False
        for (r1, c1), (r2, c2) in zip(cells, cells[1:]):
            if abs(r1 - r2) + abs(c1 - c2) != 1:
                return False
        return True

    def render(self, cells: Iterable[Cell] = ()) -> str:
        """Draw the maze with ``cells`` marked."""
        canvas = np.where(self.walls, WALL, '.').astype('<U1')
        for r, c in cells:
            canvas[r, c] = PATH_MARK
        canvas[self.start] = START
        canvas[self.goal] = GOAL
        return "\n".join("".join(row) for row in canvas)

    def solve(self, options: Any = None) -> Optional[SearchResult]:
        """Search from the start to the goal."""
        return search(self.start, self.neighbors, self.score, options)
