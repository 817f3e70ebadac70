"""Tests for maze problems on a grid."""

import numpy as np
import pytest

from astar_search import MAX
from astar_search.problems import GridMaze


MAZE = [
    "S.#.....",
    ".##.##.#",
    "....#...",
    "##.##.#.",
    "...#...G",
]

SEALED = [
    "S..#.",
    "...#G",
    "...##",
]


class TestGridMazeParsing:
    """Test maze construction."""

    def test_from_rows(self):
        """Test start, goal and walls are parsed."""
        maze = GridMaze.from_rows(MAZE)

        assert maze.shape == (5, 8)
        assert maze.start == (0, 0)
        assert maze.goal == (4, 7)
        assert maze.is_wall((0, 2))
        assert not maze.is_wall((0, 1))
        assert maze.walls.dtype == bool
        assert int(maze.walls.sum()) == sum(row.count('#') for row in MAZE)

    def test_from_text_ignores_blank_lines(self):
        """Test parsing a multi-line string."""
        maze = GridMaze.from_text("\nS.\n.G\n")

        assert maze.shape == (2, 2)
        assert maze.goal == (1, 1)

    @pytest.mark.parametrize("rows", [
        ["...", "..G"],
        ["S..", "..."],
        ["S.G", "S.."],
        ["S..", ".G"],
        [],
    ])
    def test_invalid_rows(self, rows):
        """Test malformed mazes are rejected."""
        with pytest.raises(ValueError):
            GridMaze.from_rows(rows)

    def test_start_on_wall_rejected(self):
        """Test direct construction validates start and goal."""
        walls = np.zeros((3, 3), dtype=bool)
        walls[0, 0] = True

        with pytest.raises(ValueError):
            GridMaze(walls, (0, 0), (2, 2))
        with pytest.raises(ValueError):
            GridMaze(walls, (1, 1), (5, 5))


class TestGridMazeFunctions:
    """Test the neighbor and score functions."""

    def test_neighbors_skip_walls_and_edges(self):
        """Test neighbors stay in bounds and off walls."""
        maze = GridMaze.from_rows(["S#", ".G"])

        assert maze.neighbors((0, 0)) == [("down", (1, 0))]
        assert maze.neighbors((1, 0)) == [("up", (0, 0)), ("right", (1, 1))]

    def test_score(self):
        """Test the score is the negated path cost plus Manhattan distance."""
        maze = GridMaze.from_rows(MAZE)

        assert maze.score((), maze.goal) is MAX
        assert maze.manhattan((0, 0)) == 11
        assert maze.score((), (0, 0)) == -11
        assert maze.score(("down", "down"), (2, 0)) == -(9 + 2)

    def test_cells_along(self):
        """Test replaying direction labels."""
        maze = GridMaze.from_rows(MAZE)

        assert maze.cells_along(["down", "down", "right"]) == [(0, 0), (1, 0), (2, 0), (2, 1)]

    def test_is_connected_path(self):
        """Test path validity checks."""
        maze = GridMaze.from_rows(MAZE)

        assert maze.is_connected_path([(0, 0), (1, 0), (2, 0)])
        assert not maze.is_connected_path([(0, 0), (2, 0)])
        assert not maze.is_connected_path([(0, 1), (0, 2)])
        assert not maze.is_connected_path([(0, 0), (-1, 0)])


class TestGridMazeSearch:
    """Test searching mazes."""

    @pytest.fixture
    def maze(self):
        return GridMaze.from_rows(MAZE)

    def test_solve_reaches_goal(self, maze):
        """Test the path is a connected walk from start to goal avoiding walls."""
        result = maze.solve()

        assert result is not None
        assert result.goal_reached
        assert result.state == maze.goal

        cells = maze.cells_along(result.chronological_path())
        assert cells[0] == maze.start
        assert cells[-1] == maze.goal
        assert maze.is_connected_path(cells)
        assert not any(maze.is_wall(cell) for cell in cells)
        assert len(result.path) >= maze.manhattan(maze.start)

    def test_path_is_newest_first(self, maze):
        """Test the stored path ends with the first move from the start."""
        result = maze.solve()

        assert result.path[0] in ("down", "right")
        assert result.path[-1] == "down"
        assert result.path == list(reversed(result.chronological_path()))

    @pytest.mark.parametrize("tie_break", ["lifo", "fifo"])
    def test_open_room(self, tie_break):
        """Test an open room yields a shortest path under consistent scoring."""
        rows = ["S.....", "......", "......", ".....G"]
        maze = GridMaze.from_rows(rows)

        result = maze.solve({"tie_break": tie_break})

        assert result.goal_reached
        assert len(result.path) == maze.manhattan(maze.start)
        assert maze.is_connected_path(maze.cells_along(result.chronological_path()))

    def test_sealed_goal_is_exhausted(self):
        """Test an unreachable goal returns None."""
        maze = GridMaze.from_rows(SEALED)

        assert maze.solve() is None

    def test_work_limited_partial_path(self, maze):
        """Test a work-limited result still describes a valid walk."""
        result = maze.solve({"work_limit": 3})

        assert result.work_limited
        cells = maze.cells_along(result.chronological_path())
        assert cells[-1] == result.state
        assert maze.is_connected_path(cells)

    def test_render(self):
        """Test drawing a solved path."""
        maze = GridMaze.from_rows(["S.G", ".#."])
        result = maze.solve()
        cells = maze.cells_along(result.chronological_path())

        assert result.chronological_path() == ["right", "right"]
        assert maze.render(cells) == "S*G\n.#."
        assert maze.render() == "S.G\n.#."
