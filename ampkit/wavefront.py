"""Wavefront planning on occupancy grids for point robots and two-link manipulators."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from ampkit.geometry import Problem, point_collides
from ampkit.grid import DenseArray2D
from ampkit.path import Path, unwrap_path

Cell = tuple[int, int]

_OBSTACLE = 1
_GOAL_LEVEL = 2
# Manipulator waypoints sit just below the cell's lower corner, in degrees.
_MANIPULATOR_OFFSET_DEG = 0.1


class GridCSpace2D:
    """A rectangular configuration space split into equal cells marking collisions."""

    def __init__(
        self,
        x0_cells: int,
        x1_cells: int,
        x0_bounds: tuple[float, float],
        x1_bounds: tuple[float, float],
        cell_size: float | None = None,
    ) -> None:
        self._cells: DenseArray2D[bool] = DenseArray2D(x0_cells, x1_cells, False)
        self._x0_bounds = (float(x0_bounds[0]), float(x0_bounds[1]))
        self._x1_bounds = (float(x1_bounds[0]), float(x1_bounds[1]))
        if cell_size is None:
            if x0_cells == 0:
                raise ValueError("cell size cannot be derived from an empty grid")
            cell_size = (self._x0_bounds[1] - self._x0_bounds[0]) / x0_cells
        if cell_size <= 0:
            raise ValueError("cell size must be positive")
        self._cell_size = float(cell_size)

    @property
    def x0_bounds(self) -> tuple[float, float]:
        return self._x0_bounds

    @property
    def x1_bounds(self) -> tuple[float, float]:
        return self._x1_bounds

    @property
    def cell_size(self) -> float:
        return self._cell_size

    def cell_from_point(self, x0: float, x1: float) -> Cell:
        """The cell indices containing the point ``(x0, x1)``."""
        return (
            math.floor((x0 - self._x0_bounds[0]) / self._cell_size),
            math.floor((x1 - self._x1_bounds[0]) / self._cell_size),
        )

    def size(self) -> tuple[int, int]:
        """Number of cells along each dimension."""
        return self._cells.size()

    def __getitem__(self, index: Cell) -> bool:
        return self._cells[index]

    def __setitem__(self, index: Cell, value: bool) -> None:
        self._cells[index] = bool(value)

    def _checked(self, cell: Cell) -> Cell:
        n0, n1 = self.size()
        if not (0 <= cell[0] < n0 and 0 <= cell[1] < n1):
            raise ValueError(f"cell {cell} is outside a {n0}x{n1} grid")
        return cell


def _neighbours(cell: Cell, n0: int, n1: int, wrap: bool) -> Iterator[Cell]:
    i, j = cell
    for di, dj in ((1, 0), (0, 1), (-1, 0), (0, -1)):
        ni, nj = i + di, j + dj
        if wrap:
            yield ni % n0, nj % n1
        elif 0 <= ni < n0 and 0 <= nj < n1:
            yield ni, nj


def _wavefront(
    grid: GridCSpace2D,
    start: Cell,
    finish: Cell,
    wrap: bool,
    max_waves: int | None = None,
) -> list[list[int]]:
    """Spread increasing levels outward from ``start`` until ``finish`` is reached."""
    n0, n1 = grid.size()
    wave = [[int(grid[i, j]) for j in range(n1)] for i in range(n0)]
    if wave[finish[0]][finish[1]] == _OBSTACLE and finish != start:
        raise ValueError(f"cell {finish} is occupied")
    wave[start[0]][start[1]] = _GOAL_LEVEL

    level = _GOAL_LEVEL
    frontier = [start]
    waves = 0
    while wave[finish[0]][finish[1]] == 0:
        if not frontier or (max_waves is not None and waves >= max_waves):
            raise ValueError("no path exists between the two cells")
        reached = []
        for cell in frontier:
            for ni, nj in _neighbours(cell, n0, n1, wrap):
                if wave[ni][nj] == 0:
                    wave[ni][nj] = level + 1
                    reached.append((ni, nj))
        frontier = reached
        level += 1
        waves += 1
    return wave


def _descend(wave: list[list[int]], start: Cell, finish: Cell, wrap: bool) -> list[Cell]:
    """Cells visited while walking from ``finish`` down the levels to ``start``."""
    n0, n1 = len(wave), len(wave[0])
    x, y = finish
    visited = []
    while (x, y) != start:
        target = wave[x][y] - 1
        moved = False
        # Each direction is tried in turn from wherever the previous one left us.
        for dx, dy in ((1, 0), (0, 1), (-1, 0), (0, -1)):
            nx, ny = x + dx, y + dy
            if wrap:
                nx, ny = nx % n0, ny % n1
            elif not (0 <= nx < n0 and 0 <= ny < n1):
                continue
            if wave[nx][ny] == target:
                x, y = nx, ny
                moved = True
        if not moved:
            raise RuntimeError(f"wavefront descent stalled at cell {(x, y)}")
        visited.append((x, y))
    return visited


@dataclass
class PointWaveFront:
    """Wavefront planner for a point robot in a bounded planar workspace."""

    cell_size: float = 0.25

    def discretize(self, environment: Problem) -> GridCSpace2D:
        """An occupancy grid of the workspace, sampled at cell centres."""
        width = environment.x_max - environment.x_min
        height = environment.y_max - environment.y_min
        grid = GridCSpace2D(
            int(width / self.cell_size),
            int(height / self.cell_size),
            (environment.x_min, environment.x_max),
            (environment.y_min, environment.y_max),
            self.cell_size,
        )
        n0, n1 = grid.size()
        for i in range(n0):
            x = environment.x_min + (i + 0.5) * self.cell_size
            for j in range(n1):
                y = environment.y_min + (j + 0.5) * self.cell_size
                grid[i, j] = point_collides(environment.obstacles, x, y)
        return grid

    def plan_in_cspace(
        self, q_init: Sequence[float], q_goal: Sequence[float], grid: GridCSpace2D
    ) -> Path:
        """A path through free cell centres from ``q_init`` to ``q_goal``."""
        finish = grid._checked(grid.cell_from_point(q_init[0], q_init[1]))
        start = grid._checked(grid.cell_from_point(q_goal[0], q_goal[1]))
        if grid[finish] and finish != start:
            raise ValueError("the initial configuration is in collision")
        wave = _wavefront(grid, start, finish, wrap=False)

        size = grid.cell_size
        x_lo, y_lo = grid.x0_bounds[0], grid.x1_bounds[0]
        waypoints = [(float(q_init[0]), float(q_init[1]))]
        waypoints.extend(
            (i * size + x_lo + size / 2, j * size + y_lo + size / 2)
            for i, j in _descend(wave, start, finish, wrap=False)
        )
        waypoints.append((float(q_goal[0]), float(q_goal[1])))
        return Path(waypoints)

    def plan(self, problem: Problem) -> Path:
        """Discretize the workspace and plan from ``q_init`` to ``q_goal``."""
        grid = self.discretize(problem)
        return self.plan_in_cspace(problem.q_init, problem.q_goal, grid)


@dataclass
class ManipulatorWaveFront:
    """Wavefront planner over a two-link manipulator's joint-angle grid.

    The grid is indexed in degrees and both joints wrap around.
    """

    max_waves: int = 5000

    @staticmethod
    def _angle_cell(angle: float, lower: float, size: float, cells: int) -> int:
        return math.trunc((math.degrees(angle) - lower) / size) % cells

    def plan_in_cspace(
        self, q_init: Sequence[float], q_goal: Sequence[float], grid: GridCSpace2D
    ) -> Path:
        """A joint-space path in radians from ``q_init`` to ``q_goal``."""
        n0, n1 = grid.size()
        size = grid.cell_size
        x_lo, y_lo = grid.x0_bounds[0], grid.x1_bounds[0]
        finish = (
            self._angle_cell(q_init[0], x_lo, size, n0),
            self._angle_cell(q_init[1], y_lo, size, n1),
        )
        start = (
            self._angle_cell(q_goal[0], x_lo, size, n0),
            self._angle_cell(q_goal[1], y_lo, size, n1),
        )
        wave = _wavefront(grid, start, finish, wrap=True, max_waves=self.max_waves)

        waypoints = [(float(q_init[0]), float(q_init[1]))]
        waypoints.extend(
            (
                math.radians(i * size + x_lo - _MANIPULATOR_OFFSET_DEG),
                math.radians(j * size + y_lo - _MANIPULATOR_OFFSET_DEG),
            )
            for i, j in _descend(wave, start, finish, wrap=True)
        )
        waypoints.append((float(q_goal[0]), float(q_goal[1])))
        return unwrap_path(Path(waypoints), (0.0, 0.0), (2 * math.pi, 2 * math.pi))