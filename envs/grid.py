#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Uniform 2-D grid node model for the search visualizer.

- A Grid is a rectangular boolean wall mask plus one start and one finish cell.
- Nodes are identified by (row, col); adjacency is implicit and 4-connected
  (up, down, left, right), bounds-checked, unit weight.
- Search state (visited / distance / backpointer) is NOT stored here; each
  planner run owns a fresh planners.state.SearchState.

Grid convention: walls[r, c] == True means wall (blocked), False means free.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from config import FINISH_NODE, GRID_COLS, GRID_ROWS, START_NODE

Cell = Tuple[int, int]


# 4-connected neighborhood, in the order neighbours are offered to planners
DELTAS_4 = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _as_cell(cell, name: str) -> Cell:
    """(row, col) as plain ints; floats, bools and non-pairs are rejected."""
    try:
        r, c = cell
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a (row, col) pair, got {cell!r}") from e
    for v in (r, c):
        if isinstance(v, bool) or not isinstance(v, numbers.Integral):
            raise ValueError(f"{name} {cell!r} must have integer coordinates")
    return (int(r), int(c))


WALL_CHAR = "#"
FREE_CHAR = "."
START_CHAR = "S"
FINISH_CHAR = "F"


# ------------------------------- Data classes ------------------------------- #

@dataclass(frozen=True)
class Node:
    """Read-only view of one grid cell."""
    row: int
    col: int
    is_start: bool = False
    is_finish: bool = False
    is_wall: bool = False

    @property
    def key(self) -> Cell:
        return (self.row, self.col)


@dataclass
class Grid:
    """Rectangular grid of cells with walls, a start and a finish."""
    walls: np.ndarray           # (H, W) bool array: True = wall
    start: Cell
    finish: Cell

    def __post_init__(self):
        walls = np.asarray(self.walls, dtype=bool)
        if walls.ndim != 2 or walls.shape[0] == 0 or walls.shape[1] == 0:
            raise ValueError(f"Grid needs a non-empty 2-D wall mask, got shape {walls.shape}")
        self.walls = walls
        self.start = _as_cell(self.start, "start")
        self.finish = _as_cell(self.finish, "finish")
        for name, cell in (("start", self.start), ("finish", self.finish)):
            if not self.in_bounds(cell):
                raise ValueError(f"{name} cell {cell} is outside the {self.H}x{self.W} grid")
            if self.walls[cell]:
                raise ValueError(f"{name} cell {cell} is a wall")

    @property
    def shape(self) -> Tuple[int, int]:
        return self.walls.shape

    @property
    def H(self) -> int:
        return self.walls.shape[0]

    @property
    def W(self) -> int:
        return self.walls.shape[1]

    def __len__(self) -> int:
        return self.H * self.W

    def __contains__(self, cell) -> bool:
        try:
            return self.in_bounds(cell)
        except (TypeError, ValueError):
            return False

    def in_bounds(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.H and 0 <= c < self.W

    def node(self, row: int, col: int) -> Node:
        if not self.in_bounds((row, col)):
            raise IndexError(f"cell {(row, col)} is outside the {self.H}x{self.W} grid")
        return Node(row, col,
                    is_start=(row, col) == self.start,
                    is_finish=(row, col) == self.finish,
                    is_wall=bool(self.walls[row, col]))

    @property
    def rows(self) -> List[List[Node]]:
        return [[self.node(r, c) for c in range(self.W)] for r in range(self.H)]

    def keys(self) -> Iterator[Cell]:
        for r in range(self.H):
            for c in range(self.W):
                yield (r, c)

    def neighbors(self, cell: Cell) -> Iterator[Tuple[Cell, float]]:
        """Yield (neighbour, weight) for every in-bounds, non-wall neighbour."""
        r, c = cell
        for dr, dc in DELTAS_4:
            nr, nc = r + dr, c + dc
            if nr < 0 or nr >= self.H or nc < 0 or nc >= self.W:
                continue
            if self.walls[nr, nc]:
                continue
            yield (nr, nc), 1.0

    # Adjacency is symmetric, so the cells that lead into a cell are its neighbours
    predecessors = neighbors

    def validate_endpoints(self, start: Cell, goal: Cell) -> Tuple[Cell, Cell]:
        """Fail fast on endpoints a planner cannot search between; returns them as tuples."""
        cells = []
        for name, cell in (("start", start), ("goal", goal)):
            cell = _as_cell(cell, name)
            if not self.in_bounds(cell):
                raise ValueError(f"{name} {cell} is outside the {self.H}x{self.W} grid")
            if self.walls[cell]:
                raise ValueError(f"{name} {cell} is a wall")
            cells.append(cell)
        return cells[0], cells[1]

    def to_ascii(self) -> List[str]:
        lines = []
        for r in range(self.H):
            chars = []
            for c in range(self.W):
                if (r, c) == self.start:
                    chars.append(START_CHAR)
                elif (r, c) == self.finish:
                    chars.append(FINISH_CHAR)
                elif self.walls[r, c]:
                    chars.append(WALL_CHAR)
                else:
                    chars.append(FREE_CHAR)
            lines.append("".join(chars))
        return lines


# ------------------------------- Construction ------------------------------- #

def create_grid(rows: int = GRID_ROWS,
                cols: int = GRID_COLS,
                start: Cell = START_NODE,
                finish: Cell = FINISH_NODE,
                walls: Optional[np.ndarray] = None) -> Grid:
    """Build a rows x cols grid, wall-free unless a mask is given."""
    if rows <= 0 or cols <= 0:
        raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
    if walls is None:
        walls = np.zeros((rows, cols), dtype=bool)
    else:
        walls = np.array(walls, dtype=bool)
        if walls.shape != (rows, cols):
            raise ValueError(f"wall mask shape {walls.shape} does not match {rows}x{cols}")
    return Grid(walls=walls, start=start, finish=finish)


def grid_from_ascii(lines: Sequence[str]) -> Grid:
    """
    Parse a picture of a grid:
        '#' wall, '.' free, 'S' start, 'F' finish.
    Every row must have the same length; exactly one S and one F.
    """
    rows = [line.strip() for line in lines if line.strip()]
    if not rows:
        raise ValueError("grid picture is empty")
    width = len(rows[0])
    for i, line in enumerate(rows):
        if len(line) != width:
            raise ValueError(f"row {i} has length {len(line)}, expected {width} (grid must be rectangular)")

    walls = np.zeros((len(rows), width), dtype=bool)
    starts, finishes = [], []
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch == WALL_CHAR:
                walls[r, c] = True
            elif ch == START_CHAR:
                starts.append((r, c))
            elif ch == FINISH_CHAR:
                finishes.append((r, c))
            elif ch != FREE_CHAR:
                raise ValueError(f"unknown grid character {ch!r} at {(r, c)}")
    if len(starts) != 1 or len(finishes) != 1:
        raise ValueError(f"grid needs exactly one S and one F, found {len(starts)} and {len(finishes)}")
    return Grid(walls=walls, start=starts[0], finish=finishes[0])


def random_walls(grid: Grid, density: float, rng: Optional[np.random.Generator] = None) -> Grid:
    """Return a copy of `grid` with roughly `density` of its free cells walled."""
    if not 0.0 <= density < 1.0:
        raise ValueError(f"density must be in [0, 1), got {density}")
    rng = rng if rng is not None else np.random.default_rng()
    walls = grid.walls | (rng.random(grid.shape) < density)
    walls[grid.start] = False
    walls[grid.finish] = False
    return Grid(walls=walls, start=grid.start, finish=grid.finish)


# ------------------------------ Edit operations ----------------------------- #

def toggle_wall(grid: Grid, row: int, col: int) -> Grid:
    """Flip one cell's wall flag, returning a new Grid (the input is untouched)."""
    if not grid.in_bounds((row, col)):
        raise ValueError(f"cell {(row, col)} is outside the {grid.H}x{grid.W} grid")
    if (row, col) in (grid.start, grid.finish):
        raise ValueError(f"cell {(row, col)} is the start or finish and cannot become a wall")
    walls = grid.walls.copy()
    walls[row, col] = not walls[row, col]
    return Grid(walls=walls, start=grid.start, finish=grid.finish)


def clear_grid(grid: Grid) -> Grid:
    """Fresh grid for a new run; walls are kept."""
    return Grid(walls=grid.walls.copy(), start=grid.start, finish=grid.finish)


def reset_grid(grid: Grid) -> Grid:
    """Fresh grid for a new run with every wall removed."""
    return Grid(walls=np.zeros(grid.shape, dtype=bool), start=grid.start, finish=grid.finish)
