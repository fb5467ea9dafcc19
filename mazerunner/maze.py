"""Maze grids and the randomised depth-first carving that builds them."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

from .geometry import Point

WALL = "#"
OPEN = " "

_DIRECTIONS = (Point(0, -2), Point(0, 2), Point(-2, 0), Point(2, 0))


class Maze:
    """A rectangular grid of wall and open cells with a start and an end cell."""

    def __init__(self, rows: Iterable[Iterable[str]], start: Point, end: Point) -> None:
        self._rows = [list(row) for row in rows]
        if not self._rows or not self._rows[0]:
            raise ValueError("a maze needs at least one cell")
        if any(len(row) != len(self._rows[0]) for row in self._rows):
            raise ValueError("all maze rows must have the same length")
        self.start = start
        self.end = end

    @property
    def width(self) -> int:
        return len(self._rows[0])

    @property
    def height(self) -> int:
        return len(self._rows)

    def is_open(self, point: Point) -> bool:
        """Return True if the point lies inside the grid on an open cell."""
        if not (0 <= point.x < self.width and 0 <= point.y < self.height):
            return False
        return self._rows[point.y][point.x] == OPEN

    def open_cells(self) -> Iterator[Point]:
        """Yield every open cell, row by row."""
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                if cell == OPEN:
                    yield Point(x, y)

    def _open(self, point: Point) -> None:
        self._rows[point.y][point.x] = OPEN

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self._rows)


def carve_maze(size: int, extra_paths: int, rng: random.Random | None = None) -> Maze:
    """Carve a square maze from (1, 1) towards its opposite corner.

    The walk stops as soon as it reaches the end cell; afterwards up to
    ``extra_paths`` random interior cells are opened to add shortcuts.
    """
    if size < 3:
        raise ValueError(f"maze size must be at least 3, got {size}")
    rng = rng if rng is not None else random.Random()

    maze = Maze(([WALL] * size for _ in range(size)), Point(1, 1), Point(size - 2, size - 2))
    visited: set[Point] = set()
    stack: list[Point] = []
    current = maze.start

    while current != maze.end:
        visited.add(current)
        maze._open(current)
        neighbours = [
            candidate
            for candidate in (current + step for step in _DIRECTIONS)
            if 0 < candidate.x < size - 1
            and 0 < candidate.y < size - 1
            and candidate not in visited
        ]
        if neighbours:
            chosen = neighbours[rng.randrange(len(neighbours))]
            maze._open(Point((current.x + chosen.x) // 2, (current.y + chosen.y) // 2))
            stack.append(current)
            current = chosen
        elif stack:
            current = stack.pop()
        else:
            break

    maze._open(maze.start)
    maze._open(maze.end)

    for _ in range(extra_paths):
        cell = Point(1 + rng.randrange(size - 2), 1 + rng.randrange(size - 2))
        if cell != maze.start and cell != maze.end:
            maze._open(cell)
    return maze


def random_open_cell(maze: Maze, rng: random.Random | None = None) -> Point:
    """Pick a random open interior cell that is neither the start nor the end."""
    rng = rng if rng is not None else random.Random()
    if maze.width < 3 or maze.height < 3:
        raise ValueError("maze has no interior cells")
    if not any(cell not in (maze.start, maze.end) for cell in maze.open_cells()):
        raise ValueError("maze has no free open cell")
    while True:
        cell = Point(1 + rng.randrange(maze.width - 2), 1 + rng.randrange(maze.height - 2))
        if cell != maze.start and cell != maze.end and maze.is_open(cell):
            return cell