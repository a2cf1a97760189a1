"""Day 4: finding paper rolls a forklift can reach."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from ..consume import Consume
from ..interface.child import ChildSolver

_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def make_grid(data: bytes) -> list[list[bool]]:
    """Parse lines into rows of booleans; ``@`` is a roll of paper."""
    con = Consume(data)
    grid = []
    while not con.is_empty():
        line = con.next_newline()[:-1]
        grid.append([byte == ord("@") for byte in line])
    return grid


def neighbors(grid: Sequence[Sequence[bool]], y: int, x: int) -> Iterator[bool]:
    """Yield the cells around ``(y, x)`` that lie inside the grid."""
    for dy, dx in _OFFSETS:
        ny, nx = y + dy, x + dx
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]):
            yield grid[ny][nx]


def _accessible(grid: Sequence[Sequence[bool]]) -> list[tuple[int, int]]:
    return [
        (y, x)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell and sum(neighbors(grid, y, x)) < 4
    ]


def part_one(data: bytes) -> int:
    """Count rolls with fewer than four neighbouring rolls."""
    return len(_accessible(make_grid(data)))


def part_two(data: bytes) -> int:
    """Count rolls removed by repeatedly taking every accessible one."""
    grid = make_grid(data)
    removed = 0
    while accessible := _accessible(grid):
        removed += len(accessible)
        for y, x in accessible:
            grid[y][x] = False
    return removed


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Serve this day's solutions over standard input and output."""
    ChildSolver(
        lambda data, debug: part_one(data),
        lambda data, debug: part_two(data),
    ).run()


if __name__ == "__main__":
    main()