"""Day 9: finding the largest rectangle between red tiles."""

from __future__ import annotations

from itertools import combinations
from typing import Callable, Iterator, Optional, Sequence

from ..consume import Consume
from ..interface.child import ChildSolver

Tile = tuple[int, int]


def _require(value: Optional[int], con: Consume) -> int:
    if value is None:
        raise ValueError(f"expected an integer at {con.slice()[:20]!r}")
    return value


def parse_tiles(data: bytes) -> list[Tile]:
    """Parse ``x,y`` lines into tile coordinates."""
    con = Consume(data)
    tiles = []
    while not con.is_empty():
        x = _require(con.int(), con)
        if not con.byte(b","):
            raise ValueError(f"expected ',' at {con.slice()[:20]!r}")
        y = _require(con.int(), con)
        if not con.newline():
            raise ValueError(f"expected a newline at {con.slice()[:20]!r}")
        tiles.append((x, y))
    return tiles


def area(a: Tile, b: Tile) -> int:
    """The number of tiles in the rectangle with corners ``a`` and ``b``."""
    return (abs(a[0] - b[0]) + 1) * (abs(a[1] - b[1]) + 1)


def perimeter(a: Tile, b: Tile, predicate: Callable[[Tile], bool]) -> bool:
    """Whether ``predicate`` holds for every tile on the rectangle's border."""
    (ax, ay), (bx, by) = a, b
    horizontal = range(min(ax, bx), max(ax, bx) + 1)
    vertical = range(min(ay, by), max(ay, by) + 1)

    def border() -> Iterator[Tile]:
        for x in horizontal:
            yield (x, ay)
            yield (x, by)
        for y in vertical:
            yield (ax, y)
            yield (bx, y)

    return all(predicate(point) for point in border())


def tile_pairs(tiles: Sequence[Tile]) -> Iterator[tuple[Tile, Tile]]:
    """Every pair of tiles, each earlier tile with each later one."""
    return combinations(tiles, 2)


def part_one(data: bytes) -> int:
    """The largest rectangle with red tiles at opposite corners."""
    return max(area(a, b) for a, b in tile_pairs(parse_tiles(data)))


def _span(a: int, b: int) -> range:
    return range(min(a, b), max(a, b) + 1)


def part_two(data: bytes) -> int:
    """The largest such rectangle whose border stays inside the loop."""
    tiles = parse_tiles(data)
    if not tiles:
        raise ValueError("no tiles")
    loop = tiles + [tiles[0]]
    edges = list(zip(loop, loop[1:]))

    colored: set[Tile] = set()
    for (ax, ay), (bx, by) in edges:
        if ax == bx:
            colored.update((ax, y) for y in _span(ay, by))
        else:
            colored.update((x, ay) for x in _span(ax, bx))

    inside: set[Tile] = set()
    outside: set[Tile] = set()
    for (ax, ay), (bx, by) in edges:
        if ax == bx:
            left = [(ax - 1, y) for y in _span(ay, by)]
            right = [(ax + 1, y) for y in _span(ay, by)]
            if ay < by:
                inside.update(right)
                outside.update(left)
            else:
                inside.update(left)
                outside.update(right)
        else:
            above = [(x, ay - 1) for x in _span(ax, bx)]
            below = [(x, ay + 1) for x in _span(ax, bx)]
            if ax < bx:
                inside.update(above)
                outside.update(below)
            else:
                inside.update(below)
                outside.update(above)

    inside -= colored
    outside -= colored
    # The ring of tiles just outside the loop is the longer of the two.
    if len(inside) > len(outside):
        inside, outside = outside, inside

    candidates = sorted(
        ((area(a, b), a, b) for a, b in tile_pairs(loop)), reverse=True
    )
    for size, a, b in candidates:
        if perimeter(a, b, lambda point: point not in outside):
            return size
    raise ValueError("no rectangles found")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Serve this day's solutions over standard input and output."""
    ChildSolver(
        lambda data, debug: part_one(data),
        lambda data, debug: part_two(data),
    ).run()


if __name__ == "__main__":
    main()