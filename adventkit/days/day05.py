"""Day 5: checking ingredient ids against fresh ranges."""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterator, Optional, Sequence

from ..consume import Consume
from ..interface.child import ChildSolver


def _require(value: Optional[int], con: Consume) -> int:
    if value is None:
        raise ValueError(f"expected an integer at {con.slice()[:20]!r}")
    return value


def fresh_ranges(data: bytes) -> tuple[list[tuple[int, int]], bytes]:
    """Parse ranges up to a blank line; return them merged, and the rest."""
    con = Consume(data)
    ranges: list[tuple[int, int]] = []
    while not con.newline():
        start = _require(con.int(), con)
        if not con.byte(b"-"):
            raise ValueError(f"expected '-' at {con.slice()[:20]!r}")
        end = _require(con.int(), con)
        if not con.newline():
            raise ValueError(f"expected a newline at {con.slice()[:20]!r}")
        ranges.append((start, end))
    merged: list[tuple[int, int]] = []
    for start, end in sorted(ranges):
        if merged and merged[-1][1] + 1 >= start:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged, con.slice()


def is_fresh(ranges: Sequence[tuple[int, int]], number: int) -> bool:
    """Whether ``number`` falls in one of the sorted, disjoint ``ranges``."""
    index = bisect_right(ranges, number, key=lambda r: r[0]) - 1
    return index >= 0 and number <= ranges[index][1]


def each_id(data: bytes) -> Iterator[int]:
    """Yield each newline-terminated id."""
    con = Consume(data)
    while not con.is_empty():
        number = _require(con.int(), con)
        if not con.newline():
            raise ValueError(f"expected a newline at {con.slice()[:20]!r}")
        yield number


def part_one(data: bytes) -> int:
    ranges, rest = fresh_ranges(data)
    return sum(1 for number in each_id(rest) if is_fresh(ranges, number))


def part_two(data: bytes) -> int:
    ranges, _ = fresh_ranges(data)
    return sum(end - start + 1 for start, end in ranges)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Serve this day's solutions over standard input and output."""
    ChildSolver(
        lambda data, debug: part_one(data),
        lambda data, debug: part_two(data),
    ).run()


if __name__ == "__main__":
    main()