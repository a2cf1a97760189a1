"""Day 1: counting how often a combination dial points at zero."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from ..consume import Consume
from ..interface.child import ChildSolver

_DIAL_SIZE = 100
_DIAL_START = 50


def _rotations(data: bytes) -> Iterator[int]:
    """Yield each rotation as a signed distance: left is negative."""
    con = Consume(data)
    while not con.is_empty():
        letter = con.consume_byte()
        if letter == ord("L"):
            direction = -1
        elif letter == ord("R"):
            direction = 1
        else:
            raise ValueError("not L or R")
        distance = con.int()
        if distance is None:
            raise ValueError(f"expected a distance at {con.slice()[:20]!r}")
        yield direction * distance
        if not con.newline():
            break


def part_one(data: bytes) -> int:
    """Count the rotations that leave the dial at zero."""
    dial = _DIAL_START
    zeros = 0
    for rotation in _rotations(data):
        dial = (dial + rotation) % _DIAL_SIZE
        if dial == 0:
            zeros += 1
    return zeros


def part_two(data: bytes) -> int:
    """Count every click at which the dial points at zero."""
    dial = _DIAL_START
    zeros = 0
    for rotation in _rotations(data):
        if rotation >= 0:
            zeros += (dial + rotation) // _DIAL_SIZE
        else:
            zeros += ((_DIAL_SIZE - dial) % _DIAL_SIZE - rotation) // _DIAL_SIZE
        dial = (dial + rotation) % _DIAL_SIZE
    return zeros


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Serve this day's solutions over standard input and output."""
    ChildSolver(
        lambda data, debug: part_one(data),
        lambda data, debug: part_two(data),
    ).run()


if __name__ == "__main__":
    main()