"""Day 7: following tachyon beams through a manifold of splitters."""

from __future__ import annotations

from typing import Optional, Sequence

from ..interface.child import ChildSolver


def _layout(data: bytes) -> tuple[int, int, list[list[int]]]:
    """Return the start column, the row width and each later row's splitter columns."""
    start = data.find(b"S")
    if start == -1:
        raise ValueError("no start position")
    newline = data.find(b"\n", start)
    if newline == -1:
        raise ValueError("start row has no newline")
    width = newline + 1
    rows = []
    for offset in range(width, len(data), width):
        splitters = []
        for column, space in enumerate(data[offset:offset + width][:width - 1]):
            if space == ord("^"):
                if column == 0:
                    raise ValueError("splitter at the left edge")
                splitters.append(column)
            elif space != ord("."):
                raise ValueError("invalid space")
        rows.append(splitters)
    return start, width, rows


def part_one(data: bytes) -> int:
    """Count how many times a beam is split."""
    start, width, rows = _layout(data)
    beams = [False] * width
    beams[start] = True
    splits = 0
    for splitters in rows:
        for column in splitters:
            if beams[column]:
                splits += 1
                beams[column] = False
                beams[column - 1] = True
                beams[column + 1] = True
    return splits


def part_two(data: bytes) -> int:
    """Count the timelines a single particle ends up in."""
    start, width, rows = _layout(data)
    timelines = [0] * width
    timelines[start] = 1
    for splitters in rows:
        for column in splitters:
            count, timelines[column] = timelines[column], 0
            timelines[column - 1] += count
            timelines[column + 1] += count
    return sum(timelines)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Serve this day's solutions over standard input and output."""
    ChildSolver(
        lambda data, debug: part_one(data),
        lambda data, debug: part_two(data),
    ).run()


if __name__ == "__main__":
    main()