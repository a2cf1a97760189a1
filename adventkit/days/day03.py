"""Day 3: picking the largest joltage from banks of batteries."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from ..consume import Consume
from ..interface.child import ChildSolver


def turn_batteries_on(row: Sequence[int], count: int) -> int:
    """The largest number made by choosing ``count`` digits of ``row`` in order."""
    remaining = list(row)
    joltage = 0
    for reserved in reversed(range(count)):
        window = remaining[: len(remaining) - reserved]
        if not window:
            raise ValueError(f"row has fewer than {count} batteries")
        best = max(window)
        index = window.index(best)
        remaining = remaining[index + 1:]
        joltage = joltage * 10 + best
    return joltage


def rows(data: bytes) -> Iterator[list[int]]:
    """Yield each newline-terminated row of digits 1 to 9."""
    con = Consume(data)
    row: list[int] = []
    while (char := con.consume_byte()) is not None:
        if ord("1") <= char <= ord("9"):
            row.append(char - ord("0"))
        elif char == ord("\n"):
            yield row
            row = []
        else:
            raise ValueError(f"bad char {char}")


def part_one(data: bytes) -> int:
    return sum(turn_batteries_on(row, 2) for row in rows(data))


def part_two(data: bytes) -> int:
    return sum(turn_batteries_on(row, 12) for row in rows(data))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Serve this day's solutions over standard input and output."""
    ChildSolver(
        lambda data, debug: part_one(data),
        lambda data, debug: part_two(data),
    ).run()


if __name__ == "__main__":
    main()