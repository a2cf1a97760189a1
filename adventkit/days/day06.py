"""Day 6: adding up a worksheet of column-laid arithmetic problems."""

from __future__ import annotations

import math
from typing import Iterator, Optional, Sequence

from ..consume import Consume
from ..interface.child import ChildSolver


def _problems(data: bytes) -> Iterator[tuple[int, list[bytes]]]:
    """Yield each problem's operator with the slice of every number line it covers."""
    newline = data.find(b"\n")
    if newline == -1:
        raise ValueError("worksheet has no newline")
    line_length = newline + 1
    lines = [
        data[y * line_length:(y + 1) * line_length]
        for y in range(len(data) // line_length)
    ]
    if not lines:
        raise ValueError("worksheet has no operator line")
    *numbers, operators = lines
    con = Consume(operators)
    pos = 0
    while not con.is_empty():
        operator = con.consume_byte()
        width = len(con.whitespace())
        yield operator, [line[pos:pos + width] for line in numbers]
        pos += width + 1


def _evaluate(operator: int, values: Sequence[int]) -> int:
    if operator == ord("+"):
        return sum(values)
    if operator == ord("*"):
        return math.prod(values)
    raise ValueError(f"invalid symbol {chr(operator)}")


def _row_number(segment: bytes) -> int:
    con = Consume(segment)
    con.whitespace()
    number = con.int()
    if number is None:
        raise ValueError(f"expected a number in {segment!r}")
    return number


def _column_number(digits: Sequence[int]) -> int:
    value = 0
    for byte in digits:
        if byte != ord(" "):
            value = value * 10 + (byte - ord("0"))
    return value


def part_one(data: bytes) -> int:
    """Sum the problems, reading each number along its row."""
    return sum(
        _evaluate(operator, [_row_number(segment) for segment in segments])
        for operator, segments in _problems(data)
    )


def part_two(data: bytes) -> int:
    """Sum the problems, reading each number down its column."""
    total = 0
    for operator, segments in _problems(data):
        width = min((len(segment) for segment in segments), default=0)
        values = [
            _column_number([segment[column] for segment in segments])
            for column in range(width)
        ]
        total += _evaluate(operator, values)
    return total


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Serve this day's solutions over standard input and output."""
    ChildSolver(
        lambda data, debug: part_one(data),
        lambda data, debug: part_two(data),
    ).run()


if __name__ == "__main__":
    main()