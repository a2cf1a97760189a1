"""Day 2: summing product ids made of a repeated digit sequence."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from ..consume import Consume
from ..interface.child import ChildSolver


def _digits(number: int) -> str:
    if number < 1:
        raise ValueError(f"ids must be positive, got {number}")
    return str(number)


def repeats(length: int, number: int) -> bool:
    """Whether ``number`` is one block of ``length`` digits repeated."""
    digits = _digits(number)
    if len(digits) % length:
        return False
    return digits == digits[:length] * (len(digits) // length)


def is_valid(number: int) -> bool:
    """False if ``number`` is some digit sequence written exactly twice."""
    length = len(_digits(number))
    if length % 2:
        return True
    return not repeats(length // 2, number)


def is_valid_repeating(number: int) -> bool:
    """False if ``number`` is some digit sequence written two or more times."""
    length = len(_digits(number))
    return not any(repeats(size, number) for size in range(1, length // 2 + 1))


def _require(value: Optional[int], con: Consume) -> int:
    if value is None:
        raise ValueError(f"expected an integer at {con.slice()[:20]!r}")
    return value


def each_id(data: bytes) -> Iterator[int]:
    """Yield every id in the comma-separated inclusive ranges."""
    con = Consume(data)
    while True:
        start = _require(con.int(), con)
        if not con.byte(b"-"):
            raise ValueError(f"expected '-' at {con.slice()[:20]!r}")
        end = _require(con.int(), con)
        yield from range(start, end + 1)
        if not con.byte(b","):
            break
        con.byte(b"\n")


def part_one(data: bytes) -> int:
    return sum(number for number in each_id(data) if not is_valid(number))


def part_two(data: bytes) -> int:
    return sum(number for number in each_id(data) if not is_valid_repeating(number))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Serve this day's solutions over standard input and output."""
    ChildSolver(
        lambda data, debug: part_one(data),
        lambda data, debug: part_two(data),
    ).run()


if __name__ == "__main__":
    main()