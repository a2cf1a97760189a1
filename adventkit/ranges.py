"""An inclusive range that may run upwards or downwards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class ReversibleRange:
    """Integers from ``start`` to ``end`` inclusive, in either direction."""

    start: int
    end: int

    def __contains__(self, value: object) -> bool:
        try:
            if self.start < self.end:
                return self.start <= value <= self.end
            if self.start > self.end:
                return self.end <= value <= self.start
            return value == self.start
        except TypeError:
            return False

    def __iter__(self) -> Iterator[int]:
        value = self.start
        if self.start <= self.end:
            while value <= self.end:
                yield value
                value += 1
        else:
            while value >= self.end:
                yield value
                value -= 1

    def bounds(self) -> tuple[int, int]:
        return (self.start, self.end)