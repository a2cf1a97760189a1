"""A byte parser that works by consuming items from the front of its input."""

from __future__ import annotations

from typing import Callable, Optional, Union

_ASCII_WHITESPACE = frozenset(b" \t\n\r\x0c")
_DIGITS = frozenset(b"0123456789")
_SIGNS = frozenset(b"+-")

_to_int = int

ByteLike = Union[int, bytes, bytearray]


def _as_byte(value: ByteLike) -> int:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError(f"expected a single byte, got {bytes(value)!r}")
        return value[0]
    return value


class Consume:
    """Parses bytes by consuming pieces from the front of the remaining data."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def __repr__(self) -> str:
        return f"Consume({self.slice()!r})"

    def _peek(self) -> Optional[int]:
        if self._pos < len(self._data):
            return self._data[self._pos]
        return None

    def _byte_with(self, predicate: Callable[[int], bool]) -> Optional[int]:
        first = self._peek()
        if first is not None and predicate(first):
            self._pos += 1
            return first
        return None

    def _digits_end(self, start: int) -> int:
        end = start
        data = self._data
        while end < len(data) and data[end] in _DIGITS:
            end += 1
        return end

    def byte(self, value: ByteLike) -> bool:
        """Consume one byte if it equals ``value``; report whether it did."""
        wanted = _as_byte(value)
        return self._byte_with(lambda b: b == wanted) is not None

    def range(self, low: ByteLike, high: ByteLike) -> Optional[int]:
        """Consume and return the first byte if it lies in ``low..=high``."""
        lo, hi = _as_byte(low), _as_byte(high)
        return self._byte_with(lambda b: lo <= b <= hi)

    def prefix(self, prefix: bytes) -> bool:
        """Consume ``prefix`` if the data starts with it; report whether it did."""
        if self._data.startswith(prefix, self._pos):
            self._pos += len(prefix)
            return True
        return False

    def int(self) -> Optional[int]:
        """Consume leading digits as an unsigned integer, or return ``None``."""
        end = self._digits_end(self._pos)
        if end == self._pos:
            return None
        value = _to_int(self._data[self._pos:end])
        self._pos = end
        return value

    def signed_int(self) -> Optional[int]:
        """Consume an optionally signed integer, or return ``None``."""
        start = self._pos
        first = self._peek()
        digits_start = start + 1 if first is not None and first in _SIGNS else start
        end = self._digits_end(digits_start)
        if end == digits_start:
            return None
        value = _to_int(self._data[start:end])
        self._pos = end
        return value

    def whitespace(self) -> bytes:
        """Consume ASCII whitespace and return what was consumed."""
        start = self._pos
        while self._byte_with(lambda b: b in _ASCII_WHITESPACE) is not None:
            pass
        return self._data[start:self._pos]

    def newline(self) -> bool:
        """Consume a newline; report whether one was there."""
        return self.byte(b"\n")

    def next_newline(self) -> bytes:
        """Consume everything up to and including the next newline."""
        index = self._data.find(b"\n", self._pos)
        end = len(self._data) if index == -1 else index + 1
        return self.consume(end - self._pos)

    def non_digits(self) -> bytes:
        """Consume bytes that are neither digits nor ``-`` nor ``+``."""
        start = self._pos
        while self._byte_with(lambda b: b not in _DIGITS and b not in _SIGNS) is not None:
            pass
        return self._data[start:self._pos]

    def take_with(self, func: Callable[[bytes], int]) -> bytes:
        """Advance by the count ``func`` returns for the remaining data."""
        return self.consume(func(self.slice()))

    def consume(self, count: int) -> bytes:
        """Advance up to ``count`` bytes and return the consumed part."""
        if count < 0:
            raise ValueError("count must not be negative")
        start = self._pos
        self._pos = min(len(self._data), start + count)
        return self._data[start:self._pos]

    def consume_byte(self) -> Optional[int]:
        """Consume and return one byte, or ``None`` at the end."""
        return self._byte_with(lambda _: True)

    def slice(self) -> bytes:
        """The data not yet consumed."""
        return self._data[self._pos:]

    def is_empty(self) -> bool:
        return self._pos >= len(self._data)

    def __len__(self) -> int:
        return len(self._data) - self._pos


def parse_all_numbers(data: bytes) -> list[list[int]]:
    """Parse every number of every line into a list of rows."""
    con = Consume(data)
    rows: list[list[int]] = []
    while not con.is_empty():
        row: list[int] = []
        while not con.newline() and not con.is_empty():
            con.non_digits()
            number = con.signed_int()
            if number is None:
                raise ValueError(f"int not found starting at {con.consume(30)!r}")
            row.append(number)
        rows.append(row)
    return rows