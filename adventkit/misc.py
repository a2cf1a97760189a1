"""Small numeric and console helpers."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO, TypeVar

T = TypeVar("T")


def triangular_number(n: int) -> int:
    """The sum of the integers from 0 to ``n``."""
    return n * (n + 1) // 2


def _read_line(stream: Optional[TextIO]) -> str:
    line = (stream if stream is not None else sys.stdin).readline()
    if not line:
        raise EOFError("no more input")
    return line


def read_value(convert: Callable[[str], T], stream: Optional[TextIO] = None) -> T:
    """Read one line, strip it and convert it; conversion errors propagate."""
    return convert(_read_line(stream).strip())


def pause(stream: Optional[TextIO] = None) -> None:
    """Wait for a line of input; exit the program if it is ``q``."""
    if _read_line(stream).strip() == "q":
        sys.exit(0)