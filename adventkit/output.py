"""A list of values shown separated by commas."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Output(Generic[T]):
    """Formats its items joined by commas with no spaces."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.items = list(items)

    def __str__(self) -> str:
        return ",".join(str(item) for item in self.items)

    def __repr__(self) -> str:
        return ",".join(repr(item) for item in self.items)