"""A counting map whose counts may go negative."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class Counter(Generic[T]):
    """Counts occurrences of items; missing items count as zero."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._counts: dict[T, int] = {}
        for item in items:
            self.add(item)

    def __repr__(self) -> str:
        return f"Counter({self._counts!r})"

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[T]:
        return iter(self._counts)

    def add(self, item: T) -> None:
        self._counts[item] = self._counts.get(item, 0) + 1

    def subtract(self, item: T) -> None:
        """Decrement the count of ``item``, which may go below zero."""
        self._counts[item] = self._counts.get(item, 0) - 1

    def subtract_saturating(self, item: T) -> None:
        """Decrement ``item`` only if it is present with a non-zero count."""
        count = self._counts.get(item)
        if count:
            self._counts[item] = count - 1

    def remove_zeroes(self) -> None:
        self._counts = {k: v for k, v in self._counts.items() if v != 0}

    def get(self, item: T) -> int:
        return self._counts.get(item, 0)

    def as_dict(self) -> dict[T, int]:
        """A copy of the underlying counts."""
        return dict(self._counts)