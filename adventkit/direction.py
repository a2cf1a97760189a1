"""Compass directions on a grid of ``(y, x)`` coordinates."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """A grid direction; north is negative ``y``, east is positive ``x``."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def to_coord(self) -> tuple[int, int]:
        """The ``(dy, dx)`` offset of one step in this direction."""
        return _COORDS[self]

    def to_index(self) -> int:
        return self.value

    @classmethod
    def from_index(cls, index: int) -> "Direction":
        try:
            return cls(index)
        except ValueError:
            raise ValueError("directions are only 0 to 3") from None

    def right(self) -> "Direction":
        """The direction after a clockwise quarter turn."""
        return Direction((self.value + 1) % 4)

    def left(self) -> "Direction":
        """The direction after an anticlockwise quarter turn."""
        return Direction((self.value + 3) % 4)

    def is_vertical(self) -> bool:
        return self in (Direction.NORTH, Direction.SOUTH)

    def distance_to_coord(self, pos: tuple[int, int], coord: int) -> int:
        """Signed distance from ``pos`` to the line ``coord`` along this direction."""
        y, x = pos
        if self is Direction.NORTH:
            return y - coord
        if self is Direction.EAST:
            return coord - x
        if self is Direction.SOUTH:
            return coord - y
        return x - coord

    @classmethod
    def all(cls) -> tuple["Direction", ...]:
        return tuple(cls)


_COORDS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


def step(pos: tuple[int, int], direction: Direction) -> tuple[int, int]:
    """Move ``pos`` one step in ``direction``."""
    dy, dx = direction.to_coord()
    return (pos[0] + dy, pos[1] + dx)


def step_back(pos: tuple[int, int], direction: Direction) -> tuple[int, int]:
    """Move ``pos`` one step against ``direction``."""
    dy, dx = direction.to_coord()
    return (pos[0] - dy, pos[1] - dx)