"""Day 8: wiring junction boxes into circuits, closest pairs first."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from itertools import combinations
from typing import Optional, Sequence

from ..consume import Consume
from ..interface.child import ChildSolver

Box = tuple[int, int, int]


class UnionFind:
    """Disjoint sets over the integers ``0..size``."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """The representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; return whether they were separate."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True

    def labeling(self) -> list[int]:
        """The representative of every item, in item order."""
        return [self.find(item) for item in range(len(self._parent))]


def _require(value: Optional[int], con: Consume) -> int:
    if value is None:
        raise ValueError(f"expected an integer at {con.slice()[:20]!r}")
    return value


def parse_boxes(data: bytes) -> list[Box]:
    """Parse ``x,y,z`` lines into coordinate tuples."""
    con = Consume(data)
    boxes = []
    while not con.is_empty():
        x = _require(con.int(), con)
        if not con.byte(b","):
            raise ValueError(f"expected ',' at {con.slice()[:20]!r}")
        y = _require(con.int(), con)
        if not con.byte(b","):
            raise ValueError(f"expected ',' at {con.slice()[:20]!r}")
        z = _require(con.int(), con)
        if not con.newline():
            raise ValueError(f"expected a newline at {con.slice()[:20]!r}")
        boxes.append((x, y, z))
    return boxes


def distance(a: Box, b: Box) -> int:
    """The squared straight-line distance between two boxes."""
    return sum((p - q) ** 2 for p, q in zip(a, b))


def find_pairs(boxes: Sequence[Box]) -> list[tuple[int, int, int]]:
    """Every pair of box indices ``i < j`` as ``(distance, i, j)``."""
    return [
        (distance(boxes[i], boxes[j]), i, j)
        for i, j in combinations(range(len(boxes)), 2)
    ]


def part_one(data: bytes) -> int:
    """Multiply the sizes of the three largest circuits after the closest joins."""
    boxes = parse_boxes(data)
    pairs = find_pairs(boxes)
    target = 10 if len(pairs) < 1000 else 1000
    if target >= len(pairs):
        raise ValueError(f"need more than {target} pairs, got {len(pairs)}")
    sets = UnionFind(len(boxes))
    for _, i, j in heapq.nsmallest(target, pairs):
        sets.union(i, j)
    sizes = sorted(Counter(sets.labeling()).values(), reverse=True)
    return math.prod(sizes[:3])


def part_two(data: bytes) -> int:
    """Multiply the x coordinates of the pair that completes one circuit."""
    boxes = parse_boxes(data)
    sets = UnionFind(len(boxes))
    target = len(boxes) - 1
    connections = 0
    for _, i, j in sorted(find_pairs(boxes)):
        if sets.union(i, j):
            connections += 1
            if connections == target:
                return boxes[i][0] * boxes[j][0]
    raise ValueError("ran out of pairs!")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Serve this day's solutions over standard input and output."""
    ChildSolver(
        lambda data, debug: part_one(data),
        lambda data, debug: part_two(data),
    ).run()


if __name__ == "__main__":
    main()