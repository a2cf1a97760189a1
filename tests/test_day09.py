import pytest

from adventkit.days.day09 import (
    area,
    parse_tiles,
    part_one,
    part_two,
    perimeter,
    tile_pairs,
)

EXAMPLE = b"7,1\n11,1\n11,7\n9,7\n9,5\n2,5\n2,3\n7,3\n"


def test_part_one_example():
    assert part_one(EXAMPLE) == 50


def test_part_two_example():
    assert part_two(EXAMPLE) == 24


def test_part_two_never_exceeds_part_one():
    assert part_two(EXAMPLE) <= part_one(EXAMPLE)


def test_parse_tiles():
    assert parse_tiles(b"7,1\n11,1\n") == [(7, 1), (11, 1)]


@pytest.mark.parametrize("data", [b"7;1\n", b"7,1", b"x,1\n"])
def test_parse_tiles_rejects_bad_lines(data):
    with pytest.raises(ValueError):
        parse_tiles(data)


def test_area_is_symmetric():
    assert area((2, 5), (11, 1)) == area((11, 1), (2, 5))
    assert area((2, 5), (11, 1)) == area((2, 1), (11, 5))


def test_tile_pairs_order():
    a, b, c = (1, 1), (2, 2), (3, 3)
    assert list(tile_pairs([a, b, c])) == [(a, b), (a, c), (b, c)]


def test_perimeter_visits_only_the_border():
    a, b = (2, 3), (6, 7)
    visited = set()

    def record(point):
        visited.add(point)
        return True

    assert perimeter(a, b, record)
    assert {(2, 3), (6, 7), (2, 7), (6, 3)} <= visited
    assert all(x in (2, 6) or y in (3, 7) for x, y in visited)
    assert (4, 5) not in visited


def test_perimeter_fails_on_rejected_border_tile():
    assert not perimeter((2, 3), (6, 7), lambda point: point != (4, 7))
    assert perimeter((2, 3), (6, 7), lambda point: point != (4, 5))


def test_part_one_needs_two_tiles():
    with pytest.raises(ValueError):
        part_one(b"1,1\n")


def test_part_two_needs_tiles():
    with pytest.raises(ValueError):
        part_two(b"")