import pytest

from adventkit.days.day07 import part_one, part_two

EXAMPLE = (
    "\n".join(
        [
            ".......S.......",
            "...............",
            ".......^.......",
            "...............",
            "......^.^......",
            "...............",
            ".....^.^.^.....",
            "...............",
            "....^.^...^....",
            "...............",
            "...^.^...^.^...",
            "...............",
            "..^...^.....^..",
            "...............",
            ".^.^.^.^.^...^.",
            "...............",
        ]
    )
    + "\n"
).encode()


def test_part_one_example():
    assert part_one(EXAMPLE) == 21


def test_part_two_example():
    assert part_two(EXAMPLE) == 40


@pytest.mark.parametrize(
    "data",
    [
        b"..S..\n.....\n..^..\n.....\n",
        b".S.\n...\n...\n",
    ],
)
def test_without_merging_each_split_adds_one_timeline(data):
    assert part_two(data) == part_one(data) + 1


def test_missed_splitter_is_not_counted():
    data = b"S....\n.....\n...^.\n"
    assert part_one(data) == part_one(b"S....\n.....\n.....\n")


@pytest.mark.parametrize("solve", [part_one, part_two])
def test_invalid_space(solve):
    with pytest.raises(ValueError):
        solve(b".S.\n.x.\n")


@pytest.mark.parametrize("solve", [part_one, part_two])
def test_missing_start(solve):
    with pytest.raises(ValueError):
        solve(b"...\n...\n")