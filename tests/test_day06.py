import pytest

from adventkit.days.day06 import part_one, part_two

EXAMPLE = (
    b"123 328  51 64 \n"
    b" 45 64  387 23 \n"
    b"  6 98  215 314\n"
    b"*   +   *   +  \n"
)


def test_part_one_example():
    assert part_one(EXAMPLE) == 4277556


def test_part_two_example():
    assert part_two(EXAMPLE) == 3263827


def test_single_row_reads_the_same_both_ways():
    data = b"7 8\n+ *\n"
    assert part_one(data) == part_two(data) == 15


def test_row_order_does_not_change_part_one():
    assert part_one(b"12\n 3\n+ \n") == part_one(b" 3\n12\n+ \n")


@pytest.mark.parametrize("solve", [part_one, part_two])
def test_invalid_operator(solve):
    with pytest.raises(ValueError):
        solve(b"1\n-\n")


@pytest.mark.parametrize("solve", [part_one, part_two])
def test_missing_newline(solve):
    with pytest.raises(ValueError):
        solve(b"1 + ")