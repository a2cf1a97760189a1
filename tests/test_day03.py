import pytest

from adventkit.days.day03 import part_one, part_two, rows, turn_batteries_on

EXAMPLE = b"987654321111111\n811111111111119\n234234234234278\n818181911112111\n"


def test_example_part_one():
    assert part_one(EXAMPLE) == 357


def test_example_part_two():
    assert part_two(EXAMPLE) == 3121910778619


def test_rows_parses_digits():
    assert list(rows(b"12\n34\n")) == [[1, 2], [3, 4]]


def test_rows_without_final_newline_drops_last():
    assert list(rows(b"12\n34")) == [[1, 2]]


def test_rows_rejects_zero():
    with pytest.raises(ValueError, match="bad char"):
        list(rows(b"10\n"))


def test_taking_every_battery_keeps_order():
    row = [3, 1, 4, 1, 5, 9, 2, 6]
    assert turn_batteries_on(row, len(row)) == int("".join(map(str, row)))


def test_descending_row_takes_leading_digits():
    row = [9, 8, 7, 6, 5]
    assert turn_batteries_on(row, 3) == int("".join(map(str, row[:3])))


def test_result_has_requested_digit_count():
    for row in rows(EXAMPLE):
        assert len(str(turn_batteries_on(row, 12))) == 12


def test_row_too_short():
    with pytest.raises(ValueError):
        turn_batteries_on([1, 2], 3)