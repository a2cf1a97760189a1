import pytest

from adventkit.days.day02 import (
    each_id,
    is_valid,
    is_valid_repeating,
    part_one,
    part_two,
    repeats,
)

EXAMPLE = (
    b"11-22,95-115,998-1012,1188511880-1188511890,222220-222224,"
    b"1698522-1698528,446443-446449,38593856-38593862,565653-565659,"
    b"824824821-824824827,2121212118-2121212124\n"
)


def test_example_part_one():
    assert part_one(EXAMPLE) == 1227775554


def test_example_part_two():
    assert part_two(EXAMPLE) == 4174379265


def test_each_id_expands_ranges():
    assert list(each_id(b"11-13,20-21\n")) == [11, 12, 13, 20, 21]


def test_each_id_allows_newline_after_comma():
    assert list(each_id(b"5-6,\n8-8")) == [5, 6, 8]


def test_repeats():
    assert repeats(1, 111)
    assert repeats(2, 1212)
    assert not repeats(2, 121)
    assert not repeats(2, 1213)


def test_is_valid():
    assert not is_valid(11)
    assert not is_valid(123123)
    assert is_valid(12)
    assert is_valid(111)


def test_is_valid_repeating():
    assert not is_valid_repeating(111)
    assert not is_valid_repeating(121212)
    assert is_valid_repeating(1213)


def test_invalid_ids_are_invalid_repeating():
    for number in range(1, 5000):
        if not is_valid(number):
            assert not is_valid_repeating(number)


def test_part_two_at_least_part_one():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


def test_missing_dash():
    with pytest.raises(ValueError):
        list(each_id(b"11+13\n"))


def test_zero_is_rejected():
    with pytest.raises(ValueError):
        is_valid(0)