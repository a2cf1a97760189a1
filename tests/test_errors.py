from datetime import timedelta

import pytest

from adventkit.errors import AocError, HasNotReleasedYet, ParseError


def test_parse_error_message():
    err = ParseError("12a", "day12a")
    assert str(err) == "could not parse `12a` as integer in argument `day12a`"


def test_parse_error_keeps_parts():
    err = ParseError("x", "3.x")
    assert (err.part, err.arg) == ("x", "3.x")


def test_parse_error_is_aoc_error():
    err = ParseError("a", "b")
    with pytest.raises(AocError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == "could not parse `a` as integer in argument `b`"


def test_not_released_message():
    err = HasNotReleasedYet(3, timedelta(days=1, hours=2, minutes=3, seconds=4))
    assert str(err) == "day 3 hasn't released yet. It releases 1:02:03:04 from now."


def test_not_released_ignores_fractional_seconds():
    err = HasNotReleasedYet(9, timedelta(hours=5, seconds=7, microseconds=900000))
    assert str(err) == "day 9 hasn't released yet. It releases 0:05:00:07 from now."


def test_not_released_keeps_fields():
    duration = timedelta(minutes=10)
    err = HasNotReleasedYet(12, duration)
    assert err.day == 12
    assert err.duration == duration


def test_not_released_is_aoc_error():
    err = HasNotReleasedYet(4, timedelta(seconds=1))
    assert isinstance(err, AocError)
    assert err.day == 4
    assert err.duration == timedelta(seconds=1)
    assert str(err) == "day 4 hasn't released yet. It releases 0:00:00:01 from now."