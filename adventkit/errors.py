"""Errors reported by the puzzle runner."""

from __future__ import annotations

from datetime import timedelta


class AocError(Exception):
    """Base class for every error the runner reports."""


class ParseError(AocError):
    """A piece of a command-line argument was not an integer."""

    def __init__(self, part: str, arg: str) -> None:
        super().__init__(part, arg)
        self.part = part
        self.arg = arg

    def __str__(self) -> str:
        return f"could not parse `{self.part}` as integer in argument `{self.arg}`"


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


class HasNotReleasedYet(AocError):
    """A puzzle was requested before its release time."""

    def __init__(self, day: int, duration: timedelta) -> None:
        super().__init__(day, duration)
        self.day = day
        self.duration = duration

    def __str__(self) -> str:
        microseconds = self.duration // timedelta(microseconds=1)
        seconds = _truncating_div(microseconds, 1_000_000)
        minutes = _truncating_div(seconds, 60)
        hours = _truncating_div(seconds, 3600)
        days = _truncating_div(seconds, 86400)
        return (
            f"day {self.day} hasn't released yet. It releases "
            f"{days}:{hours - days * 24:02}:{minutes - hours * 60:02}:"
            f"{seconds - minutes * 60:02} from now."
        )