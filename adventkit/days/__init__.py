"""Solutions to the daily puzzles, one module per day."""

__all__ = [
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
]