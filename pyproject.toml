[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventkit"
version = "0.1.0"
description = "Daily puzzle solvers, byte-parsing helpers and a parent/child solver process protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "parsing", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventkit-day01 = "adventkit.days.day01:main"
adventkit-day02 = "adventkit.days.day02:main"
adventkit-day03 = "adventkit.days.day03:main"
adventkit-day04 = "adventkit.days.day04:main"
adventkit-day05 = "adventkit.days.day05:main"
adventkit-day06 = "adventkit.days.day06:main"
adventkit-day07 = "adventkit.days.day07:main"
adventkit-day08 = "adventkit.days.day08:main"
adventkit-day09 = "adventkit.days.day09:main"

[tool.hatch.build.targets.wheel]
packages = ["adventkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
