# adventkit

Solutions to nine daily programming puzzles, the small toolkit they are
built on, and a protocol for running a solver in a separate process and
timing it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Solving a puzzle from Python

Each module `adventkit.days.day01` to `adventkit.days.day09` has
`part_one(data)` and `part_two(data)`, which take the raw puzzle input as
bytes and return an integer:

```python
from pathlib import Path

from adventkit.days import day01

data = Path("input.txt").read_bytes()
print(day01.part_one(data))
print(day01.part_two(data))
```

The day modules also expose the pieces their solutions are made of, for
example `day02.each_id`, `day05.fresh_ranges`, `day08.UnionFind` and
`day09.perimeter`.

## Toolkit

- `adventkit.consume` – `Consume`, a parser that takes pieces from the front
  of a bytes value: `byte`, `range`, `prefix`, `int`, `signed_int`,
  `whitespace`, `newline`, `next_newline`, `non_digits`, `take_with`,
  `consume` and `consume_byte`; `slice()` returns what is left.
  `parse_all_numbers(data)` returns every signed integer of every line as a
  list of rows.
- `adventkit.direction` – `Direction` (`NORTH`, `EAST`, `SOUTH`, `WEST`) with
  `to_coord`, `right`, `left`, `is_vertical` and `distance_to_coord`, and
  `step` / `step_back` for moving a `(y, x)` position.
- `adventkit.counter` – `Counter`, a tally whose counts may go below zero,
  with `add`, `subtract`, `subtract_saturating`, `remove_zeroes`, `get` and
  `as_dict`.
- `adventkit.ranges` – `ReversibleRange(start, end)`, an inclusive range that
  iterates upwards or downwards and supports `in`.
- `adventkit.output` – `Output`, whose `str` and `repr` join its items with
  commas.
- `adventkit.misc` – `triangular_number(n)`; `read_value(convert, stream)`,
  which reads and converts one stripped line; and `pause(stream)`, which
  waits for a line and exits the program if it is `q`.
- `adventkit.errors` – `AocError` and its subclasses `ParseError` and
  `HasNotReleasedYet`.

```python
from adventkit.consume import Consume, parse_all_numbers

parse_all_numbers(b"hello 3 world 5 7\n")   # [[3, 5, 7]]

reader = Consume(b"12-34\n")
start = reader.int()        # 12
reader.byte(b"-")
end = reader.int()          # 34
reader.newline()
```

## Solver processes

Every day can run as a solver process that reads requests on standard input
and writes replies on standard output:

```
adventkit-day01
```

The commands `adventkit-day02` through `adventkit-day09` do the same for the
other days; `python -m adventkit.days.day01` works too.

`adventkit.interface.parent.ParentSolver` starts that process for a day
(with the current Python interpreter; `release=True` adds `-O`), sends it
the input and asks for answers and benchmarks. `part_one`, `part_two` and
`run_any(part)` return an `Answer` with the answer text and the time taken
in seconds; `bench(part, iters)` returns a `BenchResult` with one time per
iteration. Failures are raised as `SolverError`.

```python
from adventkit.interface.parent import ParentSolver

with ParentSolver(1, data, 0, True) as solver:
    first = solver.part_one()
    print(first.answer, first.time)
    results = solver.bench(1, 100)
```

To serve your own functions, build an
`adventkit.interface.child.ChildSolver(part_one, part_two, run_any)` and call
`run()`, or `serve(stdin, stdout)` with binary streams. The messages and
their binary encoding live in `adventkit.interface.messages`
(`encode_message`, `write_message`, `read_message`).

## What it does not do

There is no command that downloads puzzle descriptions or inputs, finds
example inputs, submits or checks answers, or watches files for changes;
you supply the input bytes yourself. The error types in `adventkit.errors`
are provided, but nothing in the package raises them. Only days 1 to 9
have solutions.