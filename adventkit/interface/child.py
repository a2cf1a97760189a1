"""The solver side of the solver protocol."""

from __future__ import annotations

import json
import sys
from typing import Any, BinaryIO, Callable, Optional

from .messages import (
    Answer,
    Bench,
    BenchResult,
    ChildErrorMessage,
    End,
    Initialization,
    Run,
    SolverError,
    message_kind,
    read_message,
    time_fn,
    write_message,
)

PartFunction = Callable[[bytes, int], Any]
AnyPartFunction = Callable[[bytes, int, int], Any]


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class ChildSolver:
    """Answers run and bench requests using the given part functions.

    ``part_one`` and ``part_two`` take ``(data, debug)``; ``run_any`` takes
    ``(data, part, debug)`` and handles every other part.
    """

    def __init__(
        self,
        part_one: PartFunction,
        part_two: PartFunction,
        run_any: Optional[AnyPartFunction] = None,
    ) -> None:
        self.part_one = part_one
        self.part_two = part_two
        self.run_any = run_any

    def _solver_for(self, part: int) -> PartFunction:
        if part == 1:
            return self.part_one
        if part == 2:
            return self.part_two
        run_any = self.run_any
        if run_any is None:
            raise SolverError(f"no solver for part {part}")
        return lambda data, debug: run_any(data, part, debug)

    def solve(self, part: int, data: bytes, debug: int = 0) -> Answer:
        """Solve ``part`` once and time it."""
        func = self._solver_for(part)
        elapsed, result = time_fn(lambda: func(data, debug))
        return Answer(str(result), elapsed)

    def bench(self, bench: Bench, data: bytes, debug: int = 0) -> BenchResult:
        """Time ``bench.iters`` runs, checking every answer matches the first."""
        func = self._solver_for(bench.run.part)
        first = str(func(data, debug))
        times = []
        for _ in range(bench.iters):
            elapsed, result = time_fn(lambda: func(data, debug))
            answer = str(result)
            if answer != first:
                raise SolverError(
                    f"bencher found wrong answer: {_quote(first)} != {_quote(answer)}"
                )
            times.append(elapsed)
        return BenchResult(times, first)

    @staticmethod
    def _guarded(func: Callable[..., Any], *args: Any) -> Any:
        try:
            return func(*args)
        except Exception as exc:  # reported back to the parent process
            return ChildErrorMessage(str(exc) or type(exc).__name__)

    def serve(self, stdin: BinaryIO, stdout: BinaryIO) -> None:
        """Answer requests from ``stdin`` on ``stdout`` until told to stop."""
        init = read_message(stdin)
        if not isinstance(init, Initialization):
            raise SolverError("child was not sent an initialization message")
        while True:
            message = read_message(stdin)
            if message is None or isinstance(message, End):
                return
            if isinstance(message, Initialization):
                init = message
                continue
            if isinstance(message, Run):
                reply = self._guarded(self.solve, message.part, init.data, init.debug)
            elif isinstance(message, Bench):
                reply = self._guarded(self.bench, message, init.data, init.debug)
            else:
                raise SolverError(f"child received unexpected message {message_kind(message)}")
            try:
                write_message(stdout, reply)
            except OSError as exc:
                raise SolverError(str(exc)) from exc

    def run(self) -> None:
        """Serve requests on the process's standard input and output."""
        self.serve(sys.stdin.buffer, sys.stdout.buffer)