"""The driving side of the solver protocol: starts and talks to a solver process."""

from __future__ import annotations

import subprocess
import sys
from typing import Optional

from .messages import (
    Answer,
    Bench,
    BenchResult,
    ChildErrorMessage,
    End,
    Initialization,
    Message,
    Run,
    SolverError,
    message_kind,
    read_message,
    write_message,
)

_PACKAGE = __name__.partition(".")[0]


class ParentSolver:
    """Starts the solver for one day and sends it work."""

    def __init__(self, day: int, data: bytes, debug: int = 0, release: bool = False) -> None:
        command = [sys.executable]
        if release:
            command.append("-O")
        command += ["-m", f"{_PACKAGE}.days.day{day:02d}"]
        try:
            self._process = subprocess.Popen(
                command, stdin=subprocess.PIPE, stdout=subprocess.PIPE
            )
        except OSError as exc:
            raise SolverError(str(exc)) from exc
        self._closed = False
        try:
            self.initialize(data, debug)
        except SolverError:
            self.close()
            raise

    def _send(self, message: Message) -> None:
        if self._closed:
            raise SolverError("solver process has been closed")
        try:
            write_message(self._process.stdin, message)
        except OSError as exc:
            raise SolverError(str(exc)) from exc

    def _receive(self) -> Message:
        try:
            message = read_message(self._process.stdout)
        except OSError as exc:
            raise SolverError(str(exc)) from exc
        if message is None:
            raise SolverError("child quit before sending a response")
        return message

    def initialize(self, data: bytes, debug: int = 0) -> None:
        """Send new input, replacing the previous input."""
        self._send(Initialization(bytes(data), debug))

    def part_one(self) -> Answer:
        return self.run_any(1)

    def part_two(self) -> Answer:
        return self.run_any(2)

    def run_any(self, part: int) -> Answer:
        """Solve ``part`` and return the answer with its time."""
        self._send(Run(part))
        message = self._receive()
        if isinstance(message, Answer):
            return message
        if isinstance(message, ChildErrorMessage):
            raise SolverError(f"child encountered error: {message.message}")
        raise SolverError(
            f"parent expected an answer but received {message_kind(message)}\n{message!r}"
        )

    def bench(self, part: int, iters: int) -> BenchResult:
        """Benchmark ``part`` over ``iters`` runs."""
        self._send(Bench(Run(part), iters))
        message = self._receive()
        if isinstance(message, BenchResult):
            if len(message.times) != iters:
                raise SolverError(
                    f"parent asked for {iters} benches but received {len(message.times)}"
                )
            return message
        if isinstance(message, ChildErrorMessage):
            raise SolverError(f"child encountered error: {message.message}")
        raise SolverError(
            f"parent expected an answer but received {message_kind(message)}\n{message!r}"
        )

    def close(self) -> None:
        """Tell the solver to stop and wait for it to exit."""
        if self._closed:
            return
        try:
            self._send(End())
        except SolverError:
            pass
        self._closed = True
        try:
            self._process.stdin.close()
        except OSError:
            pass
        self._process.wait()
        self._process.stdout.close()

    def __enter__(self) -> "ParentSolver":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None