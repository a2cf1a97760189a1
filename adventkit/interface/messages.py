"""Messages exchanged between a solver process and the process driving it."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Optional, TypeVar, Union

T = TypeVar("T")

_NANOS_PER_SECOND = 1_000_000_000


class SolverError(Exception):
    """A failure in talking to, or inside, a solver process."""


def time_fn(func: Callable[[], T]) -> tuple[float, T]:
    """Call ``func`` and return the elapsed seconds with its result."""
    start = time.perf_counter()
    result = func()
    return time.perf_counter() - start, result


@dataclass
class Initialization:
    """Puzzle input sent to a solver; replaces any earlier input."""

    data: bytes
    debug: int = 0


@dataclass
class Run:
    """Request to solve one part."""

    part: int


@dataclass
class Bench:
    """Request to time a part over several iterations."""

    run: Run
    iters: int


@dataclass
class End:
    """Tells a solver to stop."""


@dataclass
class Answer:
    """A solved part with the time it took, in seconds."""

    answer: str
    time: float


@dataclass
class BenchResult:
    """The times of each benchmark iteration and the answer they agreed on."""

    times: list[float] = field(default_factory=list)
    answer: str = ""


@dataclass
class ChildErrorMessage:
    """An error reported by the solver process."""

    message: str


Message = Union[Initialization, Run, Bench, End, Answer, BenchResult, ChildErrorMessage]

_TAGS: dict[type, int] = {
    Initialization: 0,
    Run: 1,
    Bench: 2,
    End: 3,
    Answer: 4,
    BenchResult: 5,
    ChildErrorMessage: 6,
}

_KINDS: dict[type, str] = {
    Initialization: "Initialize",
    Run: "Run",
    Bench: "Bench",
    End: "End",
    Answer: "Answer",
    BenchResult: "BenchResult",
    ChildErrorMessage: "Err",
}


def message_kind(message: Message) -> str:
    """A short name for the kind of ``message``."""
    try:
        return _KINDS[type(message)]
    except KeyError:
        raise SolverError(f"not a message: {message!r}") from None


def _uint(value: int, bits: int) -> bytes:
    if value < 0 or value >= 1 << bits:
        raise SolverError(f"encode\n{value} does not fit in an unsigned {bits}-bit integer")
    if value < 251:
        return bytes([value])
    if value <= 0xFFFF:
        return b"\xfb" + value.to_bytes(2, "little")
    if value <= 0xFFFF_FFFF:
        return b"\xfc" + value.to_bytes(4, "little")
    if value <= 0xFFFF_FFFF_FFFF_FFFF:
        return b"\xfd" + value.to_bytes(8, "little")
    return b"\xfe" + value.to_bytes(16, "little")


def _u8(value: int) -> bytes:
    if not 0 <= value <= 255:
        raise SolverError(f"encode\n{value} does not fit in a byte")
    return bytes([value])


def _blob(data: bytes) -> bytes:
    return _uint(len(data), 64) + data


def _text(text: str) -> bytes:
    return _blob(text.encode("utf-8"))


def _duration(seconds: float) -> bytes:
    if seconds < 0:
        raise SolverError(f"encode\nnegative duration {seconds}")
    secs, nanos = divmod(round(seconds * _NANOS_PER_SECOND), _NANOS_PER_SECOND)
    return _uint(secs, 64) + _uint(nanos, 32)


def encode_message(message: Message) -> bytes:
    """Serialise ``message`` to bytes."""
    try:
        tag = _TAGS[type(message)]
    except KeyError:
        raise SolverError(f"encode\nnot a message: {message!r}") from None
    parts = [_uint(tag, 32)]
    if isinstance(message, Initialization):
        parts += [_blob(bytes(message.data)), _u8(message.debug)]
    elif isinstance(message, Run):
        parts.append(_uint(message.part, 32))
    elif isinstance(message, Bench):
        parts += [_uint(message.run.part, 32), _uint(message.iters, 32)]
    elif isinstance(message, Answer):
        parts += [_text(message.answer), _duration(message.time)]
    elif isinstance(message, BenchResult):
        parts.append(_uint(len(message.times), 64))
        parts += [_duration(t) for t in message.times]
        parts.append(_text(message.answer))
    elif isinstance(message, ChildErrorMessage):
        parts.append(_text(message.message))
    return b"".join(parts)


def write_message(stream: BinaryIO, message: Message) -> None:
    """Write ``message`` to ``stream`` and flush it."""
    stream.write(encode_message(message))
    stream.flush()


class _Reader:
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def exact(self, count: int) -> bytes:
        chunks = []
        remaining = count
        while remaining:
            chunk = self._stream.read(remaining)
            if not chunk:
                raise SolverError("decode\nunexpected end of message")
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def uint(self, bits: int, first: Optional[int] = None) -> int:
        if first is None:
            first = self.exact(1)[0]
        widths = {251: 2, 252: 4, 253: 8, 254: 16}
        if first < 251:
            value = first
        elif first in widths:
            value = int.from_bytes(self.exact(widths[first]), "little")
        else:
            raise SolverError(f"decode\ninvalid integer marker {first}")
        if value >= 1 << bits:
            raise SolverError(f"decode\n{value} does not fit in an unsigned {bits}-bit integer")
        return value

    def blob(self) -> bytes:
        return self.exact(self.uint(64))

    def text(self) -> str:
        try:
            return self.blob().decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SolverError(f"decode\n{exc}") from exc

    def duration(self) -> float:
        secs = self.uint(64)
        nanos = self.uint(32)
        if nanos >= _NANOS_PER_SECOND:
            raise SolverError(f"decode\ninvalid nanoseconds {nanos}")
        return secs + nanos / _NANOS_PER_SECOND


def read_message(stream: BinaryIO) -> Optional[Message]:
    """Read one message, or return ``None`` if the stream has ended."""
    first = stream.read(1)
    if not first:
        return None
    reader = _Reader(stream)
    tag = reader.uint(32, first[0])
    if tag == 0:
        data = reader.blob()
        return Initialization(data, reader.exact(1)[0])
    if tag == 1:
        return Run(reader.uint(32))
    if tag == 2:
        part = reader.uint(32)
        return Bench(Run(part), reader.uint(32))
    if tag == 3:
        return End()
    if tag == 4:
        answer = reader.text()
        return Answer(answer, reader.duration())
    if tag == 5:
        times = [reader.duration() for _ in range(reader.uint(64))]
        return BenchResult(times, reader.text())
    if tag == 6:
        return ChildErrorMessage(reader.text())
    raise SolverError(f"decode\nunknown message tag {tag}")