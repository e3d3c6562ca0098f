"""Producer/consumer hand-off of audio data chunks through a suspended generator."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Any, Generator, Iterable, Sequence, TextIO

DataChunk = list


def format_container(values: Iterable[Any]) -> str:
    """Render ``values`` as ``[a, b, c]``."""
    return "[" + ", ".join(str(int(v)) if isinstance(v, bool) else str(v) for v in values) + "]"


class AudioDataResult:
    """Owns a producer generator and hands its yielded chunks to a consumer.

    The producer runs up to its first yield as soon as the result is created.
    A chunk is taken once with :meth:`receive`; :meth:`resume` lets the
    producer run up to its next yield.
    """

    def __init__(self, source: Iterable[Iterable[Any]]) -> None:
        self._source: Generator[Any, None, None] | Any = iter(source)
        self._lock = threading.Lock()
        self._data: DataChunk = []
        self._ready = False
        self._done = False
        self._advance()

    @property
    def done(self) -> bool:
        """Whether the producer has run to completion."""
        return self._done

    @property
    def ready(self) -> bool:
        """Whether a chunk is waiting to be received."""
        return self._ready

    def _advance(self) -> None:
        try:
            value = next(self._source)
        except StopIteration:
            self._done = True
            return
        self._data = list(value)
        self._ready = True

    def receive(self) -> DataChunk:
        """Take the chunk the producer last yielded.

        Raises RuntimeError when no chunk is waiting.
        """
        with self._lock:
            if not self._ready:
                raise RuntimeError("no data ready")
            self._ready = False
            data, self._data = self._data, []
            return data

    def resume(self) -> None:
        """Let the producer run to its next yield; does nothing once it has finished."""
        with self._lock:
            if not self._done:
                self._advance()

    def close(self) -> None:
        """Stop the producer and release it."""
        with self._lock:
            close = getattr(self._source, "close", None)
            if close is not None:
                close()
            self._done = True
            self._ready = False
            self._data = []

    def __enter__(self) -> "AudioDataResult":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def _produce(data: Sequence[Any], repeat: int) -> Generator[DataChunk, None, None]:
    for _ in range(repeat):
        yield list(data)
    yield []  # an empty chunk tells the consumer to stop


def producer(data: Sequence[Any], repeat: int = 5) -> AudioDataResult:
    """Start a producer that yields ``data`` ``repeat`` times, then an empty chunk."""
    if repeat < 0:
        raise ValueError("repeat must not be negative")
    return AudioDataResult(_produce(data, repeat))


def consumer(result: AudioDataResult, out: TextIO | None = None) -> list[DataChunk]:
    """Receive chunks until an empty one arrives; report each to ``out``.

    Returns the non-empty chunks received, in order.
    """
    stream = out if out is not None else sys.stdout
    received: list[DataChunk] = []
    while True:
        data = result.receive()
        if not data:
            stream.write("No data - exit!\n")
            break
        stream.write("Data received:" + format_container(data) + "\n")
        received.append(data)
        result.resume()
    return received


def main(argv: list[str] | None = None) -> int:
    """Run a consumer thread against a producer of a fixed chunk."""
    parser = argparse.ArgumentParser(prog="audio-pipeline")
    parser.add_argument("--repeat", type=int, default=5, help="number of chunks to produce")
    args = parser.parse_args(argv)

    with producer([1, 2, 3, 4], args.repeat) as audio_data:
        worker = threading.Thread(target=consumer, args=(audio_data,))
        worker.start()
        worker.join()

    print("bye-bye!")
    return 0