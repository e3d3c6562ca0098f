"""Bounded producer/consumer buffer of fixed-size blocks, guarded by two semaphores."""

from __future__ import annotations

import argparse
import threading
import time
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Iterable


@dataclass
class Block:
    """A slot's contents: ``data`` with the first ``size`` entries in use."""

    data: list = field(default_factory=list)
    size: int | None = None

    def __post_init__(self) -> None:
        if self.size is None:
            self.size = len(self.data)
        if not 0 <= self.size <= len(self.data):
            raise ValueError("block size out of range")

    @property
    def items(self) -> list:
        return self.data[: self.size]


class RingBuffer:
    """Holds up to ``blocks`` blocks of at most ``block_size`` elements each.

    Writers block while every slot is full; readers block while none is.
    Timeouts are in seconds; ``None`` waits without limit.
    """

    def __init__(self, blocks: int, block_size: int) -> None:
        if blocks <= 0 or block_size <= 0:
            raise ValueError("blocks and block_size must be positive")
        self._blocks = blocks
        self._block_size = block_size
        self._lock = threading.Lock()
        self._write_sem = threading.Semaphore(blocks)
        self._read_sem = threading.Semaphore(0)
        self._slots: list[Block | None] = [None] * blocks
        self._write_index = 0
        self._read_index = 0
        self._count = 0

    @property
    def block_size(self) -> int:
        return self._block_size

    def _store(self, block: Block) -> None:
        self._write_sem.acquire()
        with self._lock:
            self._slots[self._write_index] = block
            self._write_index = (self._write_index + 1) % self._blocks
            self._count += 1
        self._read_sem.release()

    def write_block(self, block: Block) -> None:
        """Store ``block``, waiting for a free slot."""
        if block.size > self._block_size:
            raise ValueError("block holds more elements than the block size")
        self._store(Block(list(block.data), block.size))

    def write(self, collection: Iterable[Any]) -> int:
        """Store up to ``block_size`` elements of ``collection``; return how many."""
        items = list(islice(iter(collection), self._block_size))
        self._store(Block(items))
        return len(items)

    def read_block(self, timeout: float | None = None) -> Block | None:
        """Take the oldest block, or return None if ``timeout`` passes first."""
        if not self._read_sem.acquire(timeout=timeout):
            return None
        with self._lock:
            if self._count == 0:
                return None
            block = self._slots[self._read_index]
            self._slots[self._read_index] = None
            self._read_index = (self._read_index + 1) % self._blocks
            self._count -= 1
        self._write_sem.release()
        return block

    def read(self, timeout: float | None = None) -> list | None:
        """Take the oldest block's elements, or None on timeout."""
        block = self.read_block(timeout)
        return None if block is None else block.items

    def read_bytes(self, size: int, timeout: float | None = None) -> bytes | None:
        """Take at most ``size`` bytes of the oldest block, or None on timeout."""
        block = self.read_block(timeout)
        if block is None:
            return None
        return bytes(block.items[: min(size, block.size)])

    def is_empty(self) -> bool:
        """Return whether no block is waiting to be read."""
        with self._lock:
            return self._count == 0


def main(argv: list[str] | None = None) -> int:
    """Run a producer and a consumer over a shared buffer for a while."""
    parser = argparse.ArgumentParser(prog="ring-buffer")
    parser.add_argument("--duration", type=float, default=5.0, help="run time in seconds")
    parser.add_argument("--interval", type=float, default=1.0, help="pause between steps in seconds")
    args = parser.parse_args(argv)

    ring = RingBuffer(5, 10)
    stop = threading.Event()
    print_lock = threading.Lock()

    def producer() -> None:
        while not stop.is_set():
            ring.write(list(range(1, 11)))
            time.sleep(args.interval)
            ring.write((11, 12, 13, 14, 15, 16))
            time.sleep(args.interval)
        with print_lock:
            print("Leaving producer thread")

    def consumer() -> None:
        while True:
            items = ring.read(timeout=args.interval)
            if items is not None:
                with print_lock:
                    print("".join(f"{item} " for item in items))
            if stop.is_set():
                break
            time.sleep(args.interval)
        with print_lock:
            print("Leaving consumer thread")

    consumer_thread = threading.Thread(target=consumer)
    producer_thread = threading.Thread(target=producer)
    consumer_thread.start()
    producer_thread.start()
    time.sleep(args.duration)
    stop.set()
    producer_thread.join()
    consumer_thread.join()
    return 0