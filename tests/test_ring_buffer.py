import threading
import time

import pytest

from threadkit.ring_buffer import Block, RingBuffer, main


def test_write_then_read_round_trip():
    ring = RingBuffer(3, 4)
    assert ring.write([1, 2, 3]) == 3
    assert ring.read() == [1, 2, 3]
    assert ring.is_empty() is True


def test_write_truncates_to_block_size():
    ring = RingBuffer(2, 4)
    values = list(range(1, 11))
    written = ring.write(values)
    assert written == ring.block_size
    assert ring.read() == values[:written]


def test_fifo_order_and_wraparound():
    ring = RingBuffer(3, 2)
    ring.write([1])
    ring.write([2])
    assert ring.read() == [1]
    ring.write([3])
    ring.write([4])
    assert [ring.read(), ring.read(), ring.read()] == [[2], [3], [4]]
    assert ring.is_empty() is True


def test_full_buffer_is_not_empty():
    ring = RingBuffer(2, 2)
    ring.write([1])
    ring.write([2])
    assert ring.is_empty() is False


def test_read_times_out_on_empty():
    ring = RingBuffer(2, 2)
    start = time.monotonic()
    assert ring.read(timeout=0.05) is None
    assert time.monotonic() - start >= 0.04
    assert ring.read_block(timeout=0.01) is None
    assert ring.read_bytes(4, timeout=0.01) is None


def test_write_block_and_read_block():
    ring = RingBuffer(2, 5)
    ring.write_block(Block([7, 8, 9, 0, 0], size=3))
    block = ring.read_block()
    assert block.size == 3
    assert block.items == [7, 8, 9]


def test_write_block_rejects_oversized():
    ring = RingBuffer(2, 2)
    with pytest.raises(ValueError):
        ring.write_block(Block([1, 2, 3]))


def test_block_rejects_bad_size():
    with pytest.raises(ValueError):
        Block([1, 2], size=3)


def test_written_block_is_copied():
    ring = RingBuffer(2, 4)
    data = [1, 2]
    ring.write_block(Block(data))
    data.append(3)
    assert ring.read() == [1, 2]


def test_read_bytes_limits_size():
    ring = RingBuffer(2, 8)
    payload = b"abcdef"
    ring.write(payload)
    assert ring.read_bytes(3) == payload[:3]
    ring.write(payload)
    assert ring.read_bytes(100) == payload


def test_writer_blocks_until_slot_frees():
    ring = RingBuffer(1, 2)
    ring.write([1])
    done = threading.Event()

    def writer():
        ring.write([2])
        done.set()

    thread = threading.Thread(target=writer)
    thread.start()
    assert done.wait(0.1) is False
    assert ring.read() == [1]
    assert done.wait(2.0) is True
    thread.join()
    assert ring.read() == [2]


def test_reader_wakes_on_write():
    ring = RingBuffer(2, 3)
    results = []
    thread = threading.Thread(target=lambda: results.append(ring.read(timeout=2.0)))
    thread.start()
    time.sleep(0.05)
    written = ring.write(["x"])
    thread.join()
    assert written == 1
    assert results == [["x"]]
    assert ring.is_empty() is True


def test_invalid_construction():
    with pytest.raises(ValueError):
        RingBuffer(0, 4)
    with pytest.raises(ValueError):
        RingBuffer(4, 0)


def test_main_runs_demo(capsys):
    assert main(["--duration", "0.3", "--interval", "0.05"]) == 0
    out = capsys.readouterr().out
    assert "1 2 3 4 5 6 7 8 9 10 " in out
    assert "Leaving producer thread" in out
    assert "Leaving consumer thread" in out