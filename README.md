# threadkit

A small toolbox for multi-threaded Python programs. It has no dependencies
beyond the standard library.

## What is in it

- `threadkit.commons`: `to_utype` (the value of an enum member) and
  `string_format` (printf-style formatting that raises `RuntimeError` when the
  arguments do not fit the format).
- `threadkit.monitor`: `Monitor`, a lock plus a condition. `wait` and
  `wait_for` block on a predicate and hand back a guard still holding the lock;
  `notify_one` and `notify_all` run a function under the lock, then wake one or
  every waiter.
- `threadkit.event`: `Event` (`wait`, `wait_for` returning an `EventWait`,
  `notify`, `broadcast`, `reset`) and `MonitorEvent` (`wait`, `wait_for`
  returning a bool, `signal`, `broadcast`). With `auto_reset` the event clears
  itself once the last waiting thread has been released.
- `threadkit.lockfree_event`: `LockFreeEvent`, a single-producer,
  single-consumer event with `notify`, `wait`, `wait_for`, `wait_until` (a
  `time.monotonic()` deadline) and `wait_and_then`; plus `remained_time`.
- `threadkit.ring_buffer`: `RingBuffer`, a fixed number of blocks of at most
  `block_size` elements, guarded by two semaphores. `write` / `write_block`
  wait for a free slot; `read`, `read_block` and `read_bytes` wait for data,
  returning `None` if the optional timeout passes first.
- `threadkit.audio_pipeline`: `AudioDataResult`, which hands chunks from a
  generator to a consumer one at a time (`receive`, `resume`, `close`), and the
  helpers `producer`, `consumer` and `format_container`.
- `threadkit.filestream`: `FileStream`, `InputFileStream`, `OutputFileStream`
  and the `Binary*` / `Char*` variants. A file that cannot be opened leaves the
  stream closed (`is_open()` is false) instead of raising; all are context
  managers.
- `threadkit.elapsed`: `ElapsedTime` (`start` / `stop`), the `Stopwatch`
  context manager (its `elapsed` attribute) and `elapsed_time(func, ...)`,
  which returns the result together with the milliseconds it took.
- `threadkit.logging_helper`: `to_str` for log arguments, `is_string`,
  `append_subchannels` and `generate_log_tag`.
- `threadkit.logger`: `LogVerbosity`, `Logger`, `LoggerWithTag`, `LoggerBase`,
  `CoutLogger` (writes `<tag>: message` lines; errors go to standard error,
  other messages below its `level` are dropped), `ConsoleLogger`,
  `LoggingMerge` (logs to several loggers at once) and the `DataLogger`
  interface.
- `threadkit.logger_wrapper`: `LoggerWrapper`, with `log_<level>`,
  `log_<level>_with_func`, `log_<level>_args_with_func`,
  `log_<level>_formatted` and `log_<level>_formatted_with_func` for each of
  trace, debug, info, warning and error.
- `threadkit.file_logger`: `FileLogger`, which caches logged items and writes
  them to an output stream from a background thread; closing flushes the cache,
  stops the thread and closes the stream.

Timeouts throughout are in seconds.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

printf-style formatting and log tags:

```python
from threadkit.commons import string_format
from threadkit.logging_helper import generate_log_tag

string_format("%d-%s", 1, "a")            # '1-a'
generate_log_tag("app", "channel", "sub")  # 'app:channel.sub'
```

Signalling between threads:

```python
import threading
from threadkit.event import Event

event = Event(auto_reset=True)
worker = threading.Thread(target=event.wait)
worker.start()
event.notify()
worker.join()
```

Writing and reading a binary file:

```python
from threadkit.filestream import BinaryInputFileStream, BinaryOutputFileStream

with BinaryOutputFileStream("data.bin") as out:
    out.write(b"\x01\x02\x03")

with BinaryInputFileStream("data.bin") as src:
    print(src.size(), src.read_all())  # 3 b'\x01\x02\x03'
```

Producing and consuming blocks:

```python
from threadkit.ring_buffer import RingBuffer

buffer = RingBuffer(blocks=5, block_size=10)
written = buffer.write(range(1, 17))  # at most block_size items go into one block
print(written, buffer.is_empty())     # 10 False
print(buffer.read(timeout=1.0))       # [1, 2, ..., 10]
```

Logging with a tag:

```python
from threadkit.logger import CoutLogger
from threadkit.logger_wrapper import LoggerWrapper

log = LoggerWrapper(CoutLogger, "app:channel")
log.log_info_with_func("main", "started")  # <app:channel>: [main] started
```

## Demo commands

```
threadkit-event-demo [--delay MS] [--timeout MS] [--wait]
threadkit-ring-buffer-demo [--duration SECONDS] [--interval SECONDS]
threadkit-audio-demo [--repeat N]
```

- `threadkit-event-demo`: one thread signals a `LockFreeEvent` after a delay,
  another waits on it with a timeout (or without one, with `--wait`) and prints
  how long it waited.
- `threadkit-ring-buffer-demo`: a producer and a consumer share a `RingBuffer`
  for the given duration, printing each block read.
- `threadkit-audio-demo`: a producer hands the chunk `[1, 2, 3, 4]` to a
  consumer thread `--repeat` times, then an empty chunk that ends it.

## What it does not do

- The loggers write to text streams (standard output and error by default);
  there is no system or platform log back end.
- `FileLogger` runs its background thread with the interpreter's defaults; it
  offers no scheduling policy or thread priority settings.