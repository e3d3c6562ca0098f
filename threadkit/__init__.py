"""Thread synchronisation primitives, producer/consumer buffers, file streams, timing and logging helpers."""

__version__ = "0.1.0"