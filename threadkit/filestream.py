"""File streams that open on construction and close when done."""

from __future__ import annotations

import os
from typing import IO, Any, Iterable, Union

PathLike = Union[str, "os.PathLike[str]"]


class FileStream:
    """Owns an open file. Failure to open leaves the stream closed rather than raising."""

    def __init__(self, path: PathLike, mode: str) -> None:
        self._path = os.fspath(path)
        self._mode = mode
        self._file: IO[Any] | None
        try:
            if "b" in mode:
                self._file = open(self._path, mode)
            else:
                self._file = open(self._path, mode, encoding="utf-8", newline="")
        except OSError:
            self._file = None

    @property
    def path(self) -> str:
        return self._path

    def _require_open(self) -> IO[Any]:
        if self._file is None or self._file.closed:
            raise OSError(f"file is not open: {self._path}")
        return self._file

    def is_open(self) -> bool:
        """Return whether the underlying file is open."""
        return self._file is not None and not self._file.closed

    def size(self) -> int:
        """Return the file size in bytes, leaving the current position unchanged."""
        file = self._require_open()
        pos = file.tell()
        file.seek(0, os.SEEK_END)
        end = file.tell()
        file.seek(pos)
        return int(end)

    def close(self) -> None:
        """Close the file; closing twice is harmless."""
        if self._file is not None:
            self._file.close()

    def __enter__(self) -> "FileStream":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class OutputFileStream(FileStream):
    """Writable stream of bytes (``binary``) or text; truncates unless ``append``."""

    def __init__(self, path: PathLike, binary: bool = False, append: bool = False) -> None:
        mode = ("a" if append else "w") + ("b" if binary else "")
        super().__init__(path, mode)
        self._binary = binary

    def write(self, data: Any) -> None:
        """Write a chunk: bytes or ints for binary streams, a string or strings for text."""
        file = self._require_open()
        if self._binary:
            file.write(bytes(data))
        elif isinstance(data, str):
            file.write(data)
        else:
            file.write("".join(data))


class InputFileStream(FileStream):
    """Readable stream of bytes (``binary``) or text."""

    def __init__(self, path: PathLike, binary: bool = False) -> None:
        super().__init__(path, "rb" if binary else "r")
        self._binary = binary

    def read_all(self) -> Any:
        """Read the whole file from its beginning.

        Raises OSError when the stream is not open.
        """
        file = self._require_open()
        file.seek(0)
        return file.read()


class BinaryOutputFileStream(OutputFileStream):
    """Output stream of raw bytes."""

    def __init__(self, path: PathLike, append: bool = False) -> None:
        super().__init__(path, binary=True, append=append)


class CharOutputFileStream(OutputFileStream):
    """Output stream of text."""

    def __init__(self, path: PathLike, append: bool = False) -> None:
        super().__init__(path, binary=False, append=append)


class BinaryInputFileStream(InputFileStream):
    """Input stream of raw bytes."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(path, binary=True)


class CharInputFileStream(InputFileStream):
    """Input stream of text."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(path, binary=False)


def _join(parts: Iterable[str]) -> str:
    return "".join(parts)