"""Line source adapters: standard input and files.

Why both live here:
- They are the two constructors of the `LineSource` contract; the emitter
  only sees the protocol.
- Reading is byte oriented and split on `\\n` only, so carriage returns stay
  part of the line content. Decoding is strict: undecodable bytes raise.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from core.domain.models import STDIN_NAME
from core.log import get_logger

_log = get_logger("adapters.line_sources")


def _decode_lines(stream: BinaryIO, encoding: str) -> Iterator[str]:
    for raw in stream:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        yield raw.decode(encoding)


class FileLineSource:
    """A file opened for reading on construction."""

    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self.name = str(path)
        self.encoding = encoding
        # Raises OSError right away; the caller treats that as an open failure.
        self._handle: BinaryIO | None = open(path, "rb")  # noqa: SIM115
        _log.debug("Opened %s", self.name)

    def lines(self) -> Iterator[str]:
        if self._handle is None:
            raise ValueError(f"{self.name} is closed")
        return _decode_lines(self._handle, self.encoding)

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            _log.debug("Closed %s", self.name)

    def __enter__(self) -> "FileLineSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class StdinLineSource:
    """Standard input as a line source. The process owns the stream, so it is never closed."""

    def __init__(self, stream: BinaryIO | None = None, *, encoding: str = "utf-8") -> None:
        self.name = STDIN_NAME
        self.encoding = encoding
        self._stream = stream

    def lines(self) -> Iterator[str]:
        stream = self._stream if self._stream is not None else sys.stdin.buffer
        return _decode_lines(stream, self.encoding)

    def close(self) -> None:
        return None

    def __enter__(self) -> "StdinLineSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_line_source(name: str, *, encoding: str = "utf-8") -> FileLineSource | StdinLineSource:
    """Resolve an input name: `-` is standard input, anything else a file path."""

    if name == STDIN_NAME:
        return StdinLineSource(encoding=encoding)
    return FileLineSource(name, encoding=encoding)
