"""Contract for readable line streams.

Why a Protocol:
- Standard input and files are two constructors of the same capability; the
  emitter iterates lines without knowing where they come from.
- Tests can pass any object with the same shape (e.g. an in-memory source).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSource(Protocol):
    """An opened input yielding decoded lines.

    Rules:
    - The source is already open when handed to the emitter; open failures
      happen before a `LineSource` exists.
    - `lines()` yields each line without its trailing newline.
    - Used as a context manager; leaving the block releases the handle.
    """

    name: str

    def lines(self) -> Iterator[str]:
        ...

    def close(self) -> None:
        ...

    def __enter__(self) -> "LineSource":
        ...

    def __exit__(self, *exc_info: object) -> None:
        ...
