"""Line emission service.

This module holds the only real policy in catr: how each line is rendered
for the active `NumberingMode`, and how failures are isolated per input.
Printing diagnostics is delegated to hooks so the CLI owns the terminal and
tests can capture everything in memory.

Per input: Unopened -> Opened -> Streaming -> Done, or Unopened -> OpenFailed
(skipped). A read error while streaming is not recovered: it propagates as
`StreamReadError` and the remaining inputs are never reached.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from adapters.line_sources import open_line_source
from core.config import AppSettings
from core.domain.models import Configuration, EmitReport, OpenFailure
from core.domain.numbering import NumberingMode
from core.interfaces.line_source import LineSource
from core.log import get_logger

_log = get_logger("core.services.line_emitter")

NUMBER_WIDTH = 6

SourceOpener = Callable[[str], LineSource]


class StreamReadError(Exception):
    """Reading an already opened input failed (bad encoding, I/O error)."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


@dataclass
class EmitterHooks:
    """Optional callbacks for UI layers."""

    open_failed: Callable[[OpenFailure], None] | None = None


def format_numbered(number: int, line: str) -> str:
    return f"{number:>{NUMBER_WIDTH}}\t{line}"


def render_lines(lines: Iterable[str], mode: NumberingMode) -> Iterator[str]:
    """Apply the display rule of `mode` to one input's lines.

    Counters start at 1 on every call, so numbering restarts per input.
    Yielded strings carry no trailing newline.
    """

    if mode is NumberingMode.NUMBER_ALL:
        for number, line in enumerate(lines, start=1):
            yield format_numbered(number, line)
    elif mode is NumberingMode.NUMBER_NONBLANK:
        number = 0
        for line in lines:
            if not line:
                yield ""
                continue
            number += 1
            yield format_numbered(number, line)
    else:
        yield from lines


def _reason(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def _checked(name: str, lines: Iterable[str]) -> Iterator[str]:
    # Only failures of the source itself count as read errors; write errors on
    # `out` propagate untouched.
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except (UnicodeDecodeError, OSError) as exc:
            raise StreamReadError(name, _reason(exc)) from exc
        yield line


def emit(
    config: Configuration,
    *,
    out: TextIO | None = None,
    opener: SourceOpener | None = None,
    settings: AppSettings | None = None,
    hooks: EmitterHooks | None = None,
) -> EmitReport:
    """Process every input of `config` in order, writing rendered lines to `out`.

    Open failures are reported through `hooks.open_failed` (or standard error
    when no hook is given) and skipped. Raises `StreamReadError` on a
    mid-stream read failure.
    """

    out = out if out is not None else sys.stdout
    hooks = hooks or EmitterHooks()
    if opener is None:
        encoding = (settings or AppSettings()).encoding
        opener = lambda name: open_line_source(name, encoding=encoding)  # noqa: E731

    report = EmitReport()
    _log.debug("Emitting %d input(s), mode: %s", len(config.inputs), config.mode.label())

    for name in config.inputs:
        try:
            source = opener(name)
        except OSError as exc:
            failure = OpenFailure(name=name, reason=_reason(exc))
            report.failures.append(failure)
            _log.debug("Skipping %s: %s", name, failure.reason)
            if hooks.open_failed is not None:
                hooks.open_failed(failure)
            else:
                print(failure.message(), file=sys.stderr)
            continue

        written = 0
        with source:
            for rendered in render_lines(_checked(name, source.lines()), config.mode):
                out.write(rendered + "\n")
                written += 1

        report.inputs_processed += 1
        report.lines_written += written
        _log.debug("Finished %s: %d line(s)", name, written)

    out.flush()
    return report
