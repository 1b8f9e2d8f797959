"""Terminal output helpers (Rich) for standard error.

Why separate:
- Keeps the command body free of presentation details.
- Standard output never goes through Rich: emitted lines must reach it
  byte-for-byte (no markup, no tab expansion, no wrapping).
"""

from __future__ import annotations

from rich.console import Console

from core.domain.models import OpenFailure


def build_stderr_console() -> Console:
    return Console(stderr=True, emoji=False, highlight=False)


def _print_line(console: Console, text: str, style: str | None = None) -> None:
    console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)


def print_open_failure(console: Console, failure: OpenFailure) -> None:
    """One `Failed to open <name>: <reason>` line per skipped input."""

    _print_line(console, failure.message(), style="yellow")


def print_fatal(console: Console, message: str) -> None:
    _print_line(console, f"catr: {message}", style="bold red")
