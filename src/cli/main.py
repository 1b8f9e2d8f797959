"""catr command line.

The resolver half of the program: turns argv into a `Configuration`, rejects
conflicting numbering flags before any input is touched, then hands off to
the emitter once.
"""

from __future__ import annotations

import sys

import typer
from pydantic import ValidationError

from cli.ui_components import build_stderr_console, print_fatal, print_open_failure
from core.config import AppSettings
from core.domain.models import Configuration
from core.domain.numbering import ConflictingFlagsError
from core.log import configure_logging, get_logger
from core.services.line_emitter import EmitterHooks, StreamReadError, emit

__version__ = "0.1.0"

PROG_NAME = "catr"

EXIT_READ_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

app = typer.Typer(
    add_completion=False,
    help="Concatenate FILE(s) to standard output. With no FILE, or when FILE is -, read standard input.",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_log = get_logger("cli")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


@app.command()
def cat(
    ctx: typer.Context,
    files: list[str] | None = typer.Argument(
        None,
        metavar="[FILE]...",
        help="Input files; '-' reads standard input.",
        show_default=False,
    ),
    number: bool = typer.Option(False, "--number", "-n", help="Number all output lines."),
    number_nonblank: bool = typer.Option(
        False,
        "--number-nonblank",
        "-b",
        help="Number non-blank output lines (conflicts with -n).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logs on standard error."),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Concatenate files and print them on standard output."""

    try:
        config = Configuration.from_flags(
            files,
            number_lines=number,
            number_nonblank_lines=number_nonblank,
        )
    except ConflictingFlagsError as exc:
        raise typer.BadParameter(str(exc), ctx=ctx) from exc

    err_console = build_stderr_console()
    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_fatal(err_console, f"invalid configuration: {exc.errors()[0]['msg']}")
        raise typer.Exit(code=EXIT_USAGE) from exc

    configure_logging(verbose=verbose or settings.verbose)
    _log.debug(
        "Inputs: %s (number all: %s, number non-blank: %s)",
        ", ".join(config.inputs),
        config.number_all_lines,
        config.number_nonblank_lines,
    )

    hooks = EmitterHooks(open_failed=lambda failure: print_open_failure(err_console, failure))
    try:
        report = emit(config, out=sys.stdout, settings=settings, hooks=hooks)
    except StreamReadError as exc:
        sys.stdout.flush()
        print_fatal(err_console, str(exc))
        raise typer.Exit(code=EXIT_READ_ERROR) from exc
    except KeyboardInterrupt:
        raise typer.Exit(code=EXIT_INTERRUPTED) from None

    _log.debug(
        "Done: %d input(s), %d line(s), %d skipped%s",
        report.inputs_processed,
        report.lines_written,
        len(report.failures),
        "" if report.ok else " (see diagnostics above)",
    )


def run() -> None:
    app(prog_name=PROG_NAME)
