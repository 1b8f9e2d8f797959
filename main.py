"""Run catr from a checkout, without installing the `catr` script.

    python -m main -n notes.txt -

The packages live under `src/`, so this shim puts that directory on
`sys.path` before importing the CLI. Exit codes and output are the same as
the installed command.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
