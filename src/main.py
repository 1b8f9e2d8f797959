"""`python -m main` from inside `src/`.

Same command as the `catr` console script.
"""

from __future__ import annotations

import sys

# Numbered lines and `Failed to open` diagnostics may carry non-ASCII file
# content or names; cp1252 consoles would raise UnicodeEncodeError on them.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
