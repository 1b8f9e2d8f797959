import logging
import os
import sys

import pytest

# Tests import the src-layout packages (cli, core, adapters) without an install.
SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def poem(write_file):
    return write_file("poem.txt", "La la la\n\nLa la")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("CATR_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _quiet_logs():
    # `--verbose` in one CLI test must not leak debug output into the next.
    yield
    logging.getLogger("catr").setLevel(logging.WARNING)
