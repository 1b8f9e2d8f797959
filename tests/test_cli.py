import os
import shutil
import stat
import subprocess
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cli.main import __version__, app

PROJECT_ROOT = Path(__file__).resolve().parents[1]

runner = CliRunner()


def test_plain_concatenation(write_file):
    a = write_file("a.txt", "one\ntwo\n")
    b = write_file("b.txt", "three")
    result = runner.invoke(app, [str(a), str(b)])
    assert result.exit_code == 0
    assert result.stdout == "one\ntwo\nthree\n"
    assert result.stderr == ""


def test_number_nonblank_poem(poem):
    result = runner.invoke(app, ["-b", str(poem)])
    assert result.exit_code == 0
    assert result.stdout == "     1\tLa la la\n\n     2\tLa la\n"


def test_number_all_long_flag(poem):
    result = runner.invoke(app, ["--number", str(poem)])
    assert result.exit_code == 0
    assert result.stdout == "     1\tLa la la\n     2\t\n     3\tLa la\n"


def test_numbering_restarts_for_each_file(write_file):
    a = write_file("a.txt", "a1\na2\n")
    b = write_file("b.txt", "b1\n")
    result = runner.invoke(app, ["-n", str(a), str(b)])
    assert result.stdout == "     1\ta1\n     2\ta2\n     1\tb1\n"


def test_missing_file_is_skipped(tmp_path, write_file):
    missing = tmp_path / "missing.txt"
    b = write_file("b.txt", "x\ny\nz\n")
    result = runner.invoke(app, ["-n", str(missing), str(b)])
    assert result.exit_code == 0
    assert result.stdout == "     1\tx\n     2\ty\n     3\tz\n"
    assert f"Failed to open {missing}: No such file or directory" in result.stderr
    assert result.stderr.count("Failed to open") == 1


def test_conflicting_flags_are_a_usage_error(poem):
    result = runner.invoke(app, ["-n", "-b", str(poem)])
    assert result.exit_code == 2
    assert result.stdout == ""
    assert "mutually exclusive" in result.stderr


def test_conflict_checked_before_opening_inputs(tmp_path):
    result = runner.invoke(app, ["-b", "-n", str(tmp_path / "missing.txt")])
    assert result.exit_code == 2
    assert "Failed to open" not in result.stderr


def test_reads_stdin_by_default():
    result = runner.invoke(app, ["-b"], input="a\n\nb\n")
    assert result.exit_code == 0
    assert result.stdout == "     1\ta\n\n     2\tb\n"


def test_dash_reads_stdin_between_files(write_file):
    a = write_file("a.txt", "first\n")
    c = write_file("c.txt", "last\n")
    result = runner.invoke(app, [str(a), "-", str(c)], input="middle\n")
    assert result.stdout == "first\nmiddle\nlast\n"


def test_invalid_encoding_aborts_with_error(write_file):
    bad = write_file("bad.txt", b"ok\n\xff\xfe\n")
    after = write_file("after.txt", "unreached\n")
    result = runner.invoke(app, [str(bad), str(after)])
    assert result.exit_code == 1
    assert result.stdout == "ok\n"
    assert f"catr: {bad}:" in result.stderr


def test_encoding_from_environment(monkeypatch, write_file):
    monkeypatch.setenv("CATR_ENCODING", "latin-1")
    path = write_file("latin.txt", b"caf\xe9\n")
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 0
    assert result.stdout == "café\n"


def test_bad_encoding_setting_is_rejected(monkeypatch, poem):
    monkeypatch.setenv("CATR_ENCODING", "not-a-codec")
    result = runner.invoke(app, [str(poem)])
    assert result.exit_code == 2
    assert result.stdout == ""


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout == f"catr {__version__}\n"


def test_verbose_logs_stay_off_stdout(poem):
    result = runner.invoke(app, ["-v", str(poem)])
    assert result.exit_code == 0
    assert result.stdout == "La la la\n\nLa la\n"
    assert "Finished" in result.stderr
    assert "Done:" in result.stderr


def test_non_text_encoding_setting_is_rejected(monkeypatch, poem):
    monkeypatch.setenv("CATR_ENCODING", "base64")
    result = runner.invoke(app, [str(poem)])
    assert result.exit_code == 2
    assert result.stdout == ""
    assert "not a text encoding" in result.stderr


def test_utf16_setting_is_rejected_before_reading(monkeypatch, write_file):
    monkeypatch.setenv("CATR_ENCODING", "utf-16-le")
    path = write_file("wide.txt", "ab\ncd\n".encode("utf-16-le"))
    result = runner.invoke(app, ["-n", str(path)])
    assert result.exit_code == 2
    assert result.stdout == ""


def test_directory_input_is_skipped(tmp_path, write_file):
    a = write_file("a.txt", "a\n")
    folder = tmp_path / "folder"
    folder.mkdir()
    c = write_file("c.txt", "c\n")
    result = runner.invoke(app, ["-n", str(a), str(folder), str(c)])
    assert result.exit_code == 0
    assert result.stdout == "     1\ta\n     1\tc\n"
    assert f"Failed to open {folder}:" in result.stderr
    assert result.stderr.count("Failed to open") == 1


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root or on this platform",
)
def test_unreadable_input_is_skipped(write_file):
    locked = write_file("locked.txt", "secret\n")
    locked.chmod(0)
    b = write_file("b.txt", "open\n")
    try:
        result = runner.invoke(app, [str(locked), str(b)])
    finally:
        locked.chmod(stat.S_IRUSR | stat.S_IWUSR)
    assert result.exit_code == 0
    assert result.stdout == "open\n"
    assert f"Failed to open {locked}: Permission denied" in result.stderr


def _run(command, *args):
    return subprocess.run(
        [*command, *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_dev_entry_point_rejects_conflicting_flags(poem):
    result = _run([sys.executable, "-m", "main"], "-n", "-b", str(poem))
    assert result.returncode == 2
    assert result.stdout == ""
    assert "exclusive" in result.stderr
    assert "Traceback" not in result.stderr


def test_dev_entry_point_numbers_lines(poem):
    result = _run([sys.executable, "-m", "main"], "-b", str(poem))
    assert result.returncode == 0
    assert result.stdout == "     1\tLa la la\n\n     2\tLa la\n"


@pytest.mark.skipif(shutil.which("catr") is None, reason="catr console script not installed")
def test_installed_script_rejects_conflicting_flags(poem):
    result = _run([shutil.which("catr")], "-n", "-b", str(poem))
    assert result.returncode == 2
    assert result.stdout == ""
    assert "exclusive" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.skipif(shutil.which("catr") is None, reason="catr console script not installed")
def test_installed_script_skips_missing_input(tmp_path, poem):
    missing = tmp_path / "missing.txt"
    result = _run([shutil.which("catr")], str(missing), str(poem))
    assert result.returncode == 0
    assert result.stdout == "La la la\n\nLa la\n"
    assert f"Failed to open {missing}: No such file or directory" in result.stderr
