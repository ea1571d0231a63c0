from __future__ import annotations

import io
import os
import shlex
from pathlib import Path

import pytest

from runscript.cli import build_parser, main

pytestmark = [
    pytest.mark.usefixtures("restore_root_logging"),
    pytest.mark.skipif(os.name == "nt", reason="requires a POSIX shell"),
]


def _script(tmp_path: Path, text: str) -> str:
    path = tmp_path / "script.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_parser_collects_trailing_args():
    args = build_parser().parse_args(["--exit-on-error", "s.sh", "a", "--b"])
    assert args.script == "s.sh"
    assert args.args == ["a", "--b"]
    assert args.exit_on_error is True


def test_main_returns_script_exit_code(tmp_path: Path):
    assert main([_script(tmp_path, "exit 5")]) == 5


def test_main_passes_arguments(tmp_path: Path):
    out = tmp_path / "out.txt"
    path = _script(tmp_path, f'echo "$1 $2" > {shlex.quote(str(out))}')
    assert main([path, "one", "two"]) == 0
    assert out.read_text(encoding="utf-8").strip() == "one two"


def test_main_exit_on_error(tmp_path: Path):
    out = tmp_path / "out.txt"
    path = _script(tmp_path, f"false\ntouch {shlex.quote(str(out))}")
    assert main(["--exit-on-error", path]) != 0
    assert not out.exists()


def test_main_reads_stdin(tmp_path: Path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("exit 9\n"))
    assert main(["-"]) == 9


def test_main_missing_script(tmp_path: Path):
    assert main(["--log-format", "json", str(tmp_path / "missing.sh")]) == 1


def test_main_launch_failure(tmp_path: Path):
    path = _script(tmp_path, "exit 0")
    assert main(["--runner", str(tmp_path / "nope"), path]) == 1


def test_main_runs_non_utf8_script(tmp_path: Path):
    out = tmp_path / "out.bin"
    path = tmp_path / "latin1.sh"
    path.write_bytes(
        b"printf 'caf\xe9' > " + shlex.quote(str(out)).encode() + b"\nexit 0\n"
    )
    assert main([str(path)]) == 0
    assert out.read_bytes() == b"caf\xe9"


def test_main_maps_signal_death_to_one(tmp_path: Path):
    assert main([_script(tmp_path, "kill -9 $$")]) == 1
