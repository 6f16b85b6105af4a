# tests/test_cli.py
from __future__ import annotations

import io
import os
import subprocess
import sys
from pathlib import Path

import pytest

from charprobe.cli import description_of, main


def test_cli_detects_file(tmp_path: Path, capsys):
    f = tmp_path / "test.txt"
    f.write_bytes(b"Hello world")
    main([str(f)])
    assert capsys.readouterr().out == f"{f}: ASCII with confidence 1.0\n"


def test_cli_detects_utf8_file(tmp_path: Path, capsys):
    f = tmp_path / "test.txt"
    f.write_bytes("Héllo wörld".encode())
    main([str(f)])
    assert "UTF-8" in capsys.readouterr().out


def test_cli_minimal_flag(tmp_path: Path, capsys):
    f = tmp_path / "test.txt"
    f.write_bytes(b"\xef\xbb\xbfHello")
    main(["--minimal", str(f)])
    assert capsys.readouterr().out == "UTF-8\n"


def test_cli_multiple_files(tmp_path: Path, capsys):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_bytes(b"Hello")
    b.write_bytes(b"\xff\xfeH\x00i\x00")
    main(["--minimal", str(a), str(b)])
    assert capsys.readouterr().out == "ASCII\nUTF-16LE\n"


def test_cli_missing_file(tmp_path: Path, capsys):
    good = tmp_path / "good.txt"
    good.write_bytes(b"Hello")
    missing = tmp_path / "missing.txt"
    with pytest.raises(SystemExit) as exc_info:
        main([str(missing), str(good)])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert str(missing) in captured.err
    assert f"{good}: ASCII" in captured.out


def test_cli_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"Hello world")))
    main([])
    assert capsys.readouterr().out == "stdin: ASCII with confidence 1.0\n"


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "charprobe 1.0.0" in capsys.readouterr().out


def test_cli_verbose_logs(tmp_path: Path):
    f = tmp_path / "test.txt"
    f.write_bytes(b"\xef\xbb\xbfHello")
    src = Path(__file__).parent.parent / "src"
    result = subprocess.run(
        [sys.executable, "-m", "charprobe.cli", "--verbose", str(f)],
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": str(src)},
    )
    assert result.returncode == 0
    assert "UTF-8 with confidence 1.0" in result.stdout
    assert "BOM found" in result.stderr


def test_description_of_no_verdict():
    stream = io.BytesIO(b"a\x1bb")
    assert description_of(stream, "blob") == "blob: None with confidence 0.0"
    assert description_of(io.BytesIO(b""), minimal=True) == "None"
