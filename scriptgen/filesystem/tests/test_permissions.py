import stat
import sys
from pathlib import Path

import pytest

from scriptgen.filesystem import (
    add_permission,
    parse_command_and_add_execution_permission,
)

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX mode bits")


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def test_add_permission_missing(tmp_path: Path) -> None:
    assert not add_permission(tmp_path / "missing", 0o755)


def test_add_permission_existing(tmp_path: Path) -> None:
    filepath = tmp_path / "run.sh"
    filepath.write_text("")

    assert add_permission(filepath, 0o700)
    assert _mode(filepath) == 0o700

    # Mode is replaced, not appended
    assert add_permission(filepath, 0o644)
    assert _mode(filepath) == 0o644


def test_parse_command_existing_file(tmp_path: Path) -> None:
    filepath = tmp_path / "run.sh"
    filepath.write_text("#!/bin/sh\n")
    filepath.chmod(0o644)

    assert parse_command_and_add_execution_permission("run.sh", tmp_path)
    assert _mode(filepath) == 0o755


def test_parse_command_nested_relative_file(tmp_path: Path) -> None:
    (tmp_path / "bin").mkdir()
    filepath = tmp_path / "bin" / "start"
    filepath.write_text("")
    filepath.chmod(0o600)

    assert parse_command_and_add_execution_permission("./bin/start", str(tmp_path))
    assert _mode(filepath) == 0o755


def test_parse_command_leading_separator_stays_in_source(tmp_path: Path) -> None:
    filepath = tmp_path / "run.sh"
    filepath.write_text("")
    filepath.chmod(0o644)

    assert parse_command_and_add_execution_permission("/run.sh", tmp_path)
    assert _mode(filepath) == 0o755


def test_parse_command_missing_file(tmp_path: Path) -> None:
    other = tmp_path / "other.sh"
    other.write_text("")
    other.chmod(0o644)

    assert not parse_command_and_add_execution_permission("run.sh", tmp_path)
    assert not (tmp_path / "run.sh").exists()
    assert _mode(other) == 0o644


def test_parse_command_directory(tmp_path: Path) -> None:
    directory = tmp_path / "run"
    directory.mkdir(mode=0o700)

    assert not parse_command_and_add_execution_permission("run", tmp_path)
    assert _mode(directory) == 0o700


def test_add_permission_empty_path_keeps_cwd(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    cwd.chmod(0o700)
    monkeypatch.chdir(cwd)

    assert not add_permission("", 0o750)
    assert _mode(cwd) == 0o700
