import stat
import sys
from pathlib import Path

import pytest

from scriptgen.filesystem import write_script
from scriptgen.filesystem.errors import ScriptWriteError

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX mode bits")


@posix_only
def test_write_script_content_and_mode(tmp_path: Path) -> None:
    filepath = tmp_path / "run.sh"
    content = "#!/bin/sh\necho hello\n"

    write_script(filepath, content)

    assert filepath.read_text() == content
    mode = stat.S_IMODE(filepath.stat().st_mode)
    assert mode == 0o755
    assert mode & stat.S_IXUSR


def test_write_script_bytes(tmp_path: Path) -> None:
    filepath = tmp_path / "run.sh"
    content = b"#!/bin/sh\nexit 0\n"

    write_script(filepath, content)
    assert filepath.read_bytes() == content


@posix_only
def test_write_script_truncates_existing(tmp_path: Path) -> None:
    filepath = tmp_path / "run.sh"
    filepath.write_text("#!/bin/sh\necho previous long content\n")
    filepath.chmod(0o600)

    write_script(filepath, "echo new\n")

    assert filepath.read_text() == "echo new\n"
    assert stat.S_IMODE(filepath.stat().st_mode) == 0o755


def test_write_script_emits_destination(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    filepath = tmp_path / "run.sh"
    write_script(filepath, "")

    out = capsys.readouterr().out
    assert out == f"[INFO] Writing output script to '{filepath}'\n"


def test_write_script_missing_parent(tmp_path: Path) -> None:
    filepath = tmp_path / "missing" / "run.sh"

    with pytest.raises(ScriptWriteError) as e:
        write_script(filepath, "echo\n")

    assert e.value.path == filepath
    assert isinstance(e.value.__cause__, OSError)
    assert not filepath.exists()
