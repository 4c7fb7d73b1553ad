from pathlib import Path

import pytest

from scriptgen.startup import compose_startup_script, first_command_token
from scriptgen.startup.errors import EmptyStartupCommandError


def test_compose_startup_script() -> None:
    script = compose_startup_script(Path("/app"), "./run.sh --port 80")

    lines = script.splitlines()
    assert lines[0] == "#!/bin/sh"
    assert "cd /app" in lines
    assert lines[-1] == "./run.sh --port 80"
    assert script.endswith("\n")


def test_compose_startup_script_quotes_directory() -> None:
    script = compose_startup_script(Path("/srv/my app"), "python main.py")
    assert "cd '/srv/my app'" in script.splitlines()


def test_compose_startup_script_strips_command() -> None:
    script = compose_startup_script(Path("/app"), "  npm start\n")
    assert script.splitlines()[-1] == "npm start"


@pytest.mark.parametrize("command", ["", "   ", "\n\t"])
def test_compose_startup_script_empty_command(command: str) -> None:
    with pytest.raises(EmptyStartupCommandError):
        compose_startup_script(Path("/app"), command)


def test_first_command_token() -> None:
    assert first_command_token("./run.sh --port 80") == "./run.sh"
    assert first_command_token("run.sh") == "run.sh"
    assert first_command_token("'my script.sh' arg") == "my script.sh"
    assert first_command_token("") == ""


def test_first_command_token_unbalanced_quotes() -> None:
    assert first_command_token("start.sh 'unterminated") == "start.sh"
