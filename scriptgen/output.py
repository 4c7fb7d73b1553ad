"""User-facing console output shared by filesystem helpers and CLI."""

from __future__ import annotations

import sys
from typing import Literal, NoReturn

MessageLevel = Literal["INFO", "WARNING", "ERROR"]


def cli_message(
    level: MessageLevel,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit leveled message into console.

    Errors are always emitted (into stderr), other levels only when verbose.
    """
    if level != "ERROR" and not verbose:
        return
    stream = sys.stderr if level == "ERROR" else sys.stdout
    print(f"[{level}] {text}", file=stream)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error message and terminate whole process with failure exit code."""
    cli_message("ERROR", text)
    sys.exit(1)
