import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from scriptgen.output import cli_fatal_abort, cli_message
from scriptgen.exceptions import ScriptGenError


@contextmanager
def cli_scriptgen_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit script generator errors as fatal ones."""
    try:
        yield
    except ScriptGenError as se:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(se))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except KeyboardInterrupt:
        print()
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
