"""Entry point for CLI.

Only for calling via `python -m scriptgen`, which is considered as bad practice.
"""

from scriptgen.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
