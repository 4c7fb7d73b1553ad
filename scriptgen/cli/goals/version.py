import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from scriptgen.cli.parser.arguments import CLIArguments
from scriptgen.consts import DEFAULT_SCRIPT_PERMISSIONS, DEFAULT_SCRIPT_SHEBANG


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and generator."""
    print("[Startup script generator]")
    print(f"\tVersion: {_get_package_version()}")
    print(f"\tShebang: {DEFAULT_SCRIPT_SHEBANG}")
    print(f"\tScript mode: {DEFAULT_SCRIPT_PERMISSIONS:#o}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    if args.verbose:
        print(f"\tExecutable: {sys.executable}")
    return sys.exit(0)


def _get_package_version() -> str:
    try:
        return version("scriptgen")
    except PackageNotFoundError:
        return "unknown (not installed)"
