"""Constants shared across toolchain."""

# Owner may read, write and execute; group and others may read and execute
DEFAULT_SCRIPT_PERMISSIONS = 0o755

DEFAULT_SCRIPT_SHEBANG = "#!/bin/sh"
DEFAULT_SCRIPT_OUTPUT = "run.sh"
DEFAULT_APP_PATH = "."
