"""Startup script composition from application directory and user startup command."""

from .script import compose_startup_script, first_command_token

__all__ = (
    "compose_startup_script",
    "first_command_token",
)
