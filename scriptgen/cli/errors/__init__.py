from .error_handler import cli_scriptgen_error_handler

__all__ = ("cli_scriptgen_error_handler",)
