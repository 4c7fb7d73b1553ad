"""Command line interface for startup script generator."""
