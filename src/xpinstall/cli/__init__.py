"""Command-line interface."""

from .install import install_command, main

__all__ = ["install_command", "main"]
