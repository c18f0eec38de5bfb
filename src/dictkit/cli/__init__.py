"""
CLI module for dictkit.

Provides the command-line interface using Click.
"""

from dictkit.cli.main import cli, main

__all__ = ["main", "cli"]
