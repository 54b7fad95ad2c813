"""Command-line frontend for running boards."""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
