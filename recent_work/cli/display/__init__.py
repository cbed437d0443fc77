"""Terminal display for CLI commands."""

from .CLIDisplay import CLIDisplay

__all__ = ["CLIDisplay"]
