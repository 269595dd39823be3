"""CLI command implementations for the casework application.

This package contains subcommands for the casework CLI, including:
- validate: Validate a configuration file
"""

from casework.cli.commands.validate import validate_command

__all__ = ["validate_command"]
