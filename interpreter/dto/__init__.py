"""DTOs for the command interpreter."""

from .command_result import CommandResult

__all__ = ["CommandResult"]
