"""Command handling subpackage for the interpreter."""

from .command_parser import CommandParseError, CommandParser, CommandRequest, CommandType
from .command_processor import CommandProcessor
from .command_registry import CommandRegistry, create_default_registry

__all__ = [
    "CommandParseError",
    "CommandParser",
    "CommandRequest",
    "CommandType",
    "CommandProcessor",
    "CommandRegistry",
    "create_default_registry",
]
