"""Line-oriented command interpreter for the parking lot."""

from .commands import CommandParser, CommandProcessor, CommandRequest, CommandType
from .config import RunnerConfig
from .dto import CommandResult
from .runner import CommandRunner

__all__ = [
    "CommandParser",
    "CommandProcessor",
    "CommandRequest",
    "CommandResult",
    "CommandRunner",
    "CommandType",
    "RunnerConfig",
]
