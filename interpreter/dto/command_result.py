"""DTO for the outcome of a single command."""

from typing import Any

from pydantic import BaseModel, Field


class CommandResult(BaseModel):
    """Outcome of one command: result lines on success, one message on failure.

    Attributes:
        command: The command line as it was received.
        lines: Result lines in output order (empty on failure).
        error: Human-readable error message, None on success.
    """

    command: str
    lines: list[str] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, command: str, lines: list[str]) -> "CommandResult":
        return cls(command=command, lines=list(lines))

    @classmethod
    def failure(cls, command: str, message: str) -> "CommandResult":
        return cls(command=command, error=message)

    def render(self) -> str:
        """Newline-joined result lines, or the error message."""
        if self.error is not None:
            return self.error
        return "\n".join(self.lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        result: dict[str, Any] = {"command": self.command, "lines": list(self.lines)}
        if self.error is not None:
            result["error"] = self.error
        return result
