"""Pydantic model for runner configuration."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class RunnerConfig(BaseModel):
    """Settings for a command session.

    Attributes:
        input_path: Batch file of commands; None reads interactively from stdin.
        log_level: Logging level name for the session's diagnostics.
        echo_commands: Print each command before its result. Defaults to on in
            batch mode and off interactively.
    """

    input_path: Path | None = Field(default=None, description="Batch command file")
    log_level: str = Field(default="WARNING", description="Logging level name")
    echo_commands: bool | None = Field(default=None, description="Echo commands before results")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got: {v}")
        return level

    @model_validator(mode="after")
    def default_echo(self) -> "RunnerConfig":
        """Resolve echo_commands from the input mode when it was not given."""
        if self.echo_commands is None:
            self.echo_commands = self.input_path is not None
        return self

    @property
    def interactive(self) -> bool:
        return self.input_path is None
