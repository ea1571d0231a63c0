"""Options and errors shared by the script runner."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class IoOptions(str, Enum):
    """How a child stream is connected to the calling process."""

    NULL = "null"
    INHERIT = "inherit"
    PIPE = "pipe"


class ScriptOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    runner: str | None = Field(
        default=None,
        description="Interpreter used instead of the platform shell",
    )
    exit_on_error: bool = Field(
        default=False, description="Abort the script on the first failing command"
    )
    print_commands: bool = Field(
        default=False, description="Echo each command before it runs"
    )
    capture_input: IoOptions = Field(
        default=IoOptions.INHERIT, description="stdin policy for the child"
    )
    capture_output: IoOptions = Field(
        default=IoOptions.PIPE, description="stdout/stderr policy for the child"
    )
    working_directory: Path | None = Field(
        default=None,
        description="Directory the script runs in; the caller's cwd when unset",
    )
    env_vars: dict[str, str] | None = Field(
        default=None, description="Extra environment variables for the child"
    )


class ScriptError(Exception):
    """Base error for every failure while staging or running a script."""


class ScriptIOError(ScriptError):
    """Operating system error raised while staging, launching or waiting."""

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(str(error))


class ScriptDescriptionError(ScriptError):
    """Failure described only by a message."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)
