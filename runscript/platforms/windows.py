from __future__ import annotations

from runscript.config.constants import (
    WINDOWS_DEFAULT_RUNNER,
    WINDOWS_RUNNER_FLAG,
    WINDOWS_SCRIPT_EXTENSION,
)

from .base import BaseOSAdapter


class WindowsAdapter(BaseOSAdapter):
    """cmd.exe batch files: no fail-on-error or echo directives."""

    script_extension = WINDOWS_SCRIPT_EXTENSION

    def default_runner(self) -> str:
        return WINDOWS_DEFAULT_RUNNER

    def runner_flags(self) -> list[str]:
        return [WINDOWS_RUNNER_FLAG]

    def cd_directive(self, directory: str) -> str:
        # /d also switches the current drive
        return f'cd /d "{directory}"'
