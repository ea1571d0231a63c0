from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from runscript.types import ScriptOptions


class OSAdapter(Protocol):
    script_extension: str

    def default_runner(self) -> str: ...
    def script_command(
        self, script_path: str, options: ScriptOptions, args: Sequence[str]
    ) -> list[str]: ...
    def shell_directives(self, options: ScriptOptions) -> list[str]: ...
    def cd_directive(self, directory: str) -> str: ...
    def user_temp_subpath(self) -> str | None: ...
    def terminate_process(self, proc: Any) -> None: ...


class BaseOSAdapter:
    script_extension: str = ""

    def default_runner(self) -> str:
        raise NotImplementedError

    def runner_flags(self) -> list[str]:
        """Arguments placed between the default runner and the script path."""
        return []

    def script_command(
        self, script_path: str, options: ScriptOptions, args: Sequence[str]
    ) -> list[str]:
        """Build argv that executes a staged script file.

        A custom runner gets the script path as its only leading argument; the
        caller's args always follow and become the script's positional parameters.
        """
        if options.runner:
            argv = [options.runner, script_path]
        else:
            argv = [self.default_runner(), *self.runner_flags(), script_path]
        argv.extend(str(arg) for arg in args)
        return argv

    def shell_directives(self, options: ScriptOptions) -> list[str]:
        return []

    def cd_directive(self, directory: str) -> str:
        raise NotImplementedError

    def user_temp_subpath(self) -> str | None:
        return None

    def terminate_process(self, proc: Any) -> None:
        """Best-effort kill of a spawned script process."""
        try:
            proc.kill()
        except OSError:
            pass
