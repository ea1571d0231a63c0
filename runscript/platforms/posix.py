from __future__ import annotations

import os
import shlex

from runscript.config.constants import POSIX_DEFAULT_RUNNER, POSIX_SCRIPT_EXTENSION
from runscript.types import ScriptOptions

from .base import BaseOSAdapter


class PosixAdapter(BaseOSAdapter):
    script_extension = POSIX_SCRIPT_EXTENSION

    def default_runner(self) -> str:
        # sh treats its first positional argument as a script file
        return POSIX_DEFAULT_RUNNER

    def shell_directives(self, options: ScriptOptions) -> list[str]:
        directives: list[str] = []
        if options.exit_on_error:
            directives.append("set -e")
        if options.print_commands:
            directives.append("set -x")
        return directives

    def cd_directive(self, directory: str) -> str:
        return f"cd {shlex.quote(directory)}"

    def user_temp_subpath(self) -> str | None:
        # Login name from the passwd database; omitted when it can't be resolved
        try:
            import pwd

            return pwd.getpwuid(os.getuid()).pw_name or None
        except (ImportError, KeyError, AttributeError):
            return None
