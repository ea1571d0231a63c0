"""Rewrite script text before it is staged.

The rewritten script changes into the caller's working directory first, so it
behaves the same no matter where the staged file lives. POSIX shells also get
the ``set -e`` / ``set -x`` directives requested by the options. A leading
``#!`` line always stays first.
"""

from __future__ import annotations

import os

from runscript.config.constants import CWD_ERROR_MESSAGE
from runscript.platforms import OSAdapter, get_os_adapter
from runscript.types import ScriptDescriptionError, ScriptIOError, ScriptOptions
from runscript.utils.logger import get_logger

logger = get_logger("runscript.transformer")

SHEBANG = "#!"


def resolve_cwd(options: ScriptOptions, cwd: str | os.PathLike[str] | None = None) -> str:
    """Return the directory the script should observe as text.

    Raises:
        ScriptIOError: the current directory can't be read.
        ScriptDescriptionError: the directory isn't representable as UTF-8 text.
    """
    directory = cwd
    try:
        if options.working_directory is not None:
            # Absolute so the child's Popen cwd and the cd line agree
            directory = os.path.abspath(options.working_directory)
        elif directory is None:
            directory = os.getcwd()
    except OSError as error:
        raise ScriptIOError(error) from error

    text = os.fspath(directory)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as error:
        raise ScriptDescriptionError(CWD_ERROR_MESSAGE) from error
    return text


def modify_script(
    script: str,
    options: ScriptOptions,
    *,
    cwd: str | os.PathLike[str] | None = None,
    adapter: OSAdapter | None = None,
) -> str:
    adapter = adapter or get_os_adapter()
    cd_command = adapter.cd_directive(resolve_cwd(options, cwd))

    script_lines = script.strip().split("\n")

    insert_index = 1 if script_lines[0].startswith(SHEBANG) else 0

    for directive in adapter.shell_directives(options):
        script_lines.insert(insert_index, directive)
        insert_index += 1

    script_lines.insert(insert_index, cd_command)
    script_lines.append("\n")

    logger.debug("Script transformed", lines=len(script_lines), cd=cd_command)
    return "\n".join(script_lines)
