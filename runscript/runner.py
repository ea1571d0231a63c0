"""Run shell scripts given as text.

``run`` blocks until the script finishes and returns
``(exit_code, stdout, stderr)``. ``spawn`` returns the running
``subprocess.Popen`` right after launch.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from runscript.launcher import launch
from runscript.platforms import get_os_adapter
from runscript.staging import StagedScript, create_script_file
from runscript.transformer import modify_script
from runscript.types import ScriptIOError, ScriptOptions
from runscript.utils.logger import get_logger

logger = get_logger("runscript.runner")


def exit_code(returncode: int | None) -> int:
    """Normalize a process return code.

    0 on success, the OS exit code on failure, -1 when the process was killed
    by a signal and has no exit code.
    """
    if returncode == 0:
        return 0
    if returncode is None or returncode < 0:
        return -1
    return returncode


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def collect(process: subprocess.Popen, staged: StagedScript) -> tuple[int, str, str]:
    """Wait for the process, decode its output and remove the staged file."""
    with staged:
        try:
            stdout, stderr = process.communicate()
        except OSError as error:
            raise ScriptIOError(error) from error

    code = exit_code(process.returncode)
    logger.debug("Script finished", path=str(staged.path), exit_code=code)
    return code, _decode(stdout), _decode(stderr)


def spawn_script(
    script: str,
    args: Sequence[str] | None = None,
    options: ScriptOptions | None = None,
) -> tuple[subprocess.Popen, StagedScript]:
    """Stage and launch a script, returning the process and its staged file.

    The caller owns the staged file and should call ``staged.cleanup()`` once
    the process is done with it.
    """
    options = options or ScriptOptions()
    adapter = get_os_adapter()

    updated_script = modify_script(script, options, adapter=adapter)
    staged = create_script_file(updated_script, adapter=adapter)
    process = launch(staged, args or [], options, adapter=adapter)
    return process, staged


def spawn(
    script: str,
    args: Sequence[str] | None = None,
    options: ScriptOptions | None = None,
) -> subprocess.Popen:
    """Invoke the script and return a handle to the running process.

    The staged script file is not removed once the process ends. Use
    ``spawn_script`` to get hold of it for cleanup.

    Args:
        script: The script content
        args: Command line arguments passed to the script
        options: Options provided to the script runner
    """
    process, _ = spawn_script(script, args, options)
    return process


def run(
    script: str,
    args: Sequence[str] | None = None,
    options: ScriptOptions | None = None,
) -> tuple[int, str, str]:
    """Invoke the script and return ``(exit_code, stdout, stderr)``.

    Output streams are only captured when ``options.capture_output`` is
    ``IoOptions.PIPE``; otherwise both are empty strings.

    Raises:
        ScriptError: staging, launching or waiting failed. The staged file is
            always gone by the time this returns or raises.
    """
    process, staged = spawn_script(script, args, options)
    return collect(process, staged)


def terminate(process: subprocess.Popen, staged: StagedScript | None = None) -> int:
    """Kill a spawned script, reap it and remove its staged file if given."""
    get_os_adapter().terminate_process(process)
    try:
        process.wait()
    finally:
        if staged is not None:
            staged.cleanup()
    return exit_code(process.returncode)
