"""Start the OS process for a staged script."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from typing import Any

from runscript.platforms import OSAdapter, get_os_adapter
from runscript.staging import StagedScript
from runscript.types import IoOptions, ScriptIOError, ScriptOptions
from runscript.utils.logger import get_logger

logger = get_logger("runscript.launcher")

# None means the child shares the parent's stream
STREAM_MODES: dict[IoOptions, Any] = {
    IoOptions.NULL: subprocess.DEVNULL,
    IoOptions.INHERIT: None,
    IoOptions.PIPE: subprocess.PIPE,
}


def popen_kwargs(options: ScriptOptions) -> dict[str, Any]:
    """Map the options to subprocess.Popen keyword arguments."""
    output = STREAM_MODES[options.capture_output]
    kwargs: dict[str, Any] = {
        "stdin": STREAM_MODES[options.capture_input],
        "stdout": output,
        "stderr": output,
    }
    if options.working_directory is not None:
        kwargs["cwd"] = os.path.abspath(options.working_directory)
    if options.env_vars:
        env = os.environ.copy()
        env.update({str(k): str(v) for k, v in options.env_vars.items()})
        kwargs["env"] = env
    return kwargs


def launch(
    staged: StagedScript,
    args: Sequence[str],
    options: ScriptOptions,
    *,
    adapter: OSAdapter | None = None,
) -> subprocess.Popen:
    """Start the staged script through the resolved interpreter.

    Raises:
        ScriptIOError: the process couldn't be started. The staged file is
            removed before raising since nothing else will own it.
    """
    adapter = adapter or get_os_adapter()
    try:
        argv = adapter.script_command(str(staged.path), options, args)
        logger.debug("Launching script", argv=argv)
        return subprocess.Popen(argv, **popen_kwargs(options))
    except OSError as error:
        staged.cleanup()
        raise ScriptIOError(error) from error
    except BaseException:
        staged.cleanup()
        raise
