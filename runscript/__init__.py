"""Run shell scripts given as text.

Main components:
- run / spawn: public entry points
- modify_script: injects cd and shell directives
- create_script_file: stages the script in the temp directory
- launch / collect: start the process and gather its result
- platform adapters: per-OS shell and directive syntax
"""

from .runner import run, spawn, spawn_script, terminate
from .staging import StagedScript
from .types import (
    IoOptions,
    ScriptDescriptionError,
    ScriptError,
    ScriptIOError,
    ScriptOptions,
)

__all__ = [
    "run",
    "spawn",
    "spawn_script",
    "terminate",
    "StagedScript",
    "IoOptions",
    "ScriptOptions",
    "ScriptError",
    "ScriptIOError",
    "ScriptDescriptionError",
]
