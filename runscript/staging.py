"""Write transformed scripts to uniquely named temporary files."""

from __future__ import annotations

import os
import secrets
import string
from pathlib import Path

from runscript.config import settings
from runscript.config.constants import PACKAGE_NAME, SCRIPT_NAME_LENGTH
from runscript.platforms import OSAdapter, get_os_adapter
from runscript.types import ScriptIOError
from runscript.utils.logger import get_logger

logger = get_logger("runscript.staging")

_NAME_ALPHABET = string.ascii_letters + string.digits


def delete_file(path: str | os.PathLike[str]) -> None:
    """Remove a file, ignoring any failure."""
    try:
        os.remove(path)
    except OSError as error:
        logger.debug("Staged file not removed", path=str(path), error=str(error))


class StagedScript:
    """A transformed script written to disk.

    Usable as a context manager: the file is removed on exit whatever happened
    inside the block.
    """

    def __init__(self, text: str, path: Path):
        self.text = text
        self.path = path

    def cleanup(self) -> None:
        delete_file(self.path)

    def __enter__(self) -> StagedScript:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def __repr__(self) -> str:
        return f"StagedScript(path={str(self.path)!r})"


def random_name(length: int = SCRIPT_NAME_LENGTH) -> str:
    return "".join(secrets.choice(_NAME_ALPHABET) for _ in range(length))


def staging_dir(
    temp_root: str | os.PathLike[str] | None = None,
    adapter: OSAdapter | None = None,
) -> Path:
    """Return ``<temp>/[<user>/]run_script`` without creating it."""
    adapter = adapter or get_os_adapter()
    directory = Path(temp_root) if temp_root is not None else settings.temp_dir

    user_path = adapter.user_temp_subpath()
    if user_path:
        directory = directory / user_path

    return directory / PACKAGE_NAME


def create_script_file(
    text: str,
    *,
    temp_root: str | os.PathLike[str] | None = None,
    adapter: OSAdapter | None = None,
) -> StagedScript:
    """Write script text to a fresh file and return it as a StagedScript.

    Raises:
        ScriptIOError: the directory or the file couldn't be written. A partially
            written file is removed first.
    """
    adapter = adapter or get_os_adapter()
    directory = staging_dir(temp_root, adapter)

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise ScriptIOError(error) from error

    file_path = directory / f"{random_name()}.{adapter.script_extension}"
    data = text.encode("utf-8", errors="surrogateescape")

    try:
        file = open(file_path, "wb")
    except OSError as error:
        raise ScriptIOError(error) from error

    try:
        with file:
            file.write(data)
    except OSError as error:
        delete_file(file_path)
        raise ScriptIOError(error) from error

    logger.debug("Script staged", path=str(file_path))
    return StagedScript(text, file_path)
