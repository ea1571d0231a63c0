from __future__ import annotations

import os

from .base import OSAdapter
from .posix import PosixAdapter
from .windows import WindowsAdapter


def get_os_adapter(os_name: str | None = None) -> OSAdapter:
    """Return an OS-specific adapter instance.

    - Windows: WindowsAdapter
    - Others (Linux/macOS/BSD): PosixAdapter
    """
    if (os_name or os.name) == "nt":
        return WindowsAdapter()
    return PosixAdapter()


__all__ = ["OSAdapter", "PosixAdapter", "WindowsAdapter", "get_os_adapter"]
