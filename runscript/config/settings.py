"""Runtime settings for the script runner.

Values are looked up in explicit overrides first, then in environment
variables, then fall back to defaults.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any


class Settings:
    """Property-based access to runner configuration."""

    def __init__(self, overrides: dict[str, Any] | None = None):
        self._overrides = dict(overrides or {})

    def _get(
        self,
        key: str,
        default: Any,
        env_key: str | None = None,
    ) -> Any:
        """Get value from overrides, fallback to env, then default."""
        if key in self._overrides and self._overrides[key] is not None:
            return self._overrides[key]
        if env_key and (env_val := os.getenv(env_key)):
            # Type conversion based on default type
            if isinstance(default, bool):
                return env_val.lower() in ("true", "1", "yes", "on")
            elif isinstance(default, int):
                return int(env_val)
            return env_val
        return default

    @property
    def temp_dir(self) -> Path:
        # Read on every access so tests and callers can repoint it at runtime
        value = self._get("temp_dir", None, "RUNSCRIPT_TEMP_DIR")
        return Path(value) if value else Path(tempfile.gettempdir())

    @property
    def log_format(self) -> str:
        return str(self._get("log_format", "pretty", "LOG_FORMAT")).lower()

    @property
    def log_colors(self) -> bool:
        return bool(self._get("log_colors", True, "LOG_COLORS"))

    @property
    def log_level(self) -> str:
        return str(self._get("log_level", "WARNING", "RUNSCRIPT_LOG_LEVEL")).upper()


settings = Settings()
