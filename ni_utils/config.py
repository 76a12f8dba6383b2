"""Temp directory configuration shared by the safe file writer and the CLI."""

import os
import tempfile
from pathlib import Path

# Shared by every instance of the tool on this machine.
DEFAULT_TEMP_DIR = Path(tempfile.gettempdir()) / "antfu-ni"

# Environment variable that overrides DEFAULT_TEMP_DIR (also read from .env by the CLI).
TEMP_DIR_ENV = "NI_TEMP_DIR"


def get_temp_dir() -> Path:
    """Return the directory used to stage safe writes.

    Reads NI_TEMP_DIR on every call so tests and long-running callers can
    change it at runtime. Blank values fall back to the default.
    """
    override = os.environ.get(TEMP_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULT_TEMP_DIR
