"""Executable lookup on PATH."""

import shutil

# https://blog.volta.sh/2020/11/25/command-spotlight-volta-run/
VOLTA_PREFIX = "volta run"


def cmd_exists(cmd: str) -> bool:
    """Return True if cmd resolves to an executable on PATH."""
    return shutil.which(cmd) is not None


def get_volta_prefix() -> str:
    """Return the prefix for running commands through Volta, or "" if it is not installed."""
    return VOLTA_PREFIX if cmd_exists("volta") else ""
