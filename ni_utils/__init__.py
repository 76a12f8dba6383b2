"""ni-utils: helpers for the ni package-manager runner."""

__version__ = "0.1.0"

from .commands import cmd_exists, get_volta_prefix
from .errors import NiError
from .process import invariant
from .safe_io import atomic_write, write_file_safe, write_file_safe_async
from .sequences import exclude, remove
from .text import limit_text

__all__ = [
    "NiError",
    "atomic_write",
    "cmd_exists",
    "exclude",
    "get_volta_prefix",
    "invariant",
    "limit_text",
    "remove",
    "write_file_safe",
    "write_file_safe_async",
]
