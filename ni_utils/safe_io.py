"""Atomic file writing through a shared staging directory.

Content is written to an exclusively-created temp file under the shared temp
directory, fsynced, and then renamed over the destination. Readers see either
the old file or the complete new one, never a partial write.

Temp names are ``.<pid>.<counter>``. Uniqueness comes from exclusive create:
a name that is already taken is skipped and the next counter value tried.
"""

import asyncio
import itertools
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from .config import get_temp_dir
from .errors import NiError, TempFileError, WriteError

logger = logging.getLogger(__name__)

# Process-wide; advances on every acquisition attempt.
_counter = itertools.count()


@dataclass
class TempFile:
    """An exclusively-owned temp file and its open write handle."""
    path: Path
    handle: BinaryIO

    def cleanup(self) -> None:
        """Close the handle and delete the file if the rename did not consume it."""
        try:
            self.handle.close()
            if self.path.exists():
                self.path.unlink()
        except OSError as e:
            logger.warning("Could not clean up temp file %s: %s", self.path, e)


def open_temp(temp_dir: Path | str | None = None) -> TempFile | None:
    """Claim a fresh temp file in the shared temp directory.

    Returns None if the directory cannot be created or the file cannot be
    opened for a reason other than a name collision.
    """
    directory = Path(temp_dir) if temp_dir is not None else get_temp_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning("Could not create temp directory %s: %s", directory, e)
        return None

    pid = os.getpid()
    while True:
        candidate = directory / f".{pid}.{next(_counter)}"
        try:
            handle = open(candidate, "xb")
        except FileExistsError:
            logger.debug("Temp name %s taken, retrying", candidate.name)
            continue
        except OSError as e:
            logger.warning("Could not open temp file %s: %s", candidate, e)
            return None
        return TempFile(path=candidate, handle=handle)


def atomic_write(
    path: Path | str,
    data: str | bytes | None = "",
    *,
    temp_dir: Path | str | None = None,
    encoding: str = "utf-8",
) -> None:
    """Write data to path atomically via a staged temp file.

    Args:
        path: Destination file path. Parent directories are created.
        data: Content to write; str is encoded with ``encoding``, None
            writes an empty file.
        temp_dir: Staging directory (default: get_temp_dir()).
        encoding: Encoding for str data (default utf-8).

    Raises:
        TempFileError: If no temp file could be claimed. The destination
            is not touched.
        WriteError: If writing or renaming fails (wraps the OSError).
    """
    target = Path(path)
    if data is None:
        data = b""
    try:
        payload = data.encode(encoding) if isinstance(data, str) else data
    except UnicodeEncodeError as exc:
        raise WriteError(f"Failed to encode content for {target}: {exc}") from exc
    temp = open_temp(temp_dir)
    if temp is None:
        raise TempFileError(f"Could not stage write for {target}")

    try:
        with temp.handle as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        target.parent.mkdir(parents=True, exist_ok=True)
        os.replace(temp.path, target)
    except OSError as exc:
        raise WriteError(f"Failed to write {target}: {exc}") from exc
    finally:
        temp.cleanup()


def write_file_safe(
    path: Path | str,
    data: str | bytes | None = "",
    *,
    temp_dir: Path | str | None = None,
    encoding: str = "utf-8",
) -> bool:
    """Write a file safely, avoiding partial writes and temp-name conflicts.

    Same as atomic_write() but reports failure as False instead of raising.
    """
    try:
        atomic_write(path, data, temp_dir=temp_dir, encoding=encoding)
    except NiError as e:
        logger.warning("Safe write failed: %s", e)
        return False
    return True


async def write_file_safe_async(
    path: Path | str,
    data: str | bytes | None = "",
    *,
    temp_dir: Path | str | None = None,
    encoding: str = "utf-8",
) -> bool:
    """Async version of write_file_safe().

    Runs the filesystem work in a worker thread and only returns once the
    write, rename, and cleanup have all finished, so the result reflects the
    final outcome.
    """
    return await asyncio.to_thread(
        write_file_safe, path, data, temp_dir=temp_dir, encoding=encoding,
    )
