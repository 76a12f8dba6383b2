"""Custom exceptions for ni-utils."""


class NiError(Exception):
    """Base exception for ni-utils errors."""
    pass


class TempFileError(NiError):
    """Raised when no temp file could be claimed in the shared temp directory."""
    pass


class WriteError(NiError):
    """Write, fsync, or rename of a staged file failed.

    The underlying OSError is available as ``__cause__``.
    """
    pass
