"""Exception taxonomy for diskpersist.

Every failure raised by a store handle is one of the four subclasses of
:class:`DiskPersistError` defined here. Catch the specific class (or branch on
``error.kind``) to handle a failure precisely; the underlying low-level
exception, when there is one, is available as ``error.cause`` and is also
chained as ``__cause__``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    IO = "io"
    SERIALIZATION = "serialization"
    NO_CACHE_DIR = "no_cache_dir"
    FOUND_DIRECTORY = "found_directory"


class DiskPersistError(Exception):
    """Base class for all diskpersist exceptions."""

    kind: ErrorKind

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class PersistIOError(DiskPersistError):
    """Error reading or writing the backing file."""

    kind = ErrorKind.IO

    def __init__(self, cause: OSError) -> None:
        super().__init__(str(cause), cause)


class SerializationError(DiskPersistError):
    """Couldn't encode or decode the data; on read this could mean the data is corrupted."""

    kind = ErrorKind.SERIALIZATION


class NoCacheDirError(DiskPersistError):
    """Couldn't find a cache directory on the system."""

    kind = ErrorKind.NO_CACHE_DIR

    def __init__(self) -> None:
        super().__init__("couldn't find cache directory")


class FoundDirectoryError(DiskPersistError):
    """The explicit save path is a directory, not a file."""

    kind = ErrorKind.FOUND_DIRECTORY

    def __init__(self) -> None:
        super().__init__("optional save path must be a file, not a directory")


__all__ = [
    "DiskPersistError",
    "ErrorKind",
    "FoundDirectoryError",
    "NoCacheDirError",
    "PersistIOError",
    "SerializationError",
]
