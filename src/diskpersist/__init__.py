"""diskpersist - Persist a typed value to a single file on disk.

Public API:
    - DiskPersist: Store handle bound to one file

Configuration:
    - StoreConfig: Extension, cache directory override, parent creation

Logging:
    - setup_logging, close_logging: Configure the ``diskpersist`` logger

Errors:
    - DiskPersistError: Base class, with ``kind`` and ``cause``
    - PersistIOError, SerializationError, NoCacheDirError, FoundDirectoryError
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from diskpersist.config import StoreConfig, load_config, save_config
from diskpersist.exceptions import (
    DiskPersistError,
    ErrorKind,
    FoundDirectoryError,
    NoCacheDirError,
    PersistIOError,
    SerializationError,
)
from diskpersist.log import close_logging, setup_logging
from diskpersist.paths import DEFAULT_FILE_TYPE, user_cache_dir
from diskpersist.store import DiskPersist

__all__ = [
    # Version
    "__version__",
    # Store
    "DiskPersist",
    "DEFAULT_FILE_TYPE",
    "user_cache_dir",
    # Configuration
    "StoreConfig",
    "load_config",
    "save_config",
    # Logging
    "setup_logging",
    "close_logging",
    # Errors
    "DiskPersistError",
    "ErrorKind",
    "PersistIOError",
    "SerializationError",
    "NoCacheDirError",
    "FoundDirectoryError",
]
