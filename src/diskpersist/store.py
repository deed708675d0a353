"""Store handle bound to a single file on disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Generic, TypeVar

from diskpersist.codec import BinaryCodec
from diskpersist.config import StoreConfig
from diskpersist.exceptions import FoundDirectoryError, PersistIOError
from diskpersist.paths import resolve_named_path

logger = logging.getLogger(__name__)

D = TypeVar("D")


class DiskPersist(Generic[D]):
    """Persist one value of type ``D`` to a file and read it back.

    Create handles with :meth:`init` (named file in the cache directory) or
    :meth:`init_with_path` (explicit file). The handle holds no state besides
    its path and the codec for ``D``; every :meth:`write` and :meth:`read` is
    an independent blocking call against the file. Handles bound to the same
    path share the file and the last write wins.

    Example:
        >>> persist = DiskPersist.init("example", Person)
        >>> persist.write(Person(name="John Doe", age=45))
        >>> persist.read()
        Person(name='John Doe', age=45)
    """

    __slots__ = ("_codec", "_config", "_path")

    def __init__(self, path: Path, data_type: type[D], config: StoreConfig | None = None) -> None:
        self._path = path
        self._codec: BinaryCodec[D] = BinaryCodec(data_type)
        self._config = config if config is not None else StoreConfig()

    @classmethod
    def init(
        cls,
        name: str,
        data_type: type[D],
        config: StoreConfig | None = None,
    ) -> DiskPersist[D]:
        """Bind a handle to ``<cache_dir>/<name>.persist``.

        No file I/O happens here.

        Raises:
            NoCacheDirError: The platform has no discoverable cache directory
                and ``config.cache_dir`` is unset.
        """
        config = config if config is not None else StoreConfig()
        path = resolve_named_path(name, config.extension, config.cache_dir)
        return cls(path, data_type, config)

    @classmethod
    def init_with_path(
        cls,
        path: str | os.PathLike[str],
        data_type: type[D],
        config: StoreConfig | None = None,
    ) -> DiskPersist[D]:
        """Bind a handle to *path* verbatim, without appending an extension.

        Raises:
            FoundDirectoryError: *path* is an existing directory.
        """
        path = Path(path)
        if path.is_dir():
            raise FoundDirectoryError
        return cls(path, data_type, config)

    @property
    def path(self) -> Path:
        """The file this handle reads and writes."""
        return self._path

    @property
    def data_type(self) -> type[D]:
        return self._codec.data_type

    def write(self, data: D) -> None:
        """Encode *data* and overwrite the file with it.

        The file is written in place; a crash mid-write can leave it corrupted.

        Raises:
            SerializationError: *data* couldn't be encoded.
            PersistIOError: The file couldn't be written.
        """
        payload = self._codec.encode(data)
        try:
            if self._config.create_parents:
                self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(payload)
        except OSError as exc:
            raise PersistIOError(exc) from exc
        logger.debug("Wrote %d bytes to %s", len(payload), self._path)

    def read(self) -> D | None:
        """Read and decode the file.

        Returns:
            The stored value, or None if the file does not exist.

        Raises:
            PersistIOError: The file exists but couldn't be read.
            SerializationError: The file isn't a complete encoding of ``D``.
        """
        try:
            payload = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("No data at %s", self._path)
            return None
        except OSError as exc:
            raise PersistIOError(exc) from exc

        logger.debug("Read %d bytes from %s", len(payload), self._path)
        return self._codec.decode(payload)

    def __repr__(self) -> str:
        type_name = getattr(self.data_type, "__name__", repr(self.data_type))
        return f"DiskPersist[{type_name}](path={str(self._path)!r})"


__all__ = ["DiskPersist"]
