"""Platform cache directory lookup and store path resolution."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from diskpersist.exceptions import NoCacheDirError

logger = logging.getLogger(__name__)

DEFAULT_FILE_TYPE = "persist"


def _absolute_env(var: str) -> Path | None:
    value = os.environ.get(var)
    if not value:
        return None
    path = Path(value)
    return path if path.is_absolute() else None


def user_cache_dir() -> Path | None:
    """Return the per-user cache directory for the host platform.

    - Windows: ``%LOCALAPPDATA%``
    - macOS: ``$HOME/Library/Caches``
    - Other POSIX: ``$XDG_CACHE_HOME`` if set and absolute, else ``$HOME/.cache``

    Returns None when the location cannot be determined.
    """
    if sys.platform == "win32":
        return _absolute_env("LOCALAPPDATA")

    home = _absolute_env("HOME")
    if sys.platform == "darwin":
        return home / "Library" / "Caches" if home is not None else None

    xdg = _absolute_env("XDG_CACHE_HOME")
    if xdg is not None:
        return xdg
    return home / ".cache" if home is not None else None


def resolve_named_path(
    name: str,
    extension: str = DEFAULT_FILE_TYPE,
    cache_dir: Path | None = None,
) -> Path:
    """Compose ``<cache_dir>/<name>.<extension>``.

    Args:
        name: Logical store name, used as the file stem without validation.
        extension: File extension, without the leading dot.
        cache_dir: Base directory; the platform cache directory when None.

    Raises:
        NoCacheDirError: No cache directory is available on this host.
    """
    base = cache_dir if cache_dir is not None else user_cache_dir()
    if base is None:
        raise NoCacheDirError
    path = base / f"{name}.{extension}"
    logger.debug("Resolved store %r to %s", name, path)
    return path


__all__ = ["DEFAULT_FILE_TYPE", "resolve_named_path", "user_cache_dir"]
