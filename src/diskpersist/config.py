"""Store configuration and TOML loading/saving."""

from __future__ import annotations

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, field_validator

from diskpersist.paths import DEFAULT_FILE_TYPE


class StoreConfig(BaseModel):
    """Configuration for store handles.

    Example:
        [store]
        extension = "persist"
        cache_dir = "/var/cache/myapp"
        create_parents = false
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    extension: str = Field(
        default=DEFAULT_FILE_TYPE,
        min_length=1,
        description="Extension appended to named stores, without the leading dot.",
    )
    cache_dir: Path | None = Field(
        default=None,
        description="Base directory for named stores. Platform cache directory when unset.",
    )
    create_parents: bool = Field(
        default=False,
        description="Create missing parent directories before writing.",
    )

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if v.startswith("."):
            msg = "extension must not start with a dot"
            raise ValueError(msg)
        if "/" in v or "\\" in v:
            msg = "extension must not contain path separators"
            raise ValueError(msg)
        return v


def load_config(path: Path) -> StoreConfig:
    """Load store configuration from the ``[store]`` table of a TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        pydantic.ValidationError: If the configuration is invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    return StoreConfig.model_validate(data.get("store", {}))


def save_config(config: StoreConfig, path: Path) -> None:
    """Save store configuration as a ``[store]`` table."""
    data = config.model_dump(mode="json", exclude_none=True)

    with path.open("wb") as f:
        tomli_w.dump({"store": data}, f)


__all__ = ["StoreConfig", "load_config", "save_config"]
