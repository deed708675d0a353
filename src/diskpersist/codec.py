"""Binary encoding of typed values.

Values are reduced to Python builtins by a pydantic ``TypeAdapter`` and packed
with MessagePack: fixed-width big-endian integers, length-prefixed strings,
binary blobs, arrays and maps, no header and no version field. Decoding
reverses both steps and rejects truncated input, trailing bytes and data that
does not validate against the bound type.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import msgpack
from msgpack.exceptions import UnpackException
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from diskpersist.exceptions import SerializationError

D = TypeVar("D")


def _pack_default(obj: Any) -> Any:
    """Reduce values msgpack has no native type for (sets, datetimes, UUIDs, ...)."""
    if isinstance(obj, (set, frozenset)):
        try:
            return sorted(obj)
        except TypeError:
            return list(obj)
    return to_jsonable_python(obj)


def _freeze(obj: Any) -> Any:
    if isinstance(obj, list):
        return tuple(_freeze(item) for item in obj)
    return obj


def _map_from_pairs(pairs: list[tuple[Any, Any]]) -> dict[Any, Any]:
    # Tuple keys come back as arrays; make them hashable again.
    return {_freeze(key): value for key, value in pairs}


class BinaryCodec(Generic[D]):
    """Encode and decode values of one fixed type."""

    __slots__ = ("_adapter", "_data_type")

    def __init__(self, data_type: type[D] | Any) -> None:
        self._data_type = data_type
        self._adapter: TypeAdapter[D] = TypeAdapter(data_type)

    @property
    def data_type(self) -> type[D] | Any:
        return self._data_type

    def encode(self, value: D) -> bytes:
        """Serialize *value* to bytes.

        Raises:
            SerializationError: The value does not match the bound type or
                cannot be packed (e.g. an integer wider than 64 bits).
        """
        try:
            plain = self._adapter.dump_python(value, mode="python", warnings="error")
            return msgpack.packb(plain, use_bin_type=True, default=_pack_default)
        except (PydanticSerializationError, TypeError, ValueError, OverflowError) as exc:
            msg = f"couldn't serialize value as {self._type_name()}: {exc}"
            raise SerializationError(msg, exc) from exc

    def decode(self, data: bytes) -> D:
        """Deserialize *data* into the bound type.

        Raises:
            SerializationError: The bytes are not one complete encoding of the
                bound type. This could mean the data is corrupted.
        """
        try:
            plain = msgpack.unpackb(
                data,
                raw=False,
                strict_map_key=False,
                object_pairs_hook=_map_from_pairs,
            )
        except (UnpackException, ValueError, TypeError) as exc:
            msg = f"couldn't deserialize data, it may be corrupted: {exc}"
            raise SerializationError(msg, exc) from exc

        try:
            return self._adapter.validate_python(plain)
        except ValidationError as exc:
            msg = f"couldn't deserialize data as {self._type_name()}, it may be corrupted: {exc}"
            raise SerializationError(msg, exc) from exc

    def _type_name(self) -> str:
        return getattr(self._data_type, "__name__", repr(self._data_type))


__all__ = ["BinaryCodec"]
