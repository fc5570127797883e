"""Little-endian binary serialization of records."""

from __future__ import annotations

import dataclasses
import struct
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Tuple, Type, TypeVar

S = TypeVar("S", bound="BinarySerializable")
C = TypeVar("C", bound=type)

_U32 = struct.Struct("<I")


class DeserializeError(ValueError):
    """Raised when bytes cannot be decoded into a record."""


class BinarySerializable(ABC):
    """A record that can be written to and read back from bytes."""

    @abstractmethod
    def serialize(self) -> bytes:
        """Return the binary form of this record."""

    @classmethod
    @abstractmethod
    def deserialize(cls: Type[S], data: bytes, offset: int = 0) -> Tuple[S, int]:
        """Decode a record from ``data`` at ``offset``; return it and the offset after it."""


def _take(data: bytes, offset: int, size: int) -> Tuple[bytes, int]:
    end = offset + size
    if offset < 0 or end > len(data):
        raise DeserializeError("Unexpected end of data")
    return bytes(data[offset:end]), end


def _encode_u32(value: int) -> bytes:
    try:
        return _U32.pack(value)
    except struct.error as exc:
        raise ValueError(f"Value does not fit in an unsigned 32-bit integer: {value!r}") from exc


def _decode_u32(data: bytes, offset: int) -> Tuple[int, int]:
    raw, offset = _take(data, offset, _U32.size)
    return _U32.unpack(raw)[0], offset


def _encode_bool(value: bool) -> bytes:
    return bytes([1 if value else 0])


def _decode_bool(data: bytes, offset: int) -> Tuple[bool, int]:
    raw, offset = _take(data, offset, 1)
    return raw != b"\x00", offset


def _encode_bytes(value: bytes) -> bytes:
    return _encode_u32(len(value)) + bytes(value)


def _decode_bytes(data: bytes, offset: int) -> Tuple[bytes, int]:
    length, offset = _decode_u32(data, offset)
    return _take(data, offset, length)


def _encode_str(value: str) -> bytes:
    return _encode_bytes(value.encode("utf-8"))


def _decode_str(data: bytes, offset: int) -> Tuple[str, int]:
    length, after_length = _decode_u32(data, offset)
    if length == 0:
        raise DeserializeError("Failed to deserialize!")
    raw, offset = _take(data, after_length, length)
    try:
        return raw.decode("utf-8"), offset
    except UnicodeDecodeError as exc:
        raise DeserializeError("String field is not valid UTF-8") from exc


_Codec = Tuple[Callable[[Any], bytes], Callable[[bytes, int], Tuple[Any, int]]]

_CODECS: Dict[Any, _Codec] = {
    int: (_encode_u32, _decode_u32),
    bool: (_encode_bool, _decode_bool),
    bytes: (_encode_bytes, _decode_bytes),
    str: (_encode_str, _decode_str),
}

_TYPE_NAMES: Dict[str, type] = {kind.__name__: kind for kind in _CODECS}


def _resolve(field_type: Any) -> Any:
    if isinstance(field_type, str):
        return _TYPE_NAMES.get(field_type.strip(), field_type)
    return field_type


def binary_serializable(cls: C) -> C:
    """Class decorator giving a record ``serialize`` and ``deserialize``.

    Fields are written in declaration order: ``int`` as an unsigned 32-bit
    integer, ``bool`` as one byte, and ``bytes`` and ``str`` as a 32-bit length
    followed by the content. An empty string cannot be read back. The class is
    made a dataclass if it is not one already.
    """
    if not dataclasses.is_dataclass(cls):
        cls = dataclasses.dataclass(cls)
    codecs = []
    for field in dataclasses.fields(cls):
        field_type = _resolve(field.type)
        codec = _CODECS.get(field_type)
        if codec is None:
            raise TypeError(f"Unsupported field type: {field_type!r}")
        codecs.append((field.name, codec))

    def serialize(self: Any) -> bytes:
        return b"".join(encode(getattr(self, name)) for name, (encode, _) in codecs)

    def deserialize(klass: Any, data: bytes, offset: int = 0) -> Tuple[Any, int]:
        values = {}
        for name, (_, decode) in codecs:
            values[name], offset = decode(data, offset)
        return klass(**values), offset

    serialize.__doc__ = "Return the binary form of this record."
    deserialize.__doc__ = "Decode a record from ``data`` at ``offset``; return it and the offset after it."
    cls.serialize = serialize  # type: ignore[attr-defined]
    cls.deserialize = classmethod(deserialize)  # type: ignore[attr-defined]
    BinarySerializable.register(cls)
    return cls