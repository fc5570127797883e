"""Metric samples and chunks of them."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import List, Tuple

from metricsdb.serialization import BinarySerializable, DeserializeError

_U64 = struct.Struct("<Q")
_U32 = struct.Struct("<I")


def _read(data: bytes, offset: int, size: int) -> Tuple[bytes, int]:
    end = offset + size
    if offset < 0 or end > len(data):
        raise DeserializeError("Unexpected end of metric data")
    return bytes(data[offset:end]), end


def _read_str(data: bytes, offset: int) -> Tuple[str, int]:
    raw, offset = _read(data, offset, _U32.size)
    (length,) = _U32.unpack(raw)
    raw, offset = _read(data, offset, length)
    try:
        return raw.decode("utf-8"), offset
    except UnicodeDecodeError as exc:
        raise DeserializeError("Metric text is not valid UTF-8") from exc


def _write_str(value: str) -> bytes:
    encoded = value.encode("utf-8")
    return _U32.pack(len(encoded)) + encoded


@dataclass
class Metric(BinarySerializable):
    """A named sample taken at a Unix timestamp, with key/value labels."""

    timestamp: int
    name: str
    labels: List[Tuple[str, str]] = field(default_factory=list)

    def serialize(self) -> bytes:
        """Return the timestamp (u64), the name, then each label key and value."""
        try:
            parts = [_U64.pack(self.timestamp)]
        except struct.error as exc:
            raise ValueError(f"Timestamp out of range: {self.timestamp!r}") from exc
        parts.append(_write_str(self.name))
        for key, value in self.labels:
            parts.append(_write_str(key))
            parts.append(_write_str(value))
        return b"".join(parts)

    @classmethod
    def deserialize(cls, data: bytes, offset: int = 0) -> Tuple["Metric", int]:
        """Decode a metric at ``offset``; labels run to the end of ``data``.

        A zero timestamp marks unused space and raises DeserializeError.
        """
        raw, position = _read(data, offset, _U64.size)
        (timestamp,) = _U64.unpack(raw)
        if timestamp == 0:
            raise DeserializeError("Failed to deserialize metric...")
        name, position = _read_str(data, position)
        labels: List[Tuple[str, str]] = []
        while position < len(data):
            key, position = _read_str(data, position)
            value, position = _read_str(data, position)
            labels.append((key, value))
        return cls(timestamp=timestamp, name=name, labels=labels), position


@dataclass
class Chunk:
    """Metrics covering a span of time."""

    id: str
    start_time: int
    end_time: int
    metrics: List[Metric] = field(default_factory=list)