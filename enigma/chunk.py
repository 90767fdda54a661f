"""PNG chunks: length, type, data and CRC."""

from __future__ import annotations

import struct
import zlib

from enigma.chunk_type import ChunkType, ChunkTypeError

__all__ = ["Chunk", "ChunkError"]

_HEADER = struct.Struct(">I4s")
_CRC = struct.Struct(">I")
_MIN_CHUNK_SIZE = 12


class ChunkError(ValueError):
    """Raised when chunk bytes are malformed or cannot be decoded."""


def _calc_crc(chunk_type: ChunkType, data: bytes) -> int:
    return zlib.crc32(bytes(chunk_type) + data) & 0xFFFFFFFF


class Chunk:
    """A single PNG chunk; the CRC is computed from the type and data."""

    __slots__ = ("_chunk_type", "_data", "_crc")

    def __init__(self, chunk_type: ChunkType, data: bytes) -> None:
        self._chunk_type = chunk_type
        self._data = bytes(data)
        self._crc = _calc_crc(chunk_type, self._data)

    @classmethod
    def from_bytes(cls, raw: bytes) -> Chunk:
        """Parse one chunk from the start of ``raw``; trailing bytes are ignored."""
        raw = bytes(raw)
        if len(raw) < _MIN_CHUNK_SIZE:
            raise ChunkError("Not enough bytes for a valid chunk")
        length, type_bytes = _HEADER.unpack_from(raw)
        try:
            chunk_type = ChunkType(type_bytes)
        except ChunkTypeError as exc:
            raise ChunkError(str(exc)) from exc
        data_end = 8 + length
        if len(raw) < data_end + 4:
            raise ChunkError("Chunk data length mismatch")
        data = raw[8:data_end]
        (crc_read,) = _CRC.unpack_from(raw, data_end)
        if crc_read != _calc_crc(chunk_type, data):
            raise ChunkError("CRC mismatch")
        return cls(chunk_type, data)

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    def length(self) -> int:
        """Number of data bytes in the chunk."""
        return len(self._data)

    def data_as_string(self) -> str:
        """Decode the data as UTF-8."""
        try:
            return self._data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ChunkError(str(exc)) from exc

    def as_bytes(self) -> bytes:
        """Serialise the chunk as it appears in a PNG stream."""
        return (
            _HEADER.pack(self.length(), bytes(self._chunk_type))
            + self._data
            + _CRC.pack(self._crc)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return (self._chunk_type, self._data, self._crc) == (
            other._chunk_type,
            other._data,
            other._crc,
        )

    def __hash__(self) -> int:
        return hash((self._chunk_type, self._data, self._crc))

    def __repr__(self) -> str:
        return f"Chunk({self._chunk_type!r}, {self._data!r})"

    def __str__(self) -> str:
        return (
            "Chunk {\n"
            f"  Length: {self.length()}\n"
            f"  Type: {self._chunk_type}\n"
            f"  Data: {len(self._data)} bytes\n"
            f"  Crc: {self._crc}\n"
            "}\n"
        )