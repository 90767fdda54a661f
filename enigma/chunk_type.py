"""Four-letter PNG chunk type codes and their property bits."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["ChunkType", "ChunkTypeError"]


class ChunkTypeError(ValueError):
    """Raised when a chunk type code is malformed."""


def _is_ascii_upper(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A


def _is_ascii_lower(byte: int) -> bool:
    return 0x61 <= byte <= 0x7A


def _is_ascii_alpha(byte: int) -> bool:
    return _is_ascii_upper(byte) or _is_ascii_lower(byte)


class ChunkType:
    """A PNG chunk type: exactly four ASCII letters."""

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes | bytearray | Iterable[int]) -> None:
        try:
            value = bytes(raw)
        except (TypeError, ValueError) as exc:
            raise ChunkTypeError(f"ChunkType must be four bytes: {exc}") from exc
        if len(value) != 4:
            raise ChunkTypeError("ChunkType must be exactly 4 bytes long")
        if not all(_is_ascii_alpha(b) for b in value):
            raise ChunkTypeError(
                "ChunkType must contain only alphabetic ASCII characters"
            )
        self._raw = value

    @classmethod
    def from_str(cls, text: str) -> ChunkType:
        """Build a chunk type from a four-character string."""
        raw = text.encode("utf-8")
        if len(raw) != 4:
            raise ChunkTypeError("ChunkType string must be 4 characters long")
        return cls(raw)

    def is_valid(self) -> bool:
        """True when every byte is a letter and the reserved bit is clear."""
        return all(_is_ascii_alpha(b) for b in self._raw) and self.is_reserved_bit_valid()

    def is_critical(self) -> bool:
        return _is_ascii_upper(self._raw[0])

    def is_public(self) -> bool:
        return _is_ascii_upper(self._raw[1])

    def is_reserved_bit_valid(self) -> bool:
        return _is_ascii_upper(self._raw[2])

    def is_safe_to_copy(self) -> bool:
        return _is_ascii_lower(self._raw[3])

    def __bytes__(self) -> bytes:
        return self._raw

    def __str__(self) -> str:
        return self._raw.decode("ascii")

    def __repr__(self) -> str:
        return f"ChunkType({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)