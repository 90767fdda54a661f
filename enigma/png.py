"""PNG files as a signature followed by a sequence of chunks."""

from __future__ import annotations

import os

from enigma.chunk import Chunk, ChunkError

__all__ = ["Png", "PngError"]


class PngError(ValueError):
    """Raised when PNG bytes are malformed or a requested chunk is missing."""


class Png:
    """An in-memory PNG image: the standard signature plus its chunks."""

    STANDARD_HEADER = bytes([137, 80, 78, 71, 13, 10, 26, 10])

    __slots__ = ("_chunks",)

    def __init__(self, chunks: list[Chunk] | tuple[Chunk, ...] = ()) -> None:
        self._chunks: list[Chunk] = list(chunks)

    @classmethod
    def from_bytes(cls, data: bytes) -> Png:
        """Parse a complete PNG stream, signature included."""
        data = bytes(data)
        header_size = len(cls.STANDARD_HEADER)
        if data[:header_size] != cls.STANDARD_HEADER:
            raise PngError("Invalid PNG header")

        chunks: list[Chunk] = []
        view = memoryview(data)
        offset = header_size
        while offset < len(data):
            try:
                chunk = Chunk.from_bytes(view[offset:])
            except ChunkError as exc:
                raise PngError(str(exc)) from exc
            offset += 12 + chunk.length()
            chunks.append(chunk)
        return cls(chunks)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Png:
        """Read and parse the PNG file at ``path``."""
        with open(path, "rb") as handle:
            return cls.from_bytes(handle.read())

    def append_chunk(self, chunk: Chunk) -> None:
        """Add a chunk at the end of the image."""
        self._chunks.append(chunk)

    def remove_first_chunk(self, chunk_type: str) -> Chunk:
        """Remove and return the first chunk whose type matches ``chunk_type``."""
        for index, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return self._chunks.pop(index)
        raise PngError(f"Chunk type '{chunk_type}' not found")

    def chunk_by_type(self, chunk_type: str) -> Chunk | None:
        """Return the first chunk of the given type, or None."""
        return next(
            (chunk for chunk in self._chunks if str(chunk.chunk_type) == chunk_type),
            None,
        )

    def header(self) -> bytes:
        """The eight-byte PNG signature."""
        return self.STANDARD_HEADER

    def chunks(self) -> tuple[Chunk, ...]:
        """All chunks, in file order."""
        return tuple(self._chunks)

    def as_bytes(self) -> bytes:
        """Serialise the image: signature followed by every chunk."""
        return self.STANDARD_HEADER + b"".join(chunk.as_bytes() for chunk in self._chunks)

    def __repr__(self) -> str:
        return f"Png({self._chunks!r})"

    def __str__(self) -> str:
        return "".join(f"{chunk}\n" for chunk in self._chunks)