"""High-level operations on PNG files: hide, read, remove and list messages."""

from __future__ import annotations

import os
from pathlib import Path

from enigma.chunk import Chunk
from enigma.chunk_type import ChunkType
from enigma.png import Png

__all__ = ["CommandError", "encode", "decode", "remove", "print_chunks"]


class CommandError(Exception):
    """Raised when a command cannot complete, such as a missing chunk."""


def encode(
    file_path: str | os.PathLike[str],
    chunk_type: str,
    message: str,
    output_path: str | os.PathLike[str] | None = None,
) -> Path:
    """Append ``message`` as a chunk of ``chunk_type`` and write the image.

    The result goes to ``output_path`` when given, otherwise the input file is
    overwritten. Returns the path that was written.
    """
    chunk = Chunk(ChunkType.from_str(chunk_type), message.encode("utf-8"))
    png = Png.from_file(file_path)
    png.append_chunk(chunk)

    output = Path(output_path if output_path is not None else file_path)
    output.write_bytes(png.as_bytes())
    print(f"Encoded message into PNG file: {output}")
    return output


def decode(path: str | os.PathLike[str], chunk_type: str) -> str:
    """Return the message held in the first chunk of ``chunk_type``."""
    png = Png.from_file(path)
    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        raise CommandError("Chunk not found")
    message = chunk.data_as_string()
    print(f"Decoded message: {message}")
    return message


def remove(path: str | os.PathLike[str], chunk_type: str) -> Chunk:
    """Remove the first chunk of ``chunk_type`` from the file in place."""
    png = Png.from_file(path)
    removed = png.remove_first_chunk(chunk_type)
    Path(path).write_bytes(png.as_bytes())
    print(f"Removed chunk: {removed.chunk_type}")
    return removed


def print_chunks(path: str | os.PathLike[str]) -> tuple[Chunk, ...]:
    """Print every chunk of the file and return them in file order."""
    png = Png.from_file(path)
    chunks = png.chunks()
    for chunk in chunks:
        print(chunk)
    return chunks