"""Hide text messages in PNG chunks: chunk types, chunks, PNG files and a command line."""

__version__ = "0.1.0"
__all__ = ["chunk_type", "chunk", "png", "commands", "cli"]