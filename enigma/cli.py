"""Command-line interface for hiding messages in PNG chunks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from enigma.commands import CommandError, decode, encode, print_chunks, remove

__all__ = ["build_parser", "main"]

_VERSION = "0.1.0"

_DESCRIPTION = (
    "Hide secret messages inside PNG images by manipulating ancillary chunks."
)
_EPILOG = (
    "Enigma encodes, decodes, lists and removes arbitrary text messages "
    "embedded in the ancillary chunks of valid PNG files. All chunks it "
    "creates are spec-compliant: the CRC is calculated for you so your "
    "images stay perfectly valid."
)

_FAILURES = (OSError, ValueError, CommandError)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its four subcommands."""
    parser = argparse.ArgumentParser(
        prog="enigma", description=_DESCRIPTION, epilog=_EPILOG
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    encode_parser = subparsers.add_parser("encode", help="Hide a message in a PNG file")
    encode_parser.add_argument("file_path", metavar="FILE_PATH")
    encode_parser.add_argument("chunk_type", metavar="CHUNK_TYPE")
    encode_parser.add_argument("message", metavar="MESSAGE")
    encode_parser.add_argument("output_file", metavar="OUTPUT_FILE", nargs="?")

    decode_parser = subparsers.add_parser("decode", help="Read a hidden message")
    decode_parser.add_argument("file_path", metavar="FILE_PATH")
    decode_parser.add_argument("chunk_type", metavar="CHUNK_TYPE")

    remove_parser = subparsers.add_parser("remove", help="Remove a hidden message")
    remove_parser.add_argument("file_path", metavar="FILE_PATH")
    remove_parser.add_argument("chunk_type", metavar="CHUNK_TYPE")

    print_parser = subparsers.add_parser("print", help="List every chunk of a file")
    print_parser.add_argument("file_path", metavar="FILE_PATH")

    return parser


def _run_encode(args: argparse.Namespace) -> None:
    print(f"Encode into: {args.file_path}")
    print(f"Chunk type: {args.chunk_type}")
    print(f"Message: {args.message}")
    encode(args.file_path, args.chunk_type, args.message, args.output_file)


def _run_decode(args: argparse.Namespace) -> None:
    print(f"Decode from: {args.file_path}")
    print(f"Chunk type: {args.chunk_type}")
    decode(args.file_path, args.chunk_type)


def _run_remove(args: argparse.Namespace) -> None:
    print(f"Removing from: {args.file_path}")
    print(f"Chunk type: {args.chunk_type}")
    remove(args.file_path, args.chunk_type)


def _run_print(args: argparse.Namespace) -> None:
    print(f"Printing chunks from: {args.file_path}")
    print_chunks(args.file_path)


_HANDLERS: dict[str, tuple[str, Callable[[argparse.Namespace], None]]] = {
    "encode": ("encoding", _run_encode),
    "decode": ("decoding", _run_decode),
    "remove": ("removing", _run_remove),
    "print": ("printing", _run_print),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return 0 on success and 1 on failure."""
    args = build_parser().parse_args(argv)
    action, handler = _HANDLERS[args.command]
    try:
        handler(args)
    except _FAILURES as exc:
        print(f"Error {action}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())