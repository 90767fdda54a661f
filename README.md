# enigma

Hide text messages inside PNG images by adding extra chunks to them. Every
chunk written gets a correct CRC, so the file keeps a valid PNG chunk
structure and opens as usual.

## Installation

```
pip install .
```

This installs the `enigma` command. It needs nothing beyond the Python
standard library.

## Command line

Store a message in a chunk of type `ruSt`, appended after the existing
chunks. The file is rewritten in place unless an output path is given:

```
enigma encode picture.png ruSt "meet at dawn"
enigma encode picture.png ruSt "meet at dawn" secret.png
```

Read the message back from the first chunk of that type:

```
enigma decode secret.png ruSt
```

Remove the first chunk of that type; the file is rewritten in place:

```
enigma remove secret.png ruSt
```

List every chunk in the file with its length, type, data size and CRC:

```
enigma print secret.png
```

`enigma --version` prints the version, and `enigma --help` (or
`enigma COMMAND --help`) shows usage.

Each command first echoes its arguments (for example `Decode from: ...` and
`Chunk type: ...`) and then its result. If something goes wrong (a missing
file, a broken PNG, a bad chunk type, a chunk that is not there, data that is
not UTF-8) the command prints `Error <action>: <reason>` to standard error and
exits with status 1.

## Chunk types

A chunk type is exactly four ASCII letters; anything else is rejected with
`ChunkTypeError`. The case of each letter carries meaning, and `ChunkType`
reports it:

- `is_critical()`: the first letter is upper case.
- `is_public()`: the second letter is upper case.
- `is_reserved_bit_valid()`: the third letter is upper case.
- `is_safe_to_copy()`: the fourth letter is lower case.
- `is_valid()`: all four are letters and the third is upper case.

Any four letters are accepted for encoding. For hidden messages choose a type
with a lower-case first letter and an upper-case third letter, such as
`ruSt`, so that image viewers treat the chunk as ancillary and skip it.

## Library

```python
from enigma.chunk import Chunk
from enigma.chunk_type import ChunkType
from enigma.png import Png

png = Png.from_file("picture.png")
png.append_chunk(Chunk(ChunkType.from_str("ruSt"), b"meet at dawn"))

with open("secret.png", "wb") as handle:
    handle.write(png.as_bytes())

found = png.chunk_by_type("ruSt")
print(found.data_as_string())
```

- `ChunkType(raw)` takes four bytes; `ChunkType.from_str(text)` takes a
  four-character string. `bytes()` and `str()` give the code back.
- `Chunk(chunk_type, data)` computes the CRC itself. `Chunk.from_bytes(raw)`
  parses one chunk from the start of `raw` and checks its length and CRC. A
  chunk has `chunk_type`, `data` and `crc` attributes, and `length()`,
  `data_as_string()` and `as_bytes()` methods.
- `Png(chunks)` holds a list of chunks. `Png.from_bytes(data)` and
  `Png.from_file(path)` check the PNG signature and every chunk.
  `append_chunk`, `remove_first_chunk`, `chunk_by_type`, `chunks()`,
  `header()` and `as_bytes()` work on the chunk list.

Invalid data raises `PngError`, `ChunkError` or `ChunkTypeError`, all
subclasses of `ValueError`. `remove_first_chunk` raises `PngError` when no
chunk of the type exists; `chunk_by_type` returns `None` instead.

`enigma.commands` offers the same operations as the command line:
`encode(file_path, chunk_type, message, output_path=None)` returns the path
written, `decode(path, chunk_type)` returns the message (or raises
`CommandError` when the chunk is missing), `remove(path, chunk_type)` returns
the removed chunk, and `print_chunks(path)` returns all chunks. Each also
prints what it did.

## What it does not do

The package works on the chunk layout only. It does not decode or check image
pixels, does not look inside standard chunks such as `IHDR` or `IDAT`, does not
check that the file ends with `IEND`, and does not encrypt or compress
messages: anyone who lists the chunks can read them.

## Running the tests

```
pip install ".[test]"
pytest
```