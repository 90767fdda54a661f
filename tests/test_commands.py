import pytest

from enigma.chunk import Chunk, ChunkError
from enigma.chunk_type import ChunkType, ChunkTypeError
from enigma.commands import CommandError, decode, encode, print_chunks, remove
from enigma.png import Png, PngError


def _chunk(kind: str, data: bytes) -> Chunk:
    return Chunk(ChunkType.from_str(kind), data)


@pytest.fixture
def png_file(tmp_path):
    png = Png([_chunk("FrSt", b"I am the first chunk"), _chunk("IEND", b"")])
    path = tmp_path / "image.png"
    path.write_bytes(png.as_bytes())
    return path


def test_encode_then_decode_round_trip(png_file, capsys):
    encode(png_file, "RuSt", "This is where your secret message will be!")
    capsys.readouterr()
    message = decode(png_file, "RuSt")
    assert message == "This is where your secret message will be!"
    out = capsys.readouterr().out
    assert "Decoded message: This is where your secret message will be!" in out


def test_encode_overwrites_input_and_appends_last(png_file, capsys):
    written = encode(png_file, "RuSt", "hidden")
    assert written == png_file
    chunks = Png.from_file(png_file).chunks()
    assert [str(c.chunk_type) for c in chunks] == ["FrSt", "IEND", "RuSt"]
    assert chunks[-1].data_as_string() == "hidden"
    assert f"Encoded message into PNG file: {png_file}" in capsys.readouterr().out


def test_encode_to_separate_output_leaves_input_untouched(png_file, tmp_path):
    original = png_file.read_bytes()
    output = tmp_path / "out.png"
    written = encode(png_file, "RuSt", "hidden", output)
    assert written == output
    assert png_file.read_bytes() == original
    assert decode(output, "RuSt") == "hidden"


def test_encode_rejects_bad_chunk_type(png_file):
    original = png_file.read_bytes()
    with pytest.raises(ChunkTypeError):
        encode(png_file, "Ru1t", "hidden")
    with pytest.raises(ChunkTypeError):
        encode(png_file, "Rus", "hidden")
    assert png_file.read_bytes() == original


def test_encode_rejects_non_png(tmp_path):
    path = tmp_path / "text.png"
    path.write_bytes(b"not a png at all")
    with pytest.raises(PngError):
        encode(path, "RuSt", "hidden")


def test_decode_missing_chunk_raises(png_file):
    with pytest.raises(CommandError, match="Chunk not found"):
        decode(png_file, "RuSt")


def test_decode_non_utf8_data_raises(tmp_path):
    path = tmp_path / "binary.png"
    path.write_bytes(Png([_chunk("RuSt", b"\xff\xfe\xfd")]).as_bytes())
    with pytest.raises(ChunkError):
        decode(path, "RuSt")


def test_decode_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        decode(tmp_path / "absent.png", "RuSt")


def test_remove_deletes_first_matching_chunk(png_file, capsys):
    encode(png_file, "RuSt", "one")
    encode(png_file, "RuSt", "two")
    capsys.readouterr()
    removed = remove(png_file, "RuSt")
    assert str(removed.chunk_type) == "RuSt"
    assert removed.data_as_string() == "one"
    assert "Removed chunk: RuSt" in capsys.readouterr().out
    assert decode(png_file, "RuSt") == "two"


def test_remove_then_decode_fails(png_file):
    before = png_file.read_bytes()
    encode(png_file, "RuSt", "hidden")
    remove(png_file, "RuSt")
    assert png_file.read_bytes() == before
    with pytest.raises(CommandError):
        decode(png_file, "RuSt")


def test_remove_missing_chunk_raises(png_file):
    original = png_file.read_bytes()
    with pytest.raises(PngError, match="Chunk type 'RuSt' not found"):
        remove(png_file, "RuSt")
    assert png_file.read_bytes() == original


def test_print_chunks_lists_every_chunk(png_file, capsys):
    chunks = print_chunks(png_file)
    assert [str(c.chunk_type) for c in chunks] == ["FrSt", "IEND"]
    out = capsys.readouterr().out
    assert out == "".join(f"{chunk}\n" for chunk in chunks)
    assert "  Type: FrSt" in out
    assert "  Type: IEND" in out


def test_print_chunks_invalid_header_raises(tmp_path):
    path = tmp_path / "bad.png"
    good = Png([_chunk("IEND", b"")]).as_bytes()
    path.write_bytes(bytes([13]) + good[1:])
    with pytest.raises(PngError, match="Invalid PNG header"):
        print_chunks(path)