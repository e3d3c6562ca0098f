import pytest

from threadkit.filestream import (
    BinaryInputFileStream,
    BinaryOutputFileStream,
    CharInputFileStream,
    CharOutputFileStream,
    FileStream,
    InputFileStream,
    OutputFileStream,
)


def test_binary_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    payload = bytes([0, 1, 2, 255, 128])
    with BinaryOutputFileStream(path) as out:
        out.write(payload)
    with BinaryInputFileStream(path) as inp:
        assert inp.read_all() == payload


def test_binary_write_accepts_int_list(tmp_path):
    path = tmp_path / "ints.bin"
    with BinaryOutputFileStream(path) as out:
        out.write([65, 66, 67])
    assert path.read_bytes() == b"ABC"


def test_char_round_trip_string_and_parts(tmp_path):
    path = tmp_path / "text.txt"
    with CharOutputFileStream(path) as out:
        out.write("hello ")
        out.write(["wor", "ld\n"])
    with CharInputFileStream(path) as inp:
        assert inp.read_all() == "hello world\n"


def test_output_truncates_by_default(tmp_path):
    path = tmp_path / "t.txt"
    path.write_text("old content")
    with CharOutputFileStream(path) as out:
        out.write("new")
    assert path.read_text() == "new"


def test_append_mode_keeps_content(tmp_path):
    path = tmp_path / "a.bin"
    with BinaryOutputFileStream(path) as out:
        out.write(b"ab")
    with BinaryOutputFileStream(path, append=True) as out:
        out.write(b"cd")
    assert path.read_bytes() == b"abcd"


def test_size_matches_content_and_keeps_position(tmp_path):
    path = tmp_path / "s.bin"
    content = b"0123456789"
    path.write_bytes(content)
    with BinaryInputFileStream(path) as inp:
        inp._file.seek(3)
        assert inp.size() == len(content)
        assert inp._file.tell() == 3


def test_read_all_rewinds(tmp_path):
    path = tmp_path / "r.bin"
    path.write_bytes(b"xyz")
    with InputFileStream(path, binary=True) as inp:
        inp._file.read()
        assert inp.read_all() == b"xyz"


def test_missing_file_is_not_open(tmp_path):
    stream = CharInputFileStream(tmp_path / "missing.txt")
    assert stream.is_open() is False
    with pytest.raises(OSError):
        stream.read_all()
    with pytest.raises(OSError):
        stream.size()


def test_context_manager_closes(tmp_path):
    path = tmp_path / "c.txt"
    with OutputFileStream(path) as out:
        assert out.is_open() is True
    assert out.is_open() is False
    with pytest.raises(OSError):
        out.write("late")


def test_generic_filestream_mode(tmp_path):
    path = tmp_path / "g.bin"
    path.write_bytes(b"12345")
    with FileStream(path, "rb") as stream:
        assert stream.size() == 5
        assert stream.path == str(path)