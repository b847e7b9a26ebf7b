import io

import pytest

from minirt.text import LineReader, split, strncmp


def test_split_on_separator_and_newline():
    assert split("A 0.2 255,255,255\n", " ") == ["A", "0.2", "255,255,255"]


def test_split_drops_empty_words():
    assert split("  sp   0,0,20  12.6 \n\n", " ") == ["sp", "0,0,20", "12.6"]


def test_split_on_comma():
    assert split("255,0,128", ",") == ["255", "0", "128"]


def test_split_empty_text():
    assert split("", " ") == []


def test_split_then_join_round_trip():
    words = ["C", "-50,0,20", "0,0,1", "70"]
    assert split(" ".join(words) + "\n", " ") == words


def test_strncmp_equal_prefix():
    assert strncmp("Hellobbb", "Hellfbbb", 4) == 0


def test_strncmp_reports_sign_of_first_difference():
    assert strncmp("Hellobbb", "Hellfbbb", 8) > 0
    assert strncmp("Hellfbbb", "Hellobbb", 8) < 0
    assert strncmp("Hellobbb", "Hellfbbb", 8) == ord("o") - ord("f")


def test_strncmp_zero_length_is_equal():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_antisymmetric():
    assert strncmp("ambient", "brightness", 10) == -strncmp("brightness", "ambient", 10)


TEXT = "A 0.2 255,255,255\n\nC -50,0,20 0,0,1 70\nL -40,0,30 0.7"


@pytest.mark.parametrize("size", [1, 2, 5, 64, 4096])
def test_reader_returns_lines_with_newlines(size):
    reader = LineReader(io.StringIO(TEXT), size)
    assert list(reader) == TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 3, 1000])
def test_reader_binary_stream(size):
    data = TEXT.encode()
    reader = LineReader(io.BytesIO(data), size)
    assert b"".join(reader) == data


def test_reader_trailing_newline_gives_no_empty_line():
    reader = LineReader(io.StringIO("one\ntwo\n"))
    assert reader.read_line() == "one\n"
    assert reader.read_line() == "two\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_reader_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None


def test_reader_rejects_non_positive_buffer():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


class _Failing(io.RawIOBase):
    def read(self, size=-1):
        raise OSError("read failed")


def test_reader_propagates_read_error():
    with pytest.raises(OSError):
        LineReader(_Failing()).read_line()