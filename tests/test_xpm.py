import pytest

from minirt.colornames import find_color
from minirt.xpm import (
    XpmError,
    XpmImage,
    find,
    find_unquoted,
    parse_xpm_lines,
    parse_xpm_text,
    read_xpm_file,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* width height colours chars */
"3 2 3 1",
"r c red",
". c None",
"g c #00FF00",
// pixels
"r.g",
"grr"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tbb   c \t") == ["a", "bb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


@pytest.mark.parametrize(
    "text, needle", [("hello world", "wor"), ("abcabc", "c"), ("abc", "zz")]
)
def test_find_matches_str_find(text, needle):
    assert find(text, needle, len(text)) == text.find(needle)


def test_find_needle_longer_than_limit():
    assert find("abcdef", "cde", 2) == -1


def test_find_unquoted_skips_quoted_match():
    text = 'x"//"//'
    assert find_unquoted(text, "//", len(text)) == text.rindex("//")


def test_find_unquoted_none_outside_quotes():
    text = 'a"//"b'
    assert find_unquoted(text, "//", len(text)) == -1


def test_strip_comments_block():
    text = "/* x */abc"
    assert strip_comments(text) == " " * 7 + "abc"


def test_strip_comments_line_keeps_length():
    text = 'a // note\n"b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "note" not in result
    assert result.endswith('"b"')


def test_strip_comments_leaves_quoted_text():
    text = '"/* keep */"'
    assert strip_comments(text) == text


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF00FF") == 0xFF00FF


def test_text_to_rgb_names():
    assert text_to_rgb("Red") == find_color("red")
    assert text_to_rgb("light", "blue") == find_color("light blue")
    assert text_to_rgb("None") == -1


def test_text_to_rgb_unknown_is_black():
    assert text_to_rgb("no-such-colour") == 0


def test_parse_lines_pixels():
    image = parse_xpm_lines(["2 1 2 1", "a c red", "b c #00FF00", "ab"])
    assert (image.width, image.height) == (2, 1)
    assert image.pixel(0, 0) == find_color("red")
    assert image.pixel(1, 0) == 0x00FF00


def test_transparent_pixel():
    image = parse_xpm_lines(["1 1 1 1", ". c None", "."])
    assert image.pixel(0, 0) == 0xFF000000


def test_two_char_pixels():
    image = parse_xpm_lines(["2 1 2 2", "aa c blue", "bb c white", "bbaa"])
    assert image.pixels == (find_color("white"), find_color("blue"))


def test_duplicate_key_short_codes_last_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == find_color("blue")


def test_duplicate_key_long_codes_first_wins():
    image = parse_xpm_lines(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.pixel(0, 0) == find_color("red")


def test_unknown_pixel_code_is_black():
    image = parse_xpm_lines(["1 1 1 1", "a c red", "z"])
    assert image.pixel(0, 0) == 0


def test_parse_text_with_comments():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(0, 0) == find_color("red")
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(2, 0) == 0x00FF00
    assert image.pixel(0, 1) == 0x00FF00
    assert len(image.pixels) == 6


def test_read_file_matches_text(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    assert read_xpm_file(path) == parse_xpm_text(SAMPLE)


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_xpm_file(tmp_path / "missing.xpm")


def test_pixel_out_of_range():
    image = XpmImage(1, 1, (0,))
    with pytest.raises(IndexError):
        image.pixel(1, 0)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_bad_lines_raise(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_text_without_strings_raises():
    with pytest.raises(XpmError):
        parse_xpm_text("/* XPM */ static char *x[] = {};")