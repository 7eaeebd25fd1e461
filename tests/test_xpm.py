import pytest

from fractview.mlx.colornames import find_color
from fractview.mlx.xpm import (
    XpmError,
    extract_quoted_lines,
    find_outside_quotes,
    parse_xpm,
    str_to_wordtab,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)


def test_str_to_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  a\tb   c ") == ["a", "b", "c"]
    assert str_to_wordtab(" \t ") == []


def test_find_outside_quotes_skips_quoted_match():
    text = '"/*" /*'
    assert find_outside_quotes(text, "/*") == text.rindex("/*")


def test_find_outside_quotes_missing_and_too_long():
    assert find_outside_quotes('"//"', "//") == -1
    assert find_outside_quotes("abc", "abcd") == -1


def test_find_outside_quotes_empty_search():
    with pytest.raises(ValueError):
        find_outside_quotes("abc", "")


def test_strip_comments_keeps_length_and_strings():
    text = '/* XPM */\n"a /* b */ c", // tail\n"d"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "XPM" not in stripped
    assert "tail" not in stripped
    assert extract_quoted_lines(stripped) == ["a /* b */ c", "d"]


def test_extract_quoted_lines():
    assert extract_quoted_lines('x "ab" y "cd" "unterminated') == ["ab", "cd"]


def test_text_to_rgb_hex_and_names():
    assert text_to_rgb("#00ff00", None) == 0x00FF00
    assert text_to_rgb("Red", None) == find_color("red")
    assert text_to_rgb("light", "blue") == find_color("light blue")
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_xpm_basic():
    image = parse_xpm(["2 2 2 1", "a c #0000FF", "b c red", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0x0000FF
    assert image.get_pixel(1, 0) == find_color("red")
    assert image.get_pixel(0, 1) == find_color("red")
    assert image.get_pixel(1, 1) == 0x0000FF


def test_parse_xpm_transparent_pixel():
    image = xpm_to_image(["1 1 1 2", "zz c None", "zz"])
    assert image.get_pixel(0, 0) == 0xFF000000


def test_unknown_pixel_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c #123456", "aq"])
    assert image.get_pixel(0, 0) == 0x123456
    assert image.get_pixel(1, 0) == 0


def test_duplicate_short_key_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 0x000002


def test_duplicate_long_key_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c #000001", "aaa c #000002", "aaa"])
    assert image.get_pixel(0, 0) == 0x000001


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a s foo"],
        ["1 1 1 1", "a c"],
        ["1 2 1 1", "a c #000000", "a"],
        ["1 1 2 1", "a c #000000"],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_file_to_image(tmp_path):
    path = tmp_path / "demo.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *demo[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"a c #0000FF",\n'
        "// transparent entry\n"
        '"b c None",\n'
        '"ab"\n'
        "};\n"
    )
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == 0x0000FF
    assert image.get_pixel(1, 0) == 0xFF000000


def test_xpm_file_missing(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "missing.xpm")