import pytest

from transposition.textio import join_lines, read_text, write_text


@pytest.mark.parametrize("content,expected", [
    ("", ""),
    ("single", "single"),
    ("single\n", "single"),
    ("line one\nline two", "line one line two"),
    ("line one\nline two\n", "line one line two"),
    ("a\n\nb", "a  b"),
    ("a\n\n", "a "),
    ("\n", ""),
])
def test_join_lines(content, expected):
    assert join_lines(content) == expected


def test_read_text_joins_lines(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_bytes(b"WE ARE\nDISCOVERED\nFLEE AT ONCE\n")
    assert read_text(str(path)) == "WE ARE DISCOVERED FLEE AT ONCE"


def test_read_text_handles_windows_and_old_mac_newlines(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_bytes(b"one\r\ntwo\rthree")
    assert read_text(str(path)) == "one two three"


def test_read_text_utf8(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_bytes("grüße\n".encode("utf-8"))
    assert read_text(str(path)) == "grüße"


def test_read_text_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text(str(tmp_path / "nope.txt"))


def test_write_text_is_verbatim(tmp_path):
    path = tmp_path / "out.txt"
    write_text(str(path), "RSEFAC EDOEEO   ")
    assert path.read_bytes() == b"RSEFAC EDOEEO   "
