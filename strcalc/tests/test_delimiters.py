"""Tests for delimiter header parsing and body splitting."""

import pytest

from strcalc.delimiters import DEFAULT_DELIMITERS, Delimiters, parse_header, split_body
from strcalc.errors import CannotFindCustomDelimiter


# --- parse_header ---

def test_no_marker_uses_defaults():
    d = parse_header("1,2\n3")
    assert d.separators == list(DEFAULT_DELIMITERS)
    assert d.body == "1,2\n3"


def test_bracketed_header():
    d = parse_header("//[;][***]\n1;2***3")
    assert d.separators == [";", "***"]
    assert d.body == "1;2***3"


def test_only_first_newline_ends_header():
    d = parse_header("//[;]\n1;2\n3")
    assert d.body == "1;2\n3"


def test_missing_newline_reason():
    with pytest.raises(CannotFindCustomDelimiter) as exc:
        parse_header("//[;]1;2")
    assert "newline" in exc.value.reason
    assert exc.value.header == "[;]1;2"


def test_empty_header_reason():
    with pytest.raises(CannotFindCustomDelimiter) as exc:
        parse_header("//\n1")
    assert exc.value.header == ""
    assert "empty" in exc.value.reason


def test_legacy_header_whole_text():
    d = parse_header("//sep\n1sep2", legacy=True)
    assert d.separators == ["sep"]


@pytest.mark.parametrize("header", ["[;]x[%]", "x[;]", "[;]x", "[;] [%]", "[][;]"])
def test_text_outside_brackets_rejected(header):
    with pytest.raises(CannotFindCustomDelimiter) as exc:
        parse_header(f"//{header}\n1;2%3")
    assert exc.value.header == header
    assert "only [delimiter] segments" in exc.value.reason


def test_stray_text_rejected_in_legacy_mode():
    with pytest.raises(CannotFindCustomDelimiter):
        parse_header("//[;]x[%]\n1;2%3", legacy=True)


# --- split_body ---

def test_split_defaults():
    assert split_body(Delimiters(body="1\n2,3")) == ["1", "2", "3"]


def test_split_regex_characters_literally():
    d = Delimiters(separators=["$", "(", "^"], body="1$2(3^4")
    assert split_body(d) == ["1", "2", "3", "4"]


def test_split_keeps_empty_tokens():
    assert split_body(Delimiters(body="1,,2")) == ["1", "", "2"]


def test_split_duplicate_separators():
    d = Delimiters(separators=[";", ";"], body="1;2")
    assert split_body(d) == ["1", "2"]
