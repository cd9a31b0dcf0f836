import pytest

from mgengine.stringutils import split


def test_split_keeps_empty_fields():
    assert split("a,b,,c", ",") == ["a", "b", "", "c"]


def test_split_empty_string():
    assert split("", ",") == [""]


def test_split_trailing_delimiter():
    assert split("x;y;", ";") == ["x", "y", ""]


def test_split_join_round_trip():
    text = "one two  three"
    assert " ".join(split(text, " ")) == text


def test_split_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split("a,,b", ",,")