import pytest
from hypothesis import given
from hypothesis import strategies as st

from uwkit.split import rsplit_chr, split_chr

_texts = st.text(alphabet="ab/\u0100\U00010000", max_size=20)


def test_split_basic():
    assert split_chr("a/b/c", "/") == ["a", "b", "c"]


def test_split_empty_string():
    assert split_chr("", "/") == [""]


def test_split_codepoint_splitter():
    assert split_chr("x:y", ord(":")) == ["x", "y"]


def test_split_maxsplit_keeps_rest():
    parts = split_chr("a/b/c/d", "/", 1)
    assert parts[0] == "a"
    assert "/".join(parts) == "a/b/c/d"
    assert len(parts) == 2


def test_split_trailing_splitter():
    parts = split_chr("a/", "/")
    assert parts == ["a", ""]


def test_split_bad_splitter():
    with pytest.raises(ValueError):
        split_chr("abc", "ab")


def test_split_negative_maxsplit():
    with pytest.raises(ValueError):
        split_chr("a/b", "/", -1)


@given(_texts)
def test_split_join_roundtrip(text):
    parts = split_chr(text, "/")
    assert "/".join(parts) == text
    assert len(parts) == text.count("/") + 1


@given(_texts, st.integers(min_value=1, max_value=5))
def test_split_maxsplit_limits_parts(text, maxsplit):
    parts = split_chr(text, "/", maxsplit)
    assert len(parts) <= maxsplit + 1
    assert "/".join(parts) == text


def test_rsplit_basic():
    assert rsplit_chr("a//b", "/") == ["a", "", "b"]


def test_rsplit_empty_string():
    assert rsplit_chr("", "/") == []


def test_rsplit_leading_splitter_kept():
    assert rsplit_chr("/a", "/") == ["/a"]


def test_rsplit_trailing_splitter():
    assert rsplit_chr("a/", "/") == ["a", ""]


def test_rsplit_maxsplit():
    parts = rsplit_chr("a/b/c", "/", 1)
    assert parts[-1] == "c"
    assert "/".join(parts) == "a/b/c"
    assert len(parts) == 2


def test_rsplit_port_style():
    assert rsplit_chr("host:80", ":", 1) == ["host", "80"]


def test_rsplit_bad_splitter():
    with pytest.raises(ValueError):
        rsplit_chr("abc", "")


@given(_texts)
def test_rsplit_join_roundtrip(text):
    parts = rsplit_chr(text, "/")
    assert "/".join(parts) == text


@given(_texts.filter(lambda t: t and t[0] != "/"))
def test_rsplit_matches_split_without_leading(text):
    assert rsplit_chr(text, "/") == split_chr(text, "/")


@given(_texts, st.integers(min_value=1, max_value=5))
def test_rsplit_maxsplit_limits_parts(text, maxsplit):
    parts = rsplit_chr(text, "/", maxsplit)
    assert len(parts) <= maxsplit + 1
    assert "/".join(parts) == text