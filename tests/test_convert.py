import errno

import pytest
from hypothesis import given
from hypothesis import strategies as st

from uwkit.convert import (
    isdigit,
    skip_chars,
    skip_spaces,
    substr_to_utf8,
    substr_to_utf8 as _substr,
    to_float,
    to_int,
    to_utf8,
)
from uwkit.status import ERRNO, StatusError


@given(st.text(alphabet=" \tab\n"), st.integers(min_value=0, max_value=8))
def test_skip_spaces_invariant(text, position):
    result = skip_spaces(text, position)
    assert result >= min(position, len(text))
    assert all(c.isspace() for c in text[position:result])
    assert result == len(text) or not text[result].isspace()


def test_skip_spaces_past_end_returns_length():
    assert skip_spaces("ab", 10) == len("ab")


@given(st.text(alphabet="xyz-"), st.integers(min_value=0, max_value=6))
def test_skip_chars_invariant(text, position):
    result = skip_chars(text, position, "xy")
    assert all(c in "xy" for c in text[position:result])
    assert result == len(text) or text[result] not in "xy"


def test_skip_spaces_rejects_negative():
    with pytest.raises(ValueError):
        skip_spaces("abc", -1)


@given(st.integers(min_value=-(2**63), max_value=2**64 - 1))
def test_to_int_decimal_round_trip(n):
    assert to_int(str(n)) == n


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_to_int_hex_round_trip(n):
    assert to_int(hex(n)) == n


@given(st.integers(min_value=0, max_value=2**63 - 1))
def test_to_int_octal_round_trip(n):
    assert to_int("0" + format(n, "o")) == n


def test_to_int_leading_space_and_trailing_garbage():
    assert to_int("  123xyz") == 123


def test_to_int_not_a_number():
    assert to_int("abc") == 0


@pytest.mark.parametrize("text", [str(2**64), str(-(2**63) - 1)])
def test_to_int_overflow(text):
    with pytest.raises(StatusError) as info:
        to_int(text)
    assert info.value.status.code == ERRNO
    assert info.value.status.errno == errno.ERANGE


def test_to_int_rejects_non_string():
    with pytest.raises(TypeError):
        to_int(12)


@given(st.floats(allow_nan=False, allow_infinity=False, allow_subnormal=False))
def test_to_float_round_trip(x):
    assert to_float(repr(x)) == x


@given(st.floats(allow_nan=False, allow_infinity=False, allow_subnormal=False))
def test_to_float_hex_round_trip(x):
    assert to_float(x.hex()) == x


def test_to_float_infinity():
    assert to_float(" -inf") == float("-inf")


@pytest.mark.parametrize("text", ["1e999", "1e-400"])
def test_to_float_range_errors(text):
    with pytest.raises(StatusError) as info:
        to_float(text)
    assert info.value.status.errno == errno.ERANGE


def test_to_float_not_a_number():
    assert to_float("xyz") == 0.0


@given(st.integers(min_value=0))
def test_isdigit_for_numbers(n):
    assert isdigit(str(n))


def test_isdigit_rejects():
    assert not isdigit("")
    assert not isdigit("-1")
    assert not isdigit("12a")


@given(st.text())
def test_to_utf8_matches_encoding(text):
    assert to_utf8(text) == text.encode("utf-8")


def test_to_utf8_bytes_stop_at_nul():
    assert to_utf8(b"ab\0cd") == b"ab"


@given(st.text(), st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_substr_to_utf8_str(text, start, end):
    assert substr_to_utf8(text, start, end) == text[start:end].encode("utf-8")


@given(st.text(alphabet=st.characters(blacklist_characters="\0")),
       st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_substr_to_utf8_bytes_matches_str(text, start, end):
    assert _substr(text.encode("utf-8"), start, end) == substr_to_utf8(text, start, end)


def test_substr_to_utf8_bytes_stops_at_nul():
    assert substr_to_utf8("héllo\0world".encode(), 1, 20) == "éllo".encode()