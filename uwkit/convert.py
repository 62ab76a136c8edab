"""Number parsing, character skipping and UTF-8 output for text."""

from __future__ import annotations

import errno as _errno
import math
import re
import sys

from uwkit.status import ERRNO, Status, StatusError
from uwkit.utf8 import INVALID, encode_char, read_utf8_char

_C_SPACES = "[ \t\n\v\f\r]*"

_INT_RE = re.compile(_C_SPACES + r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")

_FLOAT_RE = re.compile(
    _C_SPACES
    + r"""(
        [+-]?
        (?:
            0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?
          | (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
          | inf(?:inity)?
          | nan(?:\([0-9A-Za-z_]*\))?
        )
    )""",
    re.VERBOSE | re.IGNORECASE,
)

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1


def _range_error() -> StatusError:
    return StatusError(Status(ERRNO, errno=_errno.ERANGE))


def _require_str(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return text


def _check_position(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def skip_spaces(text: str, position: int = 0) -> int:
    """Return the index of the first non-space at or after `position`, or the length."""
    _check_position("position", position)
    return next(
        (i for i, c in enumerate(text[position:], position) if not c.isspace()),
        len(text),
    )


def skip_chars(text: str, position: int, skipchars: str) -> int:
    """Return the index of the first character not in `skipchars`, or the length."""
    _check_position("position", position)
    return next(
        (i for i, c in enumerate(text[position:], position) if c not in skipchars),
        len(text),
    )


def to_int(text: str) -> int:
    """Parse a leading integer (decimal, 0x hex or 0 octal).

    Text that does not start with a number gives 0. A value outside the
    signed (for a leading minus) or unsigned 64-bit range raises StatusError
    carrying ERANGE.
    """
    text = _require_str(text)
    position = skip_spaces(text, 0)
    negative = position < len(text) and text[position] == "-"

    match = _INT_RE.match(text)
    if not match:
        return 0
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif len(digits) > 1 and digits[0] == "0":
        value = int(digits, 8)
    else:
        value = int(digits, 10)
    if sign == "-":
        value = -value

    if negative:
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise _range_error()
    elif value > _UINT64_MAX:
        raise _range_error()
    return value


def to_float(text: str) -> float:
    """Parse a leading floating-point number.

    Text that does not start with a number gives 0.0. Overflow and
    underflow raise StatusError carrying ERANGE.
    """
    text = _require_str(text)
    match = _FLOAT_RE.match(text)
    if not match:
        return 0.0
    literal = match.group(1)
    body = literal.lstrip("+-").lower()
    negative = literal.startswith("-")

    if body.startswith("inf"):
        return -math.inf if negative else math.inf
    if body.startswith("nan"):
        return -math.nan if negative else math.nan

    if body.startswith("0x"):
        mantissa = body[2:].split("p", 1)[0]
        try:
            result = float.fromhex(literal)
        except OverflowError:
            raise _range_error() from None
    else:
        mantissa = body.split("e", 1)[0]
        result = float(literal)

    if math.isinf(result):
        raise _range_error()
    nonzero = re.search("[1-9a-f]", mantissa) is not None
    if nonzero and abs(result) < sys.float_info.min:
        raise _range_error()
    return result


def isdigit(text: str) -> bool:
    """Return True if `text` is non-empty and every character is a digit."""
    return bool(text) and all(c.isdigit() for c in text)


def to_utf8(text: str | bytes | bytearray) -> bytes:
    """Encode `text` as UTF-8; byte strings are copied up to the first NUL."""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).split(b"\0", 1)[0]
    return b"".join(encode_char(ord(c)) for c in text)


def substr_to_utf8(text: str | bytes | bytearray, start: int, end: int) -> bytes:
    """Encode the characters from `start` up to `end` as UTF-8.

    For null-terminated UTF-8 input, each decoding step counts as one
    position, invalid sequences included.
    """
    _check_position("start", start)
    _check_position("end", end)
    if isinstance(text, (bytes, bytearray)):
        if start >= end:
            return b""
        data = bytes(text)
        pieces = []
        pos = 0
        index = 0
        while index < end:
            codepoint, pos = read_utf8_char(data, pos)
            index += 1
            if codepoint == INVALID:
                continue
            if codepoint == 0:
                break
            if index > start:
                pieces.append(encode_char(codepoint))
        return b"".join(pieces)

    end = min(end, len(text))
    if end <= start:
        return b""
    return to_utf8(text[start:end])