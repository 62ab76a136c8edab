"""UTF-8 encoding and decoding helpers with null-terminated semantics."""

from __future__ import annotations

from collections.abc import Iterable

INVALID = 0xFFFFFFFF
"""Returned for a malformed sequence or an overlong-encoded zero."""

_MAX_PYTHON_CODEPOINT = 0x10FFFF


def encode_char(codepoint: int) -> bytes:
    """Encode a single codepoint as UTF-8 bytes (surrogates are not rejected)."""
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((0xC0 | (codepoint >> 6), 0x80 | (codepoint & 0x3F)))
    if codepoint < 0x10000:
        return bytes((
            0xE0 | (codepoint >> 12),
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        ))
    return bytes((
        0xF0 | ((codepoint >> 18) & 0x07),
        0x80 | ((codepoint >> 12) & 0x3F),
        0x80 | ((codepoint >> 6) & 0x3F),
        0x80 | (codepoint & 0x3F),
    ))


def _lead(c: int) -> tuple[int, int] | None:
    """Return (continuation count, initial bits) for a multi-byte lead byte."""
    if c & 0xE0 == 0xC0:
        return 1, c & 0x1F
    if c & 0xF0 == 0xE0:
        return 2, c & 0x0F
    if c & 0xF8 == 0xF0:
        return 3, c & 0x07
    return None


def _byte(data: bytes, pos: int) -> int:
    return data[pos] if pos < len(data) else 0


def read_utf8_char(data: bytes, pos: int) -> tuple[int, int]:
    """Decode one character of null-terminated data starting at `pos`.

    The end of `data` counts as a terminating zero. Returns the codepoint and
    the position after it. A sequence cut short by the terminator yields 0;
    a malformed sequence yields INVALID.
    """
    c = _byte(data, pos)
    pos += 1
    if c < 0x80:
        return c, pos
    lead = _lead(c)
    if lead is None:
        return INVALID, pos
    count, codepoint = lead
    for _ in range(count):
        nxt = _byte(data, pos)
        if nxt == 0:
            return 0, pos
        if nxt & 0xC0 != 0x80:
            return INVALID, pos
        pos += 1
        codepoint = (codepoint << 6) | (nxt & 0x3F)
    if codepoint == 0:
        return INVALID, pos
    return codepoint, pos


def read_utf8_buffer(data: bytes, pos: int) -> tuple[int, int] | None:
    """Decode one character from a sized buffer starting at `pos`.

    Null bytes decode as zero. Returns None when no bytes remain or the
    sequence is incomplete, otherwise the codepoint (INVALID if malformed)
    and the position after the bytes consumed.
    """
    if pos >= len(data):
        return None
    c = data[pos]
    pos += 1
    if c < 0x80:
        return c, pos
    lead = _lead(c)
    if lead is None:
        return INVALID, pos
    count, codepoint = lead
    if len(data) - pos < count:
        return None
    for _ in range(count):
        nxt = data[pos]
        pos += 1
        if nxt & 0xC0 != 0x80:
            return INVALID, pos
        codepoint = (codepoint << 6) | (nxt & 0x3F)
    if codepoint == 0:
        return INVALID, pos
    return codepoint, pos


def _valid(codepoint: int) -> bool:
    return codepoint != INVALID and codepoint <= _MAX_PYTHON_CODEPOINT


def decode_utf8(data: bytes) -> str:
    """Decode null-terminated UTF-8, skipping invalid sequences."""
    data = bytes(data)
    chars = []
    pos = 0
    while _byte(data, pos) != 0:
        codepoint, pos = read_utf8_char(data, pos)
        if _valid(codepoint):
            chars.append(chr(codepoint))
    return "".join(chars)


def decode_utf8_buffer(data: bytes) -> tuple[str, int]:
    """Decode a UTF-8 buffer up to any trailing incomplete sequence.

    Returns the decoded text and the number of bytes consumed. Invalid
    sequences are skipped; null bytes are kept.
    """
    data = bytes(data)
    chars = []
    pos = 0
    while (step := read_utf8_buffer(data, pos)) is not None:
        codepoint, pos = step
        if _valid(codepoint):
            chars.append(chr(codepoint))
    return "".join(chars), pos


def utf8_strlen(data: bytes) -> int:
    """Count the valid characters in null-terminated UTF-8 data."""
    return len(decode_utf8(data))


def char_size(codepoint: int) -> int:
    """Return the number of bytes (1 to 4) needed to store `codepoint`."""
    if codepoint < 256:
        return 1
    if codepoint < 65536:
        return 2
    if codepoint < 16777216:
        return 3
    return 4


def max_char_size(text: str | Iterable[int]) -> int:
    """Return the largest char size among the characters of `text`."""
    codepoints = (ord(c) for c in text) if isinstance(text, str) else text
    return max((char_size(cp) for cp in codepoints), default=1)


def utf8_length(text: str) -> int:
    """Return the number of bytes `text` takes when encoded as UTF-8."""
    total = 0
    for c in text:
        cp = ord(c)
        if cp < 0x80:
            total += 1
        elif cp < 0x800:
            total += 2
        elif cp < 0x10000:
            total += 3
        else:
            total += 4
    return total


def u32_strcmp(a: str, b: str) -> int:
    """Compare two strings up to their first NUL; return -1, 0 or 1."""
    if a is b:
        return 0
    for ca, cb in zip(map(ord, a + "\0"), map(ord, b + "\0")):
        if ca < cb:
            return -1
        if ca > cb:
            return 1
        if ca == 0:
            return 0
    return 0