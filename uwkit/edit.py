"""Editing operations on text; each returns a new string."""

from __future__ import annotations

from uwkit.utf8 import decode_utf8_buffer


def _check_position(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def erase(text: str, start: int, end: int) -> str:
    """Remove the characters from `start` up to `end`.

    Out-of-range or empty ranges leave the text unchanged; an `end`
    past the last character truncates at `start`.
    """
    _check_position("start", start)
    _check_position("end", end)
    length = len(text)
    if start >= length or start >= end:
        return text
    if end >= length:
        return text[:start]
    return text[:start] + text[end:]


def truncate(text: str, position: int) -> str:
    """Cut `text` to at most `position` characters."""
    _check_position("position", position)
    if position >= len(text):
        return text
    return text[:position]


def insert_many(text: str, position: int, char: str | int, count: int) -> str:
    """Insert `count` copies of `char` at `position`."""
    if isinstance(char, int):
        char = chr(char)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _check_position("count", count)
    if count == 0:
        return text
    if not 0 <= position <= len(text):
        raise ValueError(f"position {position} out of range for length {len(text)}")
    return text[:position] + char * count + text[position:]


def _leading_spaces(text: str) -> int:
    count = 0
    for c in text:
        if not c.isspace():
            break
        count += 1
    return count


def ltrim(text: str) -> str:
    """Remove leading whitespace."""
    return erase(text, 0, _leading_spaces(text))


def rtrim(text: str) -> str:
    """Remove trailing whitespace."""
    trailing = _leading_spaces(reversed(text))
    return truncate(text, len(text) - trailing)


def trim(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return ltrim(rtrim(text))


def _map_chars(text: str, convert) -> str:
    """Apply a per-character case mapping, keeping characters that would expand."""
    chars = []
    for c in text:
        mapped = convert(c)
        chars.append(mapped if len(mapped) == 1 else c)
    return "".join(chars)


def lower(text: str) -> str:
    """Lower-case each character; the length never changes."""
    return _map_chars(text, str.lower)


def upper(text: str) -> str:
    """Upper-case each character; the length never changes."""
    return _map_chars(text, str.upper)


def append_utf8(text: str, data: bytes) -> tuple[str, int]:
    """Append decoded UTF-8 `data` to `text`.

    A trailing incomplete sequence is left undecoded. Returns the new text
    and the number of bytes consumed.
    """
    if not data:
        return text, 0
    decoded, consumed = decode_utf8_buffer(data)
    return text + decoded, consumed