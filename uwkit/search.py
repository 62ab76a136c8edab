"""Substring comparison and character search on text."""

from __future__ import annotations


def _as_text(value: str | int) -> str:
    """Accept either a string or a single codepoint."""
    if isinstance(value, int):
        return chr(value)
    return value


def _check_position(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def substring_eq(text: str, start: int, end: int, other: str) -> bool:
    """Return True if ``text[start:end]`` equals `other`.

    `end` is clamped to the length of `text`; a range whose end falls
    before its start never matches.
    """
    _check_position("start", start)
    _check_position("end", end)
    end = min(end, len(text))
    if end < start:
        return False
    return text[start:end] == other


def startswith(text: str, prefix: str | int) -> bool:
    """Return True if `text` starts with `prefix` (a string or a codepoint)."""
    prefix = _as_text(prefix)
    return substring_eq(text, 0, len(prefix), prefix)


def endswith(text: str, suffix: str | int) -> bool:
    """Return True if `text` ends with `suffix` (a string or a codepoint)."""
    suffix = _as_text(suffix)
    length = len(text)
    if len(suffix) > length:
        return False
    return substring_eq(text, length - len(suffix), length, suffix)


def strchr(text: str, char: str | int, start: int = 0) -> int | None:
    """Return the index of the first `char` at or after `start`, or None."""
    _check_position("start", start)
    char = _as_text(char)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    index = text.find(char, start)
    return None if index < 0 else index