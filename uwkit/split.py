"""Splitting text on a single character."""

from __future__ import annotations


def _as_char(splitter: str | int) -> str:
    if isinstance(splitter, int):
        splitter = chr(splitter)
    if len(splitter) != 1:
        raise ValueError(f"expected a single character, got {splitter!r}")
    return splitter


def _check_maxsplit(maxsplit: int) -> int:
    if maxsplit < 0:
        raise ValueError(f"maxsplit must not be negative: {maxsplit}")
    return maxsplit or -1


def split_chr(text: str, splitter: str | int, maxsplit: int = 0) -> list[str]:
    """Split `text` on `splitter` from the left.

    A `maxsplit` of zero means no limit. Always returns at least one
    element; the empty string yields ``[""]``.
    """
    sep = _as_char(splitter)
    return text.split(sep, _check_maxsplit(maxsplit))


def rsplit_chr(text: str, splitter: str | int, maxsplit: int = 0) -> list[str]:
    """Split `text` on `splitter` from the right.

    A `maxsplit` of zero means no limit. The empty string yields an empty
    list, and a splitter in the very first position is never treated as a
    separator: it stays part of the first element.
    """
    sep = _as_char(splitter)
    limit = _check_maxsplit(maxsplit)
    if not text:
        return []
    head, body = text[0], text[1:]
    parts = body.rsplit(sep, limit)
    parts[0] = head + parts[0]
    return parts