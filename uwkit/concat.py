"""Substring extraction and concatenation."""

from __future__ import annotations

from uwkit.status import Status, StatusError
from uwkit.utf8 import decode_utf8


def substr(text: str, start: int, end: int | None = None) -> str:
    """Return the characters of `text` from `start` up to `end`.

    `end` is clamped to the length of `text` (None means the end); an empty
    or inverted range gives the empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative: {start}")
    length = len(text)
    if end is None or end > length:
        end = length
    if end < 0:
        raise ValueError(f"end must not be negative: {end}")
    if start >= end:
        return ""
    return text[start:end]


def strcat(*args: str | bytes | bytearray | Status) -> str:
    """Concatenate strings and null-terminated UTF-8 byte strings.

    An error Status among the arguments is raised as StatusError; any other
    argument type raises TypeError.
    """
    pieces = []
    for arg_no, arg in enumerate(args, start=1):
        if isinstance(arg, str):
            pieces.append(arg)
        elif isinstance(arg, (bytes, bytearray)):
            pieces.append(decode_utf8(bytes(arg)))
        elif isinstance(arg, Status) and arg.is_error:
            raise StatusError(arg)
        else:
            raise TypeError(
                f"Bad argument {arg_no} type for strcat: {type(arg).__name__}"
            )
    return "".join(pieces)