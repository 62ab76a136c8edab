"""Reading text line by line, with one line of pushback."""

from __future__ import annotations

from collections.abc import Iterator

from uwkit.utf8 import decode_utf8


class UnreadError(Exception):
    """A line is already pushed back."""


class StringLineReader:
    """Line reader over an in-memory string; lines keep their newline."""

    def __init__(self, text: str | bytes | bytearray = ""):
        if isinstance(text, (bytes, bytearray)):
            text = decode_utf8(bytes(text))
        if not isinstance(text, str):
            raise TypeError(f"expected a string, got {type(text).__name__}")
        self._text = text
        self._pushback: str | None = None
        self._position = 0
        self.line_number = 0

    def start(self) -> None:
        """Rewind to the first line."""
        self._position = 0
        self.line_number = 0
        self._pushback = None

    def read_line(self) -> str:
        """Return the next line; raise EOFError when none remain."""
        if self._pushback is not None:
            line, self._pushback = self._pushback, None
            self.line_number += 1
            return line
        if self._position >= len(self._text):
            raise EOFError("no more lines")
        lf_pos = self._text.find("\n", self._position)
        end = len(self._text) if lf_pos < 0 else lf_pos + 1
        line = self._text[self._position:end]
        self._position = end
        self.line_number += 1
        return line

    def unread_line(self, line: str) -> None:
        """Push `line` back so the next read returns it."""
        if self._pushback is not None:
            raise UnreadError("a line is already pushed back")
        self._pushback = line
        self.line_number -= 1

    def stop(self) -> None:
        """Drop any pushed-back line."""
        self._pushback = None

    def __iter__(self) -> Iterator[str]:
        self.start()
        try:
            while True:
                try:
                    line = self.read_line()
                except EOFError:
                    return
                yield line
        finally:
            self.stop()

    def __str__(self) -> str:
        return self._text

    def __bool__(self) -> bool:
        return bool(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringLineReader):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        if isinstance(other, (bytes, bytearray)):
            return self._text == decode_utf8(bytes(other))
        return NotImplemented

    def __hash__(self) -> int:
        return hash((StringLineReader, self._text))