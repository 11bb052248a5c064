"""A mutable string with printf-style creation and in-place editing."""

from __future__ import annotations

from typing import Optional, Union

TMP_STRING_SIZE = 4096


class SString:
    """Mutable text value."""

    def __init__(self, fmt: Optional[str] = "", *args) -> None:
        self._text = ""
        self.create(fmt, *args)

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SString({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # mutable

    def __iadd__(self, other: Union[str, "SString", None]) -> SString:
        if other is not None:
            self._text += str(other)
        return self

    def create(self, fmt: Optional[str], *args) -> SString:
        """Replace the content with ``fmt % args``."""
        if fmt is None:
            self._text = ""
            return self
        text = fmt % args
        if len(text) >= TMP_STRING_SIZE:
            raise ValueError(f"formatted text exceeds {TMP_STRING_SIZE - 1} characters")
        self._text = text
        return self

    def clear(self) -> None:
        self._text = ""

    def cut(self, begin: int, end: int = 0) -> bool:
        """Remove characters ``begin`` to ``end`` inclusive (0 means to the end)."""
        length = len(self._text)
        if end >= length or end == 0:
            end = length - 1
        if begin > length or end <= begin:
            return False
        self._text = self._text[:begin] + self._text[end + 1:]
        return True

    def trim(self) -> None:
        self._text = self._text.strip(" ")

    def substitute(self, src: str, dst: str) -> int:
        """Replace every occurrence of ``src`` with ``dst``; return the count."""
        if not src:
            raise ValueError("substitution source must not be empty")
        instances = self.find(src)
        if instances:
            self._text = self._text.replace(src, dst)
        return instances

    def find(self, text: Optional[str]) -> int:
        """Count non-overlapping occurrences of ``text``."""
        if not text:
            return 0
        return self._text.count(text)

    def substring(self, start: int, end: int = 0) -> SString:
        """Return the characters from ``start`` up to ``end`` (0 means the end)."""
        length = len(self._text)
        start = min(start, length)
        end = length if end == 0 else min(end, length)
        result = SString()
        result._text = self._text[start:end] if end > start else ""
        return result