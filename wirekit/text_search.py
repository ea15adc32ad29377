"""In-place search and edit operations on a mutable text buffer."""

from __future__ import annotations

import string
from typing import Optional, Union

_UINT_MASK = 0xFFFFFFFF
_C_SPACE = " \t\n\v\f\r"
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

Target = Union[str, int, "TextOps"]


def _unsigned(n: int) -> int:
    """Reduce ``n`` to the 32-bit unsigned value it stands for."""
    return n & _UINT_MASK


def _as_text(value: Target) -> str:
    if isinstance(value, TextOps):
        return value._buf or ""
    if isinstance(value, int):
        return chr(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"expected text or a character code, got {type(value).__name__}")


def _last_index_of_text(text: str, target: str, from_index: int) -> int:
    """Return the last start of ``target`` at or before ``from_index``."""
    if not target or not text or len(target) > len(text):
        return -1
    if from_index >= len(text):
        from_index = len(text) - 1
    return text.rfind(target, 0, from_index + len(target))


class TextOps:
    """A mutable text buffer with search, replace and trim operations.

    The buffer may be ``None``, marking the text as invalid; every operation
    then finds nothing and changes nothing.
    """

    def __init__(self, text: Optional[str] = "") -> None:
        self._buf: Optional[str] = text

    def __str__(self) -> str:
        return self._buf or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._buf!r})"

    def index_of(self, target: Target, from_index: int = 0) -> int:
        """Return the first position of ``target`` at or after ``from_index``, or -1."""
        text = self._buf or ""
        start = _unsigned(from_index)
        if start >= len(text):
            return -1
        return text.find(_as_text(target), start)

    def last_index_of(self, target: Target, from_index: Optional[int] = None) -> int:
        """Return the last position of ``target`` starting at or before ``from_index``, or -1.

        A character code searches for that single character and finds nothing
        when ``from_index`` lies past the end; text clamps ``from_index`` to the
        last position instead.
        """
        text = self._buf or ""
        if isinstance(target, int) and not isinstance(target, TextOps):
            start = _unsigned(len(text) - 1 if from_index is None else from_index)
            if start >= len(text):
                return -1
            return text.rfind(chr(target), 0, start + 1)
        needle = _as_text(target)
        if from_index is None:
            if len(needle) > len(text):
                return -1
            from_index = len(text) - len(needle)
        return _last_index_of_text(text, needle, _unsigned(from_index))

    def replace(self, find: Target, replacement: Target) -> None:
        """Replace occurrences of ``find`` with ``replacement`` in place.

        Growing replacements are applied from the end of the text backwards.
        """
        text = self._buf
        if not text:
            return
        old = _as_text(find)
        new = _as_text(replacement)
        if not old:
            return
        if len(new) <= len(old):
            self._buf = text.replace(old, new)
            return
        if old not in text:
            return
        index = len(text) - 1
        while index >= 0:
            index = _last_index_of_text(text, old, index)
            if index < 0:
                break
            text = text[:index] + new + text[index + len(old):]
            index -= 1
        self._buf = text

    def remove(self, index: int, count: Optional[int] = None) -> None:
        """Delete ``count`` characters from ``index``; all the rest when ``count`` is None."""
        text = self._buf
        if text is None:
            return
        start = _unsigned(index)
        if start >= len(text):
            return
        n = _UINT_MASK if count is None else _unsigned(count)
        if n == 0:
            return
        self._buf = text[:start] + text[start + n:]

    def to_lower_case(self) -> None:
        """Lower-case the ASCII letters in place."""
        if self._buf:
            self._buf = self._buf.translate(_TO_LOWER)

    def to_upper_case(self) -> None:
        """Upper-case the ASCII letters in place."""
        if self._buf:
            self._buf = self._buf.translate(_TO_UPPER)

    def trim(self) -> None:
        """Strip leading and trailing whitespace in place."""
        if self._buf:
            self._buf = self._buf.strip(_C_SPACE)