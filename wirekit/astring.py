"""A mutable, possibly invalid, byte-oriented string type."""

from __future__ import annotations

import math
import re
import struct
from typing import Optional, Union

from wirekit.numconv import dtostrnf, ltoa
from wirekit.text_search import TextOps

_UINT_MASK = 0xFFFFFFFF
_FLOAT_BUFFER = 33
_CONCAT_FLOAT_BUFFER = 20

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*"
    r"([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

Value = Union[str, int, float, "ArduinoString", None]


def _unsigned(n: int) -> int:
    return n & _UINT_MASK


def _text_of(value: object) -> Optional[str]:
    """Return the text held by ``value``, or None when it is invalid."""
    if value is None:
        return None
    if isinstance(value, TextOps):
        return value._buf
    if isinstance(value, str):
        return value
    raise TypeError(f"expected text, got {type(value).__name__}")


def _strcmp(a: str, b: str) -> int:
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def _render(value: Value, base: Optional[int]) -> Optional[str]:
    """Turn a constructor or concatenation argument into text."""
    if value is None or isinstance(value, (str, TextOps)):
        return _text_of(value)
    if isinstance(value, int):
        return ltoa(int(value), 10 if base is None else base)
    if isinstance(value, float):
        places = 2 if base is None else base
        return dtostrnf(value, places + 2, places, _FLOAT_BUFFER)
    raise TypeError(f"cannot build a string from {type(value).__name__}")


class ArduinoString(TextOps):
    """A mutable string that may be marked invalid.

    An invalid string holds no buffer: it is falsy, has length zero and
    behaves as empty in comparisons. Numbers are rendered in the given
    base (integers) or with the given number of decimal places (floats).
    """

    def __init__(self, value: Value = "", base: Optional[int] = None) -> None:
        super().__init__(_render(value, base))

    def reserve(self, size: int) -> bool:
        """Make room for ``size`` characters; an invalid string becomes empty."""
        if size < 0:
            raise ValueError("size must not be negative")
        if self._buf is None:
            self._buf = ""
        return True

    def __len__(self) -> int:
        return len(self._buf or "")

    def __bool__(self) -> bool:
        return self._buf is not None

    def __str__(self) -> str:
        return self._buf or ""

    def concat(self, value: Value) -> bool:
        """Append ``value``; return False, leaving the string unchanged, if it is invalid."""
        if isinstance(value, float):
            text: Optional[str] = dtostrnf(value, 4, 2, _CONCAT_FLOAT_BUFFER)
        elif isinstance(value, int):
            text = ltoa(int(value), 10)
        else:
            text = _text_of(value)
        if text is None:
            return False
        if not text:
            return True
        self._buf = (self._buf or "") + text
        return True

    def __iadd__(self, value: Value) -> "ArduinoString":
        self.concat(value)
        return self

    def __add__(self, value: Value) -> "ArduinoString":
        result = ArduinoString(self)
        if not result.concat(value):
            result._buf = None
        return result

    def compare_to(self, other: Value) -> int:
        """Compare as ``strcmp`` does: negative, zero or positive."""
        mine = self._buf
        theirs = _text_of(other)
        if mine is None or theirs is None:
            if theirs:
                return -ord(theirs[0])
            if mine:
                return ord(mine[0])
            return 0
        return _strcmp(mine, theirs)

    def equals(self, other: Value) -> bool:
        """Return True if both hold the same text."""
        if isinstance(other, TextOps):
            return len(self) == len(_text_of(other) or "") and self.compare_to(other) == 0
        text = _text_of(other)
        if len(self) == 0:
            return not text
        if text is None:
            return False
        return self._buf == text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (str, TextOps)):
            return self.equals(other)
        return NotImplemented

    def __lt__(self, other: Value) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Value) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Value) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Value) -> bool:
        return self.compare_to(other) >= 0

    __hash__ = None  # type: ignore[assignment]

    def equals_ignore_case(self, other: Value) -> bool:
        """Compare ignoring the case of ASCII letters."""
        if other is self:
            return True
        theirs = _text_of(other) or ""
        mine = self._buf or ""
        if len(mine) != len(theirs):
            return False
        lower = ArduinoString(mine)
        lower.to_lower_case()
        other_lower = ArduinoString(theirs)
        other_lower.to_lower_case()
        return lower._buf == other_lower._buf

    def starts_with(self, prefix: Value, offset: Optional[int] = None) -> bool:
        """Return True if ``prefix`` occurs at ``offset`` (default: the start)."""
        mine = self._buf
        theirs = _text_of(prefix)
        if offset is None:
            if len(self) < len(theirs or ""):
                return False
            offset = 0
        start = _unsigned(offset)
        if mine is None or theirs is None or start > len(mine):
            return False
        return mine[start:start + len(theirs)] == theirs

    def ends_with(self, suffix: Value) -> bool:
        """Return True if the text ends with ``suffix``."""
        mine = self._buf
        theirs = _text_of(suffix)
        if mine is None or theirs is None or len(mine) < len(theirs):
            return False
        return mine.endswith(theirs)

    def char_at(self, index: int) -> str:
        """Return the character at ``index``, or ``"\\0"`` when out of range."""
        mine = self._buf
        position = _unsigned(index)
        if mine is None or position >= len(mine):
            return "\0"
        return mine[position]

    def set_char_at(self, index: int, c: Union[str, int]) -> None:
        """Overwrite the character at ``index``; out-of-range indexes are ignored."""
        char = chr(c) if isinstance(c, int) else c
        if len(char) != 1:
            raise ValueError("expected a single character")
        mine = self._buf
        position = _unsigned(index)
        if mine is not None and position < len(mine):
            self._buf = mine[:position] + char + mine[position + 1:]

    def __getitem__(self, index: int) -> str:
        return self.char_at(index)

    def get_bytes(self, bufsize: int, index: int = 0) -> bytes:
        """Return the bytes from ``index`` that fit a buffer of ``bufsize`` with its terminator."""
        if bufsize <= 0:
            return b""
        mine = self._buf or ""
        start = _unsigned(index)
        if start >= len(mine):
            return b""
        count = min(bufsize - 1, len(mine) - start)
        return mine[start:start + count].encode("utf-8")

    def c_str(self) -> Optional[str]:
        """Return the raw text, or None for an invalid string."""
        return self._buf

    def substring(self, begin: int, end: Optional[int] = None) -> "ArduinoString":
        """Return the text between ``begin`` and ``end``; the bounds may come in either order."""
        left = _unsigned(begin)
        right = len(self) if end is None else _unsigned(end)
        if left > right:
            left, right = right, left
        mine = self._buf or ""
        if left >= len(mine):
            return ArduinoString("")
        return ArduinoString(mine[left:min(right, len(mine))])

    def to_int(self) -> int:
        """Parse a leading decimal integer; 0 if there is none."""
        match = _INT_PREFIX.match(self._buf or "")
        return int(match.group(1)) if match else 0

    def to_double(self) -> float:
        """Parse a leading floating-point number; 0.0 if there is none."""
        match = _FLOAT_PREFIX.match(self._buf or "")
        return float(match.group(1)) if match else 0.0

    def to_float(self) -> float:
        """Parse like :meth:`to_double`, rounded to single precision."""
        value = self.to_double()
        try:
            return struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)