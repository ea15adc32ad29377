"""Byte-oriented printing of text, integers, floats and printable objects."""

from __future__ import annotations

import abc
import math
from typing import Optional, Union

from wirekit.text_search import TextOps

DEC = 10
HEX = 16
OCT = 8
BIN = 2

_ULONG_MASK = 0xFFFFFFFF
_FLOAT_LIMIT = 4294967040.0


class Printable(abc.ABC):
    """An object that knows how to print itself to a :class:`Print`."""

    @abc.abstractmethod
    def print_to(self, p: "Print") -> int:
        """Print this object to ``p`` and return the number of bytes written."""


Data = Union[str, bytes, bytearray, memoryview, int, TextOps, None]


class Print(abc.ABC):
    """Base class for byte sinks that offers ``print`` and ``println``."""

    def __init__(self) -> None:
        self.write_error = 0

    @abc.abstractmethod
    def write_byte(self, c: int) -> int:
        """Write one byte; return 1 on success and 0 on failure."""

    def write(self, data: Data) -> int:
        """Write a byte, text or a byte sequence; stop at the first failed byte."""
        if data is None:
            return 0
        if isinstance(data, int):
            return self.write_byte(data & 0xFF)
        if isinstance(data, TextOps):
            data = str(data)
        if isinstance(data, str):
            data = data.encode("utf-8")
        count = 0
        for byte in bytes(data):
            if not self.write_byte(byte):
                break
            count += 1
        return count

    def available_for_write(self) -> int:
        """Bytes writable without blocking; zero means a write may block."""
        return 0

    def _set_write_error(self, err: int = 1) -> None:
        self.write_error = err

    def clear_write_error(self) -> None:
        """Reset the write-error flag."""
        self._set_write_error(0)

    def flush(self) -> None:
        """Wait for pending output; nothing to do by default."""

    def print(self, value: object, fmt: Optional[int] = None) -> int:
        """Print ``value`` and return the number of bytes written.

        ``fmt`` is the base for integers (0 writes the raw byte) and the
        number of decimal places for floats.
        """
        if isinstance(value, Printable):
            return value.print_to(self)
        if isinstance(value, (str, TextOps, bytes, bytearray, memoryview)):
            return self.write(value)
        if isinstance(value, float):
            return self._print_float(value, 2 if fmt is None else fmt)
        if isinstance(value, int):
            return self._print_int(value, DEC if fmt is None else fmt)
        raise TypeError(f"cannot print {type(value).__name__}")

    def println(self, value: object = None, fmt: Optional[int] = None) -> int:
        """Print ``value`` (if given) followed by CR LF."""
        count = 0 if value is None else self.print(value, fmt)
        return count + self.write("\r\n")

    def _print_int(self, n: int, base: int) -> int:
        if base == 0:
            return self.write(n)
        if base == DEC and n < 0:
            sign = self.print("-")
            return self._print_number(-n, DEC) + sign
        return self._print_number(n, base)

    def _print_number(self, n: int, base: int) -> int:
        n &= _ULONG_MASK
        base &= 0xFF
        if base < 2:
            base = DEC
        digits = []
        while True:
            n, c = divmod(n, base)
            digits.append(chr(c + 48) if c < 10 else chr(c + 55))
            if not n:
                break
        return self.write("".join(reversed(digits)))

    def _print_float(self, number: float, digits: int) -> int:
        number = float(number)
        digits &= 0xFF
        if math.isnan(number):
            return self.print("nan")
        if math.isinf(number):
            return self.print("inf")
        if number > _FLOAT_LIMIT or number < -_FLOAT_LIMIT:
            return self.print("ovf")

        count = 0
        if number < 0.0:
            count += self.print("-")
            number = -number

        rounding = 0.5
        for _ in range(digits):
            rounding /= 10.0
        number += rounding

        int_part = int(number)
        remainder = number - float(int_part)
        count += self._print_number(int_part, DEC)

        if digits > 0:
            count += self.print(".")

        for _ in range(digits):
            remainder *= 10.0
            to_print = int(remainder)
            count += self._print_number(to_print, DEC)
            remainder -= to_print
        return count


class BufferPrint(Print):
    """A :class:`Print` that collects output in memory, optionally up to a limit."""

    def __init__(self, limit: Optional[int] = None) -> None:
        super().__init__()
        self.limit = limit
        self.buffer = bytearray()

    def write_byte(self, c: int) -> int:
        if self.limit is not None and len(self.buffer) >= self.limit:
            return 0
        self.buffer.append(c & 0xFF)
        return 1

    def __str__(self) -> str:
        return self.buffer.decode("utf-8", errors="replace")