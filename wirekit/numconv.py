"""Number-to-text conversions and small character/bit helpers."""

from __future__ import annotations

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_ULONG_MASK = 0xFFFFFFFF


def dtostrf(val: float, width: int, prec: int) -> str:
    """Format ``val`` as ``[-]d.ddd`` with a minimum field width.

    A negative ``width`` left-adjusts the result.
    """
    return f"%{int(width)}.{int(prec)}f" % val


def dtostrnf(val: float, width: int, prec: int, size: int) -> str:
    """Like :func:`dtostrf`, but truncated to fit a buffer of ``size`` bytes.

    One byte of the buffer is reserved for the terminator, so at most
    ``size - 1`` characters are returned.
    """
    if size < 0:
        raise ValueError("buffer size must not be negative")
    if size == 0:
        return ""
    return dtostrf(val, width, prec)[: size - 1]


def _check_radix(radix: int) -> None:
    if radix > 36 or radix <= 1:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")


def _unsigned_digits(value: int, radix: int) -> str:
    digits = []
    while True:
        value, rem = divmod(value, radix)
        digits.append(_DIGITS[rem])
        if not value:
            break
    return "".join(reversed(digits))


def ltoa(value: int, radix: int = 10) -> str:
    """Convert a signed long to text in ``radix``.

    Only base 10 shows a minus sign; other bases render the value's
    32-bit two's-complement form.
    """
    _check_radix(radix)
    if radix == 10 and value < 0:
        return "-" + _unsigned_digits(-value & _ULONG_MASK, radix)
    return _unsigned_digits(value & _ULONG_MASK, radix)


def itoa(value: int, radix: int = 10) -> str:
    """Convert a signed int to text in ``radix``."""
    return ltoa(value, radix)


def ultoa(value: int, radix: int = 10) -> str:
    """Convert an unsigned 32-bit long to text in ``radix``."""
    _check_radix(radix)
    return _unsigned_digits(value & _ULONG_MASK, radix)


def utoa(value: int, radix: int = 10) -> str:
    """Convert an unsigned int to text in ``radix``."""
    return ultoa(value, radix)


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def is_ascii(c: int | str) -> bool:
    """Return True if ``c`` is a 7-bit ASCII code."""
    return 0 <= _code(c) <= 0o177


def to_ascii(c: int | str) -> int:
    """Clear every bit of ``c`` above the low seven."""
    return _code(c) & 0o177


def bv(bit: int) -> int:
    """Return a mask with only ``bit`` set."""
    if bit < 0:
        raise ValueError("bit index must not be negative")
    return 1 << bit