"""Console formatting, scanning and small libc replacements."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, TextIO

_PAD_RIGHT = 1
_PAD_ZERO = 2
_UINT_MASK = 0xFFFFFFFF
_DECIMAL = "0123456789"
_HEX = "0123456789abcdefABCDEF"
_BINARY = "01"


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _pad(text: str, width: int, pad: int) -> str:
    padchar = "0" if pad & _PAD_ZERO else " "
    fill = padchar * max(width - len(text), 0)
    return text + fill if pad & _PAD_RIGHT else fill + text


def _format_int(value: Any, base: int, signed: bool, width: int, pad: int,
                upper: bool = False) -> str:
    number = operator.index(value)
    unsigned = number & _UINT_MASK
    if unsigned == 0:
        return _pad("0", width, pad)

    negative = signed and base == 10 and _to_int32(number) < 0
    if negative:
        unsigned = -_to_int32(number)

    if base == 16:
        digits = format(unsigned, "X" if upper else "x")
    else:
        digits = str(unsigned)

    if negative:
        if width and pad & _PAD_ZERO:
            return "-" + _pad(digits, width - 1, pad)
        digits = "-" + digits
    return _pad(digits, width, pad)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        return value[:1]
    code = operator.index(value) & 0xFF
    return chr(code) if code else ""


def _take(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_string(fmt: str, *args: Any) -> str:
    """Format ``args`` with the reduced printf syntax (%s %d %x %X %u %c %%).

    Flags ``-`` (left justify) and ``0`` (zero pad) and a decimal width are
    honoured.  Integers are treated as 32-bit values; unknown conversions are
    dropped without consuming an argument.
    """
    values = iter(args)
    parts: list[str] = []
    pos = 0
    end = len(fmt)

    while pos < end:
        char = fmt[pos]
        pos += 1
        if char != "%":
            parts.append(char)
            continue

        if pos >= end:
            break
        if fmt[pos] == "%":
            parts.append("%")
            pos += 1
            continue

        pad = 0
        width = 0
        if fmt[pos] == "-":
            pad = _PAD_RIGHT
            pos += 1
        while pos < end and fmt[pos] == "0":
            pad |= _PAD_ZERO
            pos += 1
        while pos < end and fmt[pos] in _DECIMAL:
            width = width * 10 + int(fmt[pos])
            pos += 1
        if pos >= end:
            break

        conversion = fmt[pos]
        pos += 1
        if conversion == "s":
            text = _take(values)
            parts.append(_pad("(null)" if text is None else str(text), width, pad))
        elif conversion == "d":
            parts.append(_format_int(_take(values), 10, True, width, pad))
        elif conversion == "x":
            parts.append(_format_int(_take(values), 16, False, width, pad))
        elif conversion == "X":
            parts.append(_format_int(_take(values), 16, False, width, pad, upper=True))
        elif conversion == "u":
            parts.append(_format_int(_take(values), 10, False, width, pad))
        elif conversion == "c":
            parts.append(_pad(_format_char(_take(values)), width, pad))

    return "".join(parts)


def cprintf(fmt: str, *args: Any, out: TextIO | None = None) -> int:
    """Write formatted text to ``out`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if out is None else out
    stream.write(text)
    return len(text)


def _scan_digits(text: str, pos: int, alphabet: str, base: int) -> tuple[int, int, int]:
    value = 0
    start = pos
    while pos < len(text) and text[pos] in alphabet:
        value = value * base + int(text[pos], base)
        pos += 1
    return value, pos, pos - start


def scan_string(text: str, fmt: str) -> list[int | str]:
    """Scan ``text`` with a reduced scanf format.

    Supported conversions: ``%d`` decimal, ``%x`` hexadecimal, ``%b`` binary,
    ``%n`` decimal, ``0x`` hexadecimal or ``b`` binary, and ``%c`` a single
    character.  Spaces in either string are skipped.  The character following
    a converted number is consumed along with it.  Returns the converted values
    in order; scanning stops at the first mismatch or failed conversion.
    """
    values: list[int | str] = []
    s = 0
    f = 0

    while f < len(fmt) and s < len(text):
        while f < len(fmt) and fmt[f] == " ":
            f += 1
        if f >= len(fmt):
            break
        while s < len(text) and text[s] == " ":
            s += 1
        if s >= len(text):
            break

        if fmt[f] == "%":
            f += 1
            code = fmt[f] if f < len(fmt) else ""
            if code == "n":
                if text.startswith(("0x", "0X"), s):
                    code = "x"
                    s += 2
                elif text[s] == "b":
                    code = "b"
                    s += 1
                else:
                    code = "d"

            if code in ("x", "X"):
                value, s, consumed = _scan_digits(text, s, _HEX, 16)
                if not consumed:
                    return values
                values.append(value)
            elif code == "b":
                value, s, consumed = _scan_digits(text, s, _BINARY, 2)
                if not consumed:
                    return values
                values.append(value)
            elif code == "d":
                negative = text[s] == "-"
                if negative:
                    s += 1
                value, s, consumed = _scan_digits(text, s, _DECIMAL, 10)
                if not consumed:
                    return values
                values.append(-value if negative else value)
            elif code == "c":
                values.append(text[s])
            else:
                return values
        elif fmt[f] != text[s]:
            break

        f += 1
        s += 1

    return values


def parse_int(text: str) -> int:
    """Parse an optional ``-`` followed by decimal digits; stop at anything else.

    Leading whitespace is not skipped; text with no digits yields 0.
    """
    negative = text.startswith("-")
    body = text[1:] if negative else text
    value = 0
    for char in body:
        if char not in _DECIMAL:
            break
        value = value * 10 + int(char)
    return -value if negative else value


def strerror(errnum: int) -> str:
    """Describe an error number as ``errno=<n>``."""
    return format_string("errno=%d", errnum)