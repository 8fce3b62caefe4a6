"""IPv4 address text conversion."""

from __future__ import annotations

import errno
import os
import socket

AF_INET = socket.AF_INET
INET_ADDRSTRLEN = 16

_WHITESPACE = " \t\n\v\f\r"
_DECIMAL = "0123456789"
_UINT_MASK = 0xFFFFFFFF


def _error(code: int) -> OSError:
    return OSError(code, os.strerror(code))


def inet_ntop(af: int, packed: bytes | None, size: int = INET_ADDRSTRLEN) -> str:
    """Convert a packed IPv4 address to dotted-quad text.

    ``size`` is the room the caller has for the text; it must be at least
    :data:`INET_ADDRSTRLEN`.
    """
    if packed is None:
        raise _error(errno.EINVAL)
    if af != AF_INET:
        raise _error(errno.EAFNOSUPPORT)
    if size < INET_ADDRSTRLEN or len(packed) < 4:
        raise _error(errno.EINVAL)
    return ".".join(str(octet) for octet in bytes(packed[:4]))


def _scan_unsigned(text: str, pos: int) -> tuple[int, int] | None:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < len(text) and text[pos] in _DECIMAL:
        pos += 1
    if pos == start:
        return None
    magnitude = int(text[start:pos])
    if magnitude > _UINT_MASK:
        return _UINT_MASK, pos
    return ((-magnitude) & _UINT_MASK if negative else magnitude), pos


def inet_pton(af: int, text: str) -> bytes:
    """Convert dotted-quad text to a packed 4-byte IPv4 address.

    Each field is read as an unsigned number and truncated to a byte;
    anything after the fourth field is ignored.
    """
    if af != AF_INET:
        raise _error(errno.EAFNOSUPPORT)

    octets = []
    pos = 0
    for field in range(4):
        if field:
            if pos >= len(text) or text[pos] != ".":
                raise _error(errno.EINVAL)
            pos += 1
        scanned = _scan_unsigned(text, pos)
        if scanned is None:
            raise _error(errno.EINVAL)
        value, pos = scanned
        octets.append(value & 0xFF)
    return bytes(octets)