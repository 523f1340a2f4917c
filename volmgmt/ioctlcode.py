"""Building blocks for Windows I/O control codes."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Method", "Access", "new"]

_UINT16_MAX = 0xFFFF
_UINT8_MAX = 0xFF


class Method(IntEnum):
    """Transfer method used for the buffers of an I/O control request."""

    BUFFERED = 0
    IN_DIRECT = 1
    OUT_DIRECT = 2
    NEITHER = 3


class Access(IntEnum):
    """Access the caller must hold for an I/O control request."""

    ANY = 0
    READ = 1
    WRITE = 2
    READ_WRITE = 3
    SPECIAL = 0


def _check_range(name: str, value: int, maximum: int) -> int:
    value = int(value)
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} {value} is outside the range 0..{maximum}")
    return value


def new(device_type: int, function: int, method: int, access: int) -> int:
    """Return the 32-bit I/O control code for the given parameters."""
    device_type = _check_range("device type", device_type, _UINT16_MAX)
    function = _check_range("function", function, _UINT16_MAX)
    method = _check_range("method", method, _UINT8_MAX)
    access = _check_range("access", access, _UINT8_MAX)
    code = (device_type << 16) | (access << 14) | (function << 2) | method
    return code & 0xFFFFFFFF