"""Human-readable byte sizes in SI and IEC units."""

from __future__ import annotations

import math

__all__ = ["format_bytes", "parse_bytes"]

_UINT64_MAX = (1 << 64) - 1
_SUFFIXES = ("B", "kB", "MB", "GB", "TB", "PB", "EB")

_KB, _KIB = 1000, 1024
_SIZE_TABLE = {
    "b": 1,
    "": 1,
    "kib": _KIB,
    "ki": _KIB,
    "kb": _KB,
    "k": _KB,
    "mib": _KIB**2,
    "mi": _KIB**2,
    "mb": _KB**2,
    "m": _KB**2,
    "gib": _KIB**3,
    "gi": _KIB**3,
    "gb": _KB**3,
    "g": _KB**3,
    "tib": _KIB**4,
    "ti": _KIB**4,
    "tb": _KB**4,
    "t": _KB**4,
    "pib": _KIB**5,
    "pi": _KIB**5,
    "pb": _KB**5,
    "p": _KB**5,
    "eib": _KIB**6,
    "ei": _KIB**6,
    "eb": _KB**6,
    "e": _KB**6,
}


def format_bytes(size: int) -> str:
    """Return ``size`` in SI units, such as ``"83 MB"``."""
    size = int(size)
    if not 0 <= size <= _UINT64_MAX:
        raise ValueError(f"size {size} is outside the range 0..{_UINT64_MAX}")
    if size < 10:
        return f"{size} B"
    exponent = math.floor(math.log(size) / math.log(1000))
    suffix = _SUFFIXES[exponent]
    value = math.floor(size / math.pow(1000, exponent) * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {suffix}"
    return f"{value:.0f} {suffix}"


def parse_bytes(text: str) -> int:
    """Parse a size such as ``"42 MB"`` or ``"1,024 KiB"`` into bytes."""
    end = 0
    for char in text:
        if char not in "0123456789.,":
            break
        end += 1
    number = text[:end].replace(",", "")
    try:
        value = float(number)
    except ValueError as exc:
        raise ValueError(f"invalid size number: {number!r}") from exc

    unit = text[end:].strip().lower()
    multiplier = _SIZE_TABLE.get(unit)
    if multiplier is None:
        raise ValueError(f"unhandled size name: {unit}")
    value *= multiplier
    if value >= float(1 << 64):
        raise ValueError(f"too large: {text}")
    return int(value)