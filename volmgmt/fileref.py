"""Unified 64-bit and 128-bit file identifiers used by NTFS and ReFS."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "FileIDType",
    "Descriptor",
    "FileID",
    "new64",
    "new128",
    "from_big_endian",
    "from_little_endian",
]

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MASK = (1 << 64) - 1
_DESCRIPTOR_SIZE = 24


class FileIDType(IntEnum):
    """Discriminator of the identifier held in a descriptor."""

    FILE = 0
    OBJECT_ID = 1
    EXTENDED_FILE_ID = 2


def _check16(value: bytes) -> bytes:
    value = bytes(value)
    if len(value) != 16:
        raise ValueError(f"file identifier must be 16 bytes, got {len(value)}")
    return value


@dataclass(frozen=True)
class Descriptor:
    """A file reference descriptor as used by file system API calls."""

    size: int
    type: FileIDType
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _check16(self.data))

    def __bytes__(self) -> bytes:
        return struct.pack("<II16s", self.size, int(self.type), self.data)


def _to_signed(value: int) -> int:
    return value - (1 << 64) if value & (1 << 63) else value


@dataclass(frozen=True)
class FileID:
    """A file identifier stored as 16 bytes in big-endian order."""

    data: bytes = bytes(16)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _check16(self.data))

    def split(self) -> tuple[int, int]:
        """Return the upper and lower halves as signed 64-bit integers."""
        upper = int.from_bytes(self.data[:8], "big")
        lower = int.from_bytes(self.data[8:], "big")
        return _to_signed(upper), _to_signed(lower)

    def int64(self) -> int:
        """Return the identifier as a signed 64-bit integer, or -1 if it does not fit."""
        upper, lower = self.split()
        if upper != 0:
            return -1
        return lower

    def is_int64(self) -> bool:
        """Report whether the identifier fits in a signed 64-bit integer."""
        return not any(self.data[:8])

    def is_zero(self) -> bool:
        """Report whether the identifier is zero."""
        return not any(self.data)

    def big_endian(self) -> bytes:
        """Return the identifier bytes in big-endian order."""
        return self.data

    def little_endian(self) -> bytes:
        """Return the identifier bytes in little-endian order."""
        return self.data[::-1]

    def descriptor(self) -> Descriptor:
        """Return a descriptor suitable for opening the file by identifier."""
        id_type = FileIDType.FILE if self.is_int64() else FileIDType.EXTENDED_FILE_ID
        return Descriptor(size=_DESCRIPTOR_SIZE, type=id_type, data=self.little_endian())

    def __str__(self) -> str:
        if self.is_int64():
            return str(self.int64())
        return str(int.from_bytes(self.data, "big"))


def _check_int64(name: str, value: int) -> int:
    value = int(value)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"{name} {value} does not fit in a signed 64-bit integer")
    return value


def new128(lower: int, upper: int) -> FileID:
    """Return a 128-bit identifier from its lower and upper 64-bit halves."""
    lower = _check_int64("lower", lower) & _UINT64_MASK
    upper = _check_int64("upper", upper) & _UINT64_MASK
    return FileID(upper.to_bytes(8, "big") + lower.to_bytes(8, "big"))


def new64(value: int) -> FileID:
    """Return a 64-bit identifier."""
    return new128(value, 0)


def from_big_endian(value: bytes) -> FileID:
    """Create an identifier from 16 bytes in big-endian order."""
    return FileID(_check16(value))


def from_little_endian(value: bytes) -> FileID:
    """Create an identifier from 16 bytes in little-endian order, as NTFS and ReFS store them."""
    return FileID(_check16(value)[::-1])