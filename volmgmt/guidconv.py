"""Conversion of Windows GUIDs to their braced string form."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["GUID", "format_guid", "EMPTY_GUID"]

EMPTY_GUID = "{00000000-0000-0000-0000-000000000000}"


@dataclass(frozen=True)
class GUID:
    """A globally unique identifier in its Windows field layout."""

    data1: int
    data2: int
    data3: int
    data4: bytes

    def __post_init__(self) -> None:
        if not 0 <= self.data1 <= 0xFFFFFFFF:
            raise ValueError(f"data1 {self.data1} does not fit in 32 bits")
        if not 0 <= self.data2 <= 0xFFFF:
            raise ValueError(f"data2 {self.data2} does not fit in 16 bits")
        if not 0 <= self.data3 <= 0xFFFF:
            raise ValueError(f"data3 {self.data3} does not fit in 16 bits")
        data4 = bytes(self.data4)
        if len(data4) != 8:
            raise ValueError(f"data4 must be 8 bytes, got {len(data4)}")
        object.__setattr__(self, "data4", data4)

    def __str__(self) -> str:
        return format_guid(self)


def format_guid(guid: GUID | None) -> str:
    """Return ``guid`` as ``{XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX}``.

    ``None`` yields the all-zero GUID.
    """
    if guid is None:
        return EMPTY_GUID
    head = guid.data4[:2].hex().upper()
    tail = guid.data4[2:].hex().upper()
    return f"{{{guid.data1:08X}-{guid.data2:04X}-{guid.data3:04X}-{head}-{tail}}}"