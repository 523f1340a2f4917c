"""File attribute flags stored in Windows file metadata."""

from __future__ import annotations

from collections.abc import Mapping
from enum import KEEP, IntFlag

__all__ = ["FileAttributes", "FORMAT_C", "FORMAT_GO", "FORMAT_CODE"]


class FileAttributes(IntFlag, boundary=KEEP):
    """A set of file attributes."""

    READONLY = 0x000001
    HIDDEN = 0x000002
    SYSTEM = 0x000004
    DIRECTORY = 0x000010
    ARCHIVE = 0x000020
    DEVICE = 0x000040
    NORMAL = 0x000080
    TEMPORARY = 0x000100
    SPARSE_FILE = 0x000200
    REPARSE_POINT = 0x000400
    COMPRESSED = 0x000800
    OFFLINE = 0x001000
    NOT_CONTENT_INDEXED = 0x002000
    ENCRYPTED = 0x004000
    INTEGRITY_STREAM = 0x008000
    VIRTUAL = 0x010000
    NO_SCRUB_DATA = 0x020000
    RECALL_ON_OPEN = 0x040000
    RECALL_ON_DATA_ACCESS = 0x400000

    def match(self, c: int) -> bool:
        """Report whether all attributes in ``c`` are present."""
        c = int(c)
        return int(self) & c == c

    def join(self, sep: str, format: Mapping[int, str]) -> str:
        """Render the attributes with ``format``, joined by ``sep``.

        A value present in ``format`` as a whole is rendered directly;
        otherwise each known bit is rendered in ascending order.
        """
        value = int(self)
        if value in format:
            return format[value]
        matched = []
        for bit in range(32):
            flag = 1 << bit
            if self.match(flag) and flag in format:
                matched.append(format[flag])
        return sep.join(matched)

    def __str__(self) -> str:
        return self.join("|", FORMAT_GO)


FA = FileAttributes

FORMAT_C: dict[FileAttributes, str] = {
    FA.READONLY: "FILE_ATTRIBUTE_READONLY",
    FA.HIDDEN: "FILE_ATTRIBUTE_HIDDEN",
    FA.SYSTEM: "FILE_ATTRIBUTE_SYSTEM",
    FA.DIRECTORY: "FILE_ATTRIBUTE_DIRECTORY",
    FA.ARCHIVE: "FILE_ATTRIBUTE_ARCHIVE",
    FA.DEVICE: "FILE_ATTRIBUTE_DEVICE",
    FA.NORMAL: "FILE_ATTRIBUTE_NORMAL",
    FA.TEMPORARY: "FILE_ATTRIBUTE_TEMPORARY",
    FA.SPARSE_FILE: "FILE_ATTRIBUTE_SPARSE_FILE",
    FA.REPARSE_POINT: "FILE_ATTRIBUTE_REPARSE_POINT",
    FA.COMPRESSED: "FILE_ATTRIBUTE_COMPRESSED",
    FA.OFFLINE: "FILE_ATTRIBUTE_OFFLINE",
    FA.NOT_CONTENT_INDEXED: "FILE_ATTRIBUTE_NOT_CONTENT_INDEXED",
    FA.ENCRYPTED: "FILE_ATTRIBUTE_ENCRYPTED",
    FA.INTEGRITY_STREAM: "FILE_ATTRIBUTE_INTEGRITY_STREAM",
    FA.VIRTUAL: "FILE_ATTRIBUTE_VIRTUAL",
    FA.NO_SCRUB_DATA: "FILE_ATTRIBUTE_NO_SCRUB_DATA",
    FA.RECALL_ON_OPEN: "FILE_ATTRIBUTE_RECALL_ON_OPEN",
    FA.RECALL_ON_DATA_ACCESS: "FILE_ATTRIBUTE_RECALL_ON_DATA_ACCESS",
}
"""Attribute names in the style of the Windows API constants."""

FORMAT_GO: dict[FileAttributes, str] = {
    FA.READONLY: "Readonly",
    FA.HIDDEN: "Hidden",
    FA.SYSTEM: "System",
    FA.DIRECTORY: "Directory",
    FA.ARCHIVE: "Archive",
    FA.DEVICE: "Device",
    FA.NORMAL: "Normal",
    FA.TEMPORARY: "Temporary",
    FA.SPARSE_FILE: "SparseFile",
    FA.REPARSE_POINT: "ReparsePoint",
    FA.COMPRESSED: "Compressed",
    FA.OFFLINE: "Offline",
    FA.NOT_CONTENT_INDEXED: "NotContentIndexed",
    FA.ENCRYPTED: "Encrypted",
    FA.INTEGRITY_STREAM: "IntegrityStream",
    FA.VIRTUAL: "Virtual",
    FA.NO_SCRUB_DATA: "NoScrubData",
    FA.RECALL_ON_OPEN: "RecallOnOpen",
    FA.RECALL_ON_DATA_ACCESS: "RecallOnDataAccess",
}
"""Attribute names in camel case; the default for ``str()``."""

FORMAT_CODE: dict[FileAttributes, str] = {
    FA.READONLY: "R",
    FA.HIDDEN: "H",
    FA.SYSTEM: "S",
    FA.DIRECTORY: "D",
    FA.ARCHIVE: "A",
    FA.DEVICE: "^",  # unofficial
    FA.NORMAL: "N",
    FA.TEMPORARY: "T",
    FA.SPARSE_FILE: "P",
    FA.REPARSE_POINT: "L",
    FA.COMPRESSED: "C",
    FA.OFFLINE: "O",
    FA.NOT_CONTENT_INDEXED: "I",
    FA.ENCRYPTED: "E",
    FA.INTEGRITY_STREAM: "V",  # ReFS
    FA.VIRTUAL: "-",
    FA.NO_SCRUB_DATA: "X",  # ReFS
    FA.RECALL_ON_OPEN: "!",  # unofficial
    FA.RECALL_ON_DATA_ACCESS: "?",  # unofficial
}
"""Single-letter attribute codes as shown by file explorers."""

del FA