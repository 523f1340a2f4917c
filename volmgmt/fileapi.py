"""File information structures used by the Windows file system API."""

from __future__ import annotations

import stat
import struct
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import ClassVar

from volmgmt.fileattr import FileAttributes

__all__ = [
    "FileInfoClass",
    "BasicInfo",
    "RenameInfo",
    "ByHandleFileInformation",
    "FileInfoForHandle",
    "time_to_filetime",
    "filetime_to_time",
]

_FILETIME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)
_UINT64_MAX = (1 << 64) - 1
_TICKS_PER_SECOND = 10_000_000


class FileInfoClass(IntEnum):
    """Class of file information accessed in file system API calls."""

    BASIC_INFO = 0
    STANDARD_INFO = 1
    NAME_INFO = 2
    RENAME_INFO = 3
    DISPOSITION_INFO = 4
    ALLOCATION_INFO = 5
    END_OF_FILE_INFO = 6
    STREAM_INFO = 7
    COMPRESSION_INFO = 8
    ATTRIBUTE_TAG_INFO = 9
    ID_BOTH_DIRECTORY_INFO = 10
    ID_BOTH_DIRECTORY_RESTART_INFO = 11
    IO_PRIORITY_HINT_INFO = 12
    REMOTE_PROTOCOL_INFO = 13
    FULL_DIRECTORY_INFO = 14
    FULL_DIRECTORY_RESTART_INFO = 15
    STORAGE_INFO = 16
    ALIGNMENT_INFO = 17
    ID_INFO = 18
    ID_EXTD_DIRECTORY_INFO = 19
    ID_EXTD_DIRECTORY_RESTART_INFO = 20
    DISPOSITION_INFO_EX = 21
    RENAME_INFO_EX = 22
    CASE_SENSITIVE_INFO = 23
    NORMALIZED_NAME_INFO = 24


def _ticks_to_datetime(ticks: int) -> datetime:
    try:
        return _FILETIME_EPOCH + timedelta(microseconds=ticks // 10)
    except OverflowError as exc:
        raise ValueError(f"file time {ticks} is outside the supported range") from exc


def _check_filetime(ft: int) -> int:
    ft = int(ft)
    if not 0 <= ft <= _UINT64_MAX:
        raise ValueError(f"file time {ft} does not fit in 64 bits")
    return ft


def time_to_filetime(t: datetime | None) -> int:
    """Return ``t`` as 100-nanosecond intervals since 1601; ``None`` gives 0.

    A naive datetime is taken to be in UTC.
    """
    if t is None:
        return 0
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    delta = t - _FILETIME_EPOCH
    ticks = (delta.days * 86400 + delta.seconds) * _TICKS_PER_SECOND + delta.microseconds * 10
    if not 0 <= ticks <= _UINT64_MAX:
        raise ValueError(f"time {t} cannot be represented as a file time")
    return ticks


def filetime_to_time(ft: int) -> datetime | None:
    """Return the UTC time for a file time; 0 gives ``None``."""
    ft = _check_filetime(ft)
    if ft == 0:
        return None
    return _ticks_to_datetime(ft)


@dataclass
class BasicInfo:
    """Basic timestamps and attributes of a file (FILE_BASIC_INFO)."""

    creation_time: datetime | None = None
    last_access_time: datetime | None = None
    last_write_time: datetime | None = None
    change_time: datetime | None = None
    file_attributes: FileAttributes = FileAttributes(0)

    SIZE: ClassVar[int] = 40
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<QQQQII")

    def info_class(self) -> FileInfoClass:
        """Return the file information class."""
        return FileInfoClass.BASIC_INFO

    def to_bytes(self) -> bytes:
        """Marshal the information into its binary API form."""
        return self._LAYOUT.pack(
            time_to_filetime(self.creation_time),
            time_to_filetime(self.last_access_time),
            time_to_filetime(self.last_write_time),
            time_to_filetime(self.change_time),
            int(self.file_attributes) & 0xFFFFFFFF,
            0,
        )

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> BasicInfo:
        """Unmarshal information from its binary API form."""
        data = bytes(data)
        if len(data) < cls.SIZE:
            raise ValueError("insufficient data for BasicInfo unmarshaling")
        creation, access, write, change, attributes, _ = cls._LAYOUT.unpack_from(data)
        return cls(
            creation_time=filetime_to_time(creation),
            last_access_time=filetime_to_time(access),
            last_write_time=filetime_to_time(write),
            change_time=filetime_to_time(change),
            file_attributes=FileAttributes(attributes),
        )


@dataclass
class RenameInfo:
    """A rename request for a file (FILE_RENAME_INFO)."""

    replace_if_exists: bool = False
    file_name: str = ""

    _HEADER: ClassVar[struct.Struct] = struct.Struct("<?7xQI")

    def info_class(self) -> FileInfoClass:
        """Return the file information class."""
        return FileInfoClass.RENAME_INFO

    def to_bytes(self) -> bytes:
        """Marshal the request into its binary API form."""
        if "\x00" in self.file_name:
            raise ValueError("file name contains a NUL character")
        name = self.file_name.encode("utf-16-le")
        # The length is in bytes and excludes the trailing NUL.
        header = self._HEADER.pack(bool(self.replace_if_exists), 0, len(name))
        return header + name + b"\x00\x00"

    def __bytes__(self) -> bytes:
        return self.to_bytes()


@dataclass
class ByHandleFileInformation:
    """Standard file information retrieved through a file handle."""

    file_attributes: FileAttributes = FileAttributes(0)
    creation_time: int = 0
    last_access_time: int = 0
    last_write_time: int = 0
    volume_serial_number: int = 0
    file_size_high: int = 0
    file_size_low: int = 0
    number_of_links: int = 0
    file_index_high: int = 0
    file_index_low: int = 0


@dataclass
class FileInfoForHandle:
    """File information in the shape of a directory listing entry."""

    file_name: str
    info: ByHandleFileInformation = field(default_factory=ByHandleFileInformation)

    def name(self) -> str:
        """Return the name of the file."""
        return self.file_name

    def size(self) -> int:
        """Return the size of the file in bytes."""
        return (self.info.file_size_high << 32) + self.info.file_size_low

    def mode(self) -> int:
        """Return permission and type bits derived from the attributes.

        Symbolic links are not distinguished.
        """
        attributes = FileAttributes(self.info.file_attributes)
        mode = 0o444 if attributes.match(FileAttributes.READONLY) else 0o666
        if attributes.match(FileAttributes.DIRECTORY):
            mode |= stat.S_IFDIR | 0o111
        return mode

    def mod_time(self) -> datetime:
        """Return the last modification time of the file in UTC."""
        return _ticks_to_datetime(_check_filetime(self.info.last_write_time))

    def is_dir(self) -> bool:
        """Report whether the file is a directory."""
        return stat.S_ISDIR(self.mode())