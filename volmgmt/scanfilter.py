"""Record and file information filters for a volume file scan."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from volmgmt.scansettings import Settings

__all__ = ["build_record_filter", "build_file_info_filter"]


class _Record(Protocol):
    path: str
    file_name: str


class _FileInfo(Protocol):
    def size(self) -> int: ...

    def mod_time(self) -> datetime: ...


def build_record_filter(settings: Settings) -> Callable[[_Record], bool]:
    """Return a filter matching records against the include and exclude patterns.

    A record's path is matched when it has one, otherwise its file name.
    """
    include = settings.include
    exclude = settings.exclude

    def record_filter(record: _Record) -> bool:
        subject = record.path if record.path else record.file_name
        if include is not None and not include.search(subject):
            return False
        if exclude is not None and exclude.search(subject):
            return False
        return True

    return record_filter


def build_file_info_filter(settings: Settings) -> Callable[[_FileInfo], bool]:
    """Return a filter matching files by size limits and modification time."""
    bigger_than = settings.bigger_than
    smaller_than = settings.smaller_than
    after = settings.after
    before = settings.before

    def file_info_filter(info: _FileInfo) -> bool:
        if bigger_than > 0 and info.size() <= bigger_than:
            return False
        if smaller_than > 0 and info.size() >= smaller_than:
            return False
        if after is not None and info.mod_time() < after:
            return False
        if before is not None and info.mod_time() > before:
            return False
        return True

    return file_info_filter