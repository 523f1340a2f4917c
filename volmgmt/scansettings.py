"""Settings for a volume file scan and the parsing of their values."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from dateutil import parser as _dateparser

from volmgmt.sizes import format_bytes, parse_bytes

__all__ = ["UsageError", "Settings", "compile_regex", "parse_time", "parse_size"]


class UsageError(Exception):
    """Raised when a command-line value cannot be used."""


def _format_time(t: datetime) -> str:
    text = t.strftime("%Y-%m-%d %H:%M:%S")
    if t.microsecond:
        text += f".{t.microsecond:06d}".rstrip("0")
    if t.tzinfo is not None:
        offset = t.strftime("%z")
        text += f" {offset} {t.tzname() or offset}"
    return text


def _default_limit() -> int:
    return os.cpu_count() or 1


@dataclass
class Settings:
    """Settings for a scan."""

    include: re.Pattern[str] | None = None
    exclude: re.Pattern[str] | None = None
    after: datetime | None = None
    before: datetime | None = None
    location: tzinfo | None = None
    bigger_than: int = 0
    smaller_than: int = 0
    list_files: bool = False
    progress: bool = False
    verbose: bool = False
    limit: int = field(default_factory=_default_limit)

    def summary(self) -> str:
        """Return a multiline summary of the settings, or an empty string."""
        lines = []
        if self.include is not None:
            lines.append(f"Include: {self.include.pattern}")
        if self.exclude is not None:
            lines.append(f"Exclude: {self.exclude.pattern}")
        if self.after is not None:
            lines.append(f"After: {_format_time(self.after)}")
        if self.before is not None:
            lines.append(f"Before: {_format_time(self.before)}")
        if self.bigger_than > 0:
            lines.append(f"Bigger Than: {format_bytes(self.bigger_than)}")
        if self.smaller_than > 0:
            lines.append(f"Smaller Than: {format_bytes(self.smaller_than)}")
        if self.list_files:
            lines.append("List Files: On")
        if self.progress:
            lines.append("Progress: On")
        if self.verbose:
            lines.append("Verbose: On")
        if self.limit != 1:
            lines.append(f"Concurrent Reads: {self.limit}")
        if not lines:
            return ""
        return "\n".join(lines) + "\n"


def compile_regex(pattern: str) -> re.Pattern[str] | None:
    """Compile ``pattern`` for case-insensitive matching; empty gives ``None``."""
    if not pattern:
        return None
    if not pattern.startswith("(?i)"):
        pattern = "(?i)" + pattern
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise UsageError(f'Unable to compile regular expression "{pattern}": {exc}') from exc


def parse_time(value: str, tz: tzinfo | None = None) -> datetime | None:
    """Parse a free-form time; one without a zone is taken to be in ``tz``.

    With no ``tz`` the local time zone is used. Empty text gives ``None``.
    """
    if not value:
        return None
    try:
        parsed = _dateparser.parse(value)
    except (ValueError, OverflowError) as exc:
        raise UsageError(f'Unable to parse time "{value}": {exc}') from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz) if tz is not None else parsed.astimezone()
    return parsed


def parse_size(value: str) -> int:
    """Parse a file size in bytes; empty text gives 0."""
    if not value:
        return 0
    try:
        return parse_bytes(value)
    except ValueError as exc:
        raise UsageError(f'Unable to parse file size "{value}": {exc}') from exc