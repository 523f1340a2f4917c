"""Totals gathered while scanning the files of a volume."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from volmgmt.sizes import format_bytes

__all__ = ["Result", "Summary", "combine"]


class Result(IntEnum):
    """Assessment of a single file during a scan."""

    SKIPPED = 0
    INACCESSIBLE = 1
    DIR = 2
    FILE = 3
    REPARSE = 4


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass
class Summary:
    """Counts and file sizes from a scan."""

    skipped: int = 0
    directories: int = 0
    files: int = 0
    total_bytes: int = 0
    sizes: list[int] = field(default_factory=list)

    def mean(self) -> int:
        """Return the mean file size, truncated to whole bytes."""
        if self.files == 0:
            return 0
        return _trunc_div(self.total_bytes, self.files)

    def median(self) -> int:
        """Return the middle of the sizes in the order they were recorded.

        With an even count the two middle values are averaged.
        """
        length = len(self.sizes)
        if length == 0:
            return 0
        middle = length // 2
        if length % 2 == 0:
            return _trunc_div(self.sizes[middle - 1] + self.sizes[middle], 2)
        return self.sizes[middle]

    def __str__(self) -> str:
        return (
            f"Skipped: {self.skipped}, Directories: {self.directories}, Files: {self.files} "
            f"(Total: {format_bytes(self.total_bytes)}, Mean: {format_bytes(self.mean())}, "
            f"Median: {format_bytes(self.median())})"
        )


def combine(*summaries: Summary) -> Summary:
    """Return the sum of the given summaries, with their sizes concatenated."""
    combined = Summary()
    for summary in summaries:
        combined.skipped += summary.skipped
        combined.directories += summary.directories
        combined.files += summary.files
        combined.total_bytes += summary.total_bytes
        combined.sizes.extend(summary.sizes)
    return combined