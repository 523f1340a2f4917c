# volmgmt

Pure-Python building blocks for working with Windows volumes and file
systems. The package defines I/O control codes, file attribute flags, file
identifiers and the binary file information structures used by the Windows
file API. It also provides helpers that turn raw values into readable text,
and the settings, filters and summaries used when scanning a volume's files.
None of it calls the operating system, so it runs on any platform.

## Installation

```
pip install volmgmt
```

The `test` extra installs pytest for the test suite: `pip install "volmgmt[test]"`.

## Modules

| Module | Contents |
| --- | --- |
| `volmgmt.ioctlcode` | `new(device_type, function, method, access)` builds a 32-bit I/O control code and raises `ValueError` for fields out of range; `Method` and `Access` enums |
| `volmgmt.ioctltype` | `DeviceType` and `MountType` device type numbers |
| `volmgmt.fsctl_classic` | File system control codes from Windows NT to Windows 2000, such as `LOCK_VOLUME` and `READ_USN_JOURNAL` |
| `volmgmt.fsctl_modern` | File system control codes from Windows Vista to Windows 10, such as `SHRINK_VOLUME` and `GET_REFS_VOLUME_DATA` |
| `volmgmt.ioctl` | Mount manager (`MOUNTMGR_*`), mounted device (`MOUNTDEV_*`) and mass storage (`STORAGE_*`) control codes |
| `volmgmt.fileattr` | `FileAttributes` flags with `match` and `join`, and the formats `FORMAT_C`, `FORMAT_GO` and `FORMAT_CODE` |
| `volmgmt.guidconv` | `GUID`, `format_guid` and `EMPTY_GUID` for the `{XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX}` form |
| `volmgmt.fileref` | `FileID` for 64- and 128-bit file identifiers, `new64`, `new128`, `from_big_endian`, `from_little_endian`, `Descriptor` and `FileIDType` |
| `volmgmt.hsync` | Reference-counted `Handle` that calls an optional closer when its last copy closes; `HandleClosedError` |
| `volmgmt.fileapi` | `FileInfoClass`, `BasicInfo`, `RenameInfo`, `ByHandleFileInformation`, `FileInfoForHandle`, `time_to_filetime` and `filetime_to_time` |
| `volmgmt.sizes` | `format_bytes` and `parse_bytes` for human-readable sizes |
| `volmgmt.scansettings` | `Settings` with a text `summary()`, `compile_regex`, `parse_time`, `parse_size` and `UsageError` |
| `volmgmt.scanfilter` | `build_record_filter` and `build_file_info_filter` |
| `volmgmt.scansummary` | `Summary` with `mean()` and `median()`, `combine` and the `Result` enum |

## Examples

Build an I/O control code:

```python
from volmgmt import ioctlcode
from volmgmt.ioctltype import DeviceType

code = ioctlcode.new(DeviceType.FILE_SYSTEM, 6, ioctlcode.Method.BUFFERED, ioctlcode.Access.ANY)
```

Describe file attributes:

```python
from volmgmt.fileattr import FORMAT_CODE, FileAttributes

attrs = FileAttributes.HIDDEN | FileAttributes.SYSTEM
attrs.match(FileAttributes.HIDDEN)  # True
attrs.join("", FORMAT_CODE)         # "HS"
str(attrs)                          # "Hidden|System"
```

Format a GUID:

```python
from volmgmt.guidconv import GUID, format_guid

format_guid(GUID(0x12345678, 0x9ABC, 0xDEF0, bytes(range(8))))
# "{12345678-9ABC-DEF0-0001-020304050607}"
```

Work with file identifiers:

```python
from volmgmt.fileref import new64, new128

small = new64(42)
small.is_int64(), small.int64()  # (True, 42)
new128(1, 1).split()             # (1, 1)
small.descriptor()               # Descriptor with size 24, type FileIDType.FILE
```

Marshal file information and convert file times:

```python
from datetime import datetime, timezone
from volmgmt.fileapi import BasicInfo, RenameInfo, time_to_filetime

time_to_filetime(datetime(1970, 1, 1, tzinfo=timezone.utc))  # 116444736000000000
data = BasicInfo(last_write_time=datetime.now(timezone.utc)).to_bytes()  # 40 bytes
BasicInfo.from_bytes(data)
RenameInfo(replace_if_exists=True, file_name="new.txt").to_bytes()
```

Share a handle between several users:

```python
from volmgmt.hsync import Handle

h = Handle(7, closer=print)
worker = h.clone()
h.close()          # the resource stays open for the clone
worker.handle()    # 7
worker.close()     # last copy closed: the closer is called with 7
```

Sizes, settings and summaries:

```python
from volmgmt.sizes import format_bytes, parse_bytes
from volmgmt.scansettings import Settings, compile_regex, parse_size
from volmgmt.scanfilter import build_record_filter
from volmgmt.scansummary import Summary, combine

format_bytes(82854982)    # "83 MB"
parse_bytes("1,024 KiB")  # 1048576

settings = Settings(include=compile_regex(r"\.log$"), bigger_than=parse_size("1 MB"), limit=1)
print(settings.summary(), end="")  # "Include: (?i)\.log$" and "Bigger Than: 1.0 MB"
record_filter = build_record_filter(settings)  # takes objects with .path and .file_name

total = combine(Summary(files=2, total_bytes=300, sizes=[100, 200]),
                Summary(files=1, total_bytes=50, sizes=[50]))
total.mean(), total.median()  # (116, 200)
```

Invalid input to `compile_regex`, `parse_time` and `parse_size` raises
`UsageError`.

## What the package does not do

The package does not open volumes or files, issue I/O control requests, read
the master file table or the USN change journal, and it ships no command-line
tool. The control codes, structures, filters and summaries are meant to be
used by code that performs those operations itself.