"""File system I/O control codes from Windows NT through Windows 2000."""

from __future__ import annotations

from volmgmt import ioctlcode
from volmgmt.ioctlcode import Access, Method
from volmgmt.ioctltype import DeviceType


def _fs(function: int, method: Method, access: Access) -> int:
    return ioctlcode.new(DeviceType.FILE_SYSTEM, function, method, access)


# Codes present since the earliest releases.
REQUEST_OPLOCK_LEVEL_1 = _fs(0, Method.BUFFERED, Access.ANY)
REQUEST_OPLOCK_LEVEL_2 = _fs(1, Method.BUFFERED, Access.ANY)
REQUEST_BATCH_OPLOCK = _fs(2, Method.BUFFERED, Access.ANY)
OPLOCK_BREAK_ACKNOWLEDGE = _fs(3, Method.BUFFERED, Access.ANY)
OPBATCH_ACK_CLOSE_PENDING = _fs(4, Method.BUFFERED, Access.ANY)
OPLOCK_BREAK_NOTIFY = _fs(5, Method.BUFFERED, Access.ANY)
LOCK_VOLUME = _fs(6, Method.BUFFERED, Access.ANY)
UNLOCK_VOLUME = _fs(7, Method.BUFFERED, Access.ANY)
DISMOUNT_VOLUME = _fs(8, Method.BUFFERED, Access.ANY)
IS_VOLUME_MOUNTED = _fs(10, Method.BUFFERED, Access.ANY)
IS_PATHNAME_VALID = _fs(11, Method.BUFFERED, Access.ANY)
MARK_VOLUME_DIRTY = _fs(12, Method.BUFFERED, Access.ANY)
QUERY_RETRIEVAL_POINTERS = _fs(14, Method.NEITHER, Access.ANY)
GET_COMPRESSION = _fs(15, Method.BUFFERED, Access.ANY)
SET_COMPRESSION = _fs(16, Method.BUFFERED, Access.READ_WRITE)
SET_BOOTLOADER_ACCESSED = _fs(19, Method.NEITHER, Access.ANY)
OPLOCK_BREAK_ACK_NO_2 = _fs(20, Method.BUFFERED, Access.ANY)
INVALIDATE_VOLUMES = _fs(21, Method.BUFFERED, Access.ANY)
QUERY_FAT_BPB = _fs(22, Method.BUFFERED, Access.ANY)
REQUEST_FILTER_OPLOCK = _fs(23, Method.BUFFERED, Access.ANY)
GET_STATISTICS = _fs(24, Method.BUFFERED, Access.ANY)

# Codes added in Windows NT 4.0.
GET_NTFS_VOLUME_DATA = _fs(25, Method.BUFFERED, Access.ANY)
GET_NTFS_FILE_RECORD = _fs(26, Method.BUFFERED, Access.ANY)
GET_VOLUME_BITMAP = _fs(27, Method.NEITHER, Access.ANY)
GET_RETRIEVAL_POINTERS = _fs(28, Method.NEITHER, Access.ANY)
MOVE_FILE = _fs(29, Method.BUFFERED, Access.SPECIAL)
IS_VOLUME_DIRTY = _fs(30, Method.BUFFERED, Access.ANY)
ALLOW_EXTENDED_DASD_IO = _fs(32, Method.NEITHER, Access.ANY)

# Codes added in Windows 2000.
FIND_FILES_BY_SID = _fs(35, Method.NEITHER, Access.ANY)
SET_OBJECT_ID = _fs(38, Method.BUFFERED, Access.SPECIAL)
GET_OBJECT_ID = _fs(39, Method.BUFFERED, Access.ANY)
DELETE_OBJECT_ID = _fs(40, Method.BUFFERED, Access.SPECIAL)
SET_REPARSE_POINT = _fs(41, Method.BUFFERED, Access.SPECIAL)
GET_REPARSE_POINT = _fs(42, Method.BUFFERED, Access.ANY)
DELETE_REPARSE_POINT = _fs(43, Method.BUFFERED, Access.SPECIAL)
ENUM_USN_DATA = _fs(44, Method.NEITHER, Access.ANY)
SECURITY_ID_CHECK = _fs(45, Method.NEITHER, Access.READ)
READ_USN_JOURNAL = _fs(46, Method.NEITHER, Access.ANY)
SET_OBJECT_ID_EXTENDED = _fs(47, Method.BUFFERED, Access.SPECIAL)
CREATE_OR_GET_OBJECT_ID = _fs(48, Method.BUFFERED, Access.ANY)
SET_SPARSE = _fs(49, Method.BUFFERED, Access.SPECIAL)
SET_ZERO_DATA = _fs(50, Method.BUFFERED, Access.WRITE)
QUERY_ALLOCATED_RANGES = _fs(51, Method.NEITHER, Access.READ)
ENABLE_UPGRADE = _fs(52, Method.BUFFERED, Access.WRITE)
SET_ENCRYPTION = _fs(53, Method.NEITHER, Access.ANY)
ENCRYPTION_IO = _fs(54, Method.NEITHER, Access.ANY)
WRITE_RAW_ENCRYPTED = _fs(55, Method.NEITHER, Access.SPECIAL)
READ_RAW_ENCRYPTED = _fs(56, Method.NEITHER, Access.SPECIAL)
CREATE_USN_JOURNAL = _fs(57, Method.NEITHER, Access.ANY)
READ_FILE_USN_DATA = _fs(58, Method.NEITHER, Access.ANY)
USN_CLOSE_RECORD = _fs(59, Method.NEITHER, Access.ANY)
EXTEND_VOLUME = _fs(60, Method.BUFFERED, Access.ANY)
QUERY_USN_JOURNAL = _fs(61, Method.BUFFERED, Access.ANY)
DELETE_USN_JOURNAL = _fs(62, Method.BUFFERED, Access.ANY)
MARK_HANDLE = _fs(63, Method.BUFFERED, Access.ANY)
SIS_COPYFILE = _fs(64, Method.BUFFERED, Access.ANY)
SIS_LINK_FILES = _fs(65, Method.BUFFERED, Access.READ_WRITE)
RECALL_FILE = _fs(69, Method.NEITHER, Access.ANY)
READ_FROM_PLEX = _fs(71, Method.OUT_DIRECT, Access.READ)
FILE_PREFETCH = _fs(72, Method.BUFFERED, Access.SPECIAL)