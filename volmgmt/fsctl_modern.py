"""File system I/O control codes from Windows Vista through Windows 10."""

from __future__ import annotations

from volmgmt import ioctlcode
from volmgmt.ioctlcode import Access, Method
from volmgmt.ioctltype import DeviceType


def _fs(function: int, method: Method, access: Access) -> int:
    return ioctlcode.new(DeviceType.FILE_SYSTEM, function, method, access)


# Codes added in Windows Vista.
MAKE_MEDIA_COMPATIBLE = _fs(76, Method.BUFFERED, Access.WRITE)
SET_DEFECT_MANAGEMENT = _fs(77, Method.BUFFERED, Access.WRITE)
QUERY_SPARING_INFO = _fs(78, Method.BUFFERED, Access.ANY)
QUERY_ON_DISK_VOLUME_INFO = _fs(79, Method.BUFFERED, Access.ANY)
SET_VOLUME_COMPRESSION_STATE = _fs(80, Method.BUFFERED, Access.SPECIAL)
TXFS_MODIFY_RM = _fs(81, Method.BUFFERED, Access.WRITE)
TXFS_QUERY_RM_INFORMATION = _fs(82, Method.BUFFERED, Access.READ)
TXFS_ROLLFORWARD_REDO = _fs(84, Method.BUFFERED, Access.WRITE)
TXFS_ROLLFORWARD_UNDO = _fs(85, Method.BUFFERED, Access.WRITE)
TXFS_START_RM = _fs(86, Method.BUFFERED, Access.WRITE)
TXFS_SHUTDOWN_RM = _fs(87, Method.BUFFERED, Access.WRITE)
TXFS_READ_BACKUP_INFORMATION = _fs(88, Method.BUFFERED, Access.READ)
TXFS_WRITE_BACKUP_INFORMATION = _fs(89, Method.BUFFERED, Access.WRITE)
TXFS_CREATE_SECONDARY_RM = _fs(90, Method.BUFFERED, Access.WRITE)
TXFS_GET_METADATA_INFO = _fs(91, Method.BUFFERED, Access.READ)
TXFS_GET_TRANSACTED_VERSION = _fs(92, Method.BUFFERED, Access.READ)
TXFS_SAVEPOINT_INFORMATION = _fs(94, Method.BUFFERED, Access.WRITE)
TXFS_CREATE_MINIVERSION = _fs(95, Method.BUFFERED, Access.WRITE)
TXFS_TRANSACTION_ACTIVE = _fs(99, Method.BUFFERED, Access.READ)
SET_VOLUME_ZERO_ON_DEALLOCATION = _fs(101, Method.BUFFERED, Access.SPECIAL)
SET_REPAIR = _fs(102, Method.BUFFERED, Access.ANY)
GET_REPAIR = _fs(103, Method.BUFFERED, Access.ANY)
WAIT_FOR_REPAIR = _fs(104, Method.BUFFERED, Access.ANY)
INITIATE_REPAIR = _fs(106, Method.BUFFERED, Access.ANY)
CSC_INTERNAL = _fs(107, Method.NEITHER, Access.ANY)
SHRINK_VOLUME = _fs(108, Method.BUFFERED, Access.SPECIAL)
SET_SHORT_NAME_BEHAVIOR = _fs(109, Method.BUFFERED, Access.ANY)
DFSR_SET_GHOST_HANDLE_STATE = _fs(110, Method.BUFFERED, Access.ANY)
TXFS_LIST_TRANSACTION_LOCKED_FILES = _fs(120, Method.BUFFERED, Access.READ)
TXFS_LIST_TRANSACTIONS = _fs(121, Method.BUFFERED, Access.READ)
QUERY_PAGEFILE_ENCRYPTION = _fs(122, Method.BUFFERED, Access.ANY)
RESET_VOLUME_ALLOCATION_HINTS = _fs(123, Method.BUFFERED, Access.ANY)
TXFS_READ_BACKUP_INFORMATION2 = _fs(126, Method.BUFFERED, Access.ANY)

# Codes added in Windows 7.
QUERY_DEPENDENT_VOLUME = _fs(124, Method.BUFFERED, Access.ANY)
SD_GLOBAL_CHANGE = _fs(125, Method.BUFFERED, Access.ANY)
LOOKUP_STREAM_FROM_CLUSTER = _fs(127, Method.BUFFERED, Access.ANY)
TXFS_WRITE_BACKUP_INFORMATION2 = _fs(128, Method.BUFFERED, Access.ANY)
FILE_TYPE_NOTIFICATION = _fs(129, Method.BUFFERED, Access.ANY)
BOOT_AREA_INFO = _fs(140, Method.BUFFERED, Access.ANY)
GET_RETRIEVAL_POINTER_BASE = _fs(141, Method.BUFFERED, Access.ANY)
SET_PERSISTENT_VOLUME_STATE = _fs(142, Method.BUFFERED, Access.ANY)
QUERY_PERSISTENT_VOLUME_STATE = _fs(143, Method.BUFFERED, Access.ANY)
REQUEST_OPLOCK = _fs(144, Method.BUFFERED, Access.ANY)
CSV_TUNNEL_REQUEST = _fs(145, Method.BUFFERED, Access.ANY)
IS_CSV_FILE = _fs(146, Method.BUFFERED, Access.ANY)
QUERY_FILE_SYSTEM_RECOGNITION = _fs(147, Method.BUFFERED, Access.ANY)
GET_VOLUME_PATH_NAME = _fs(148, Method.BUFFERED, Access.ANY)
CSV_GET_VOLUME_NAME_FOR_VOLUME_MOUNT_POINT = _fs(149, Method.BUFFERED, Access.ANY)
CSV_GET_VOLUME_PATH_NAMES_FOR_VOLUME_NAME = _fs(150, Method.BUFFERED, Access.ANY)
IS_FILE_ON_CSV_VOLUME = _fs(151, Method.BUFFERED, Access.ANY)
CSV_INTERNAL = _fs(155, Method.BUFFERED, Access.ANY)
SET_EXTERNAL_BACKING = _fs(195, Method.BUFFERED, Access.SPECIAL)
GET_EXTERNAL_BACKING = _fs(196, Method.BUFFERED, Access.ANY)
DELETE_EXTERNAL_BACKING = _fs(197, Method.BUFFERED, Access.SPECIAL)
ENUM_EXTERNAL_BACKING = _fs(198, Method.BUFFERED, Access.ANY)
ENUM_OVERLAY = _fs(199, Method.NEITHER, Access.ANY)
ADD_OVERLAY = _fs(204, Method.BUFFERED, Access.WRITE)
REMOVE_OVERLAY = _fs(205, Method.BUFFERED, Access.WRITE)
UPDATE_OVERLAY = _fs(206, Method.BUFFERED, Access.WRITE)
GET_WOF_VERSION = _fs(218, Method.BUFFERED, Access.ANY)
SUSPEND_OVERLAY = _fs(225, Method.BUFFERED, Access.ANY)

# Codes added in Windows 8.
FILE_LEVEL_TRIM = _fs(130, Method.BUFFERED, Access.WRITE)
CORRUPTION_HANDLING = _fs(152, Method.BUFFERED, Access.ANY)
OFFLOAD_READ = _fs(153, Method.BUFFERED, Access.READ)
OFFLOAD_WRITE = _fs(154, Method.BUFFERED, Access.WRITE)
SET_PURGE_FAILURE_MODE = _fs(156, Method.BUFFERED, Access.ANY)
QUERY_FILE_LAYOUT = _fs(157, Method.NEITHER, Access.ANY)
IS_VOLUME_OWNED_BY_CSVFS = _fs(158, Method.BUFFERED, Access.ANY)
GET_INTEGRITY_INFORMATION = _fs(159, Method.BUFFERED, Access.ANY)
SET_INTEGRITY_INFORMATION = _fs(160, Method.BUFFERED, Access.READ_WRITE)
QUERY_FILE_REGIONS = _fs(161, Method.BUFFERED, Access.ANY)
DEDUP_FILE = _fs(165, Method.BUFFERED, Access.ANY)
DEDUP_QUERY_FILE_HASHES = _fs(166, Method.NEITHER, Access.READ)
DEDUP_QUERY_RANGE_STATE = _fs(167, Method.NEITHER, Access.READ)
DEDUP_QUERY_REPARSE_INFO = _fs(168, Method.NEITHER, Access.ANY)
RKF_INTERNAL = _fs(171, Method.NEITHER, Access.ANY)
SCRUB_DATA = _fs(172, Method.BUFFERED, Access.ANY)
REPAIR_COPIES = _fs(173, Method.BUFFERED, Access.READ_WRITE)
DISABLE_LOCAL_BUFFERING = _fs(174, Method.BUFFERED, Access.ANY)
CSV_MGMT_LOCK = _fs(175, Method.BUFFERED, Access.ANY)
CSV_QUERY_DOWN_LEVEL_FILE_SYSTEM_CHARACTERISTICS = _fs(176, Method.BUFFERED, Access.ANY)
ADVANCE_FILE_ID = _fs(177, Method.BUFFERED, Access.ANY)
CSV_SYNC_TUNNEL_REQUEST = _fs(178, Method.BUFFERED, Access.ANY)
CSV_QUERY_VETO_FILE_DIRECT_IO = _fs(179, Method.BUFFERED, Access.ANY)
WRITE_USN_REASON = _fs(180, Method.BUFFERED, Access.ANY)
CSV_CONTROL = _fs(181, Method.BUFFERED, Access.ANY)
GET_REFS_VOLUME_DATA = _fs(182, Method.BUFFERED, Access.ANY)
CSV_H_BREAKING_SYNC_TUNNEL_REQUEST = _fs(185, Method.BUFFERED, Access.ANY)

# Codes added in Windows 8.1.
QUERY_STORAGE_CLASSES = _fs(187, Method.BUFFERED, Access.ANY)
QUERY_REGION_INFO = _fs(188, Method.BUFFERED, Access.ANY)
USN_TRACK_MODIFIED_RANGES = _fs(189, Method.BUFFERED, Access.ANY)
QUERY_SHARED_VIRTUAL_DISK_SUPPORT = _fs(192, Method.BUFFERED, Access.ANY)
SVHDX_SYNC_TUNNEL_REQUEST = _fs(193, Method.BUFFERED, Access.ANY)
SVHDX_SET_INITIATOR_INFORMATION = _fs(194, Method.BUFFERED, Access.ANY)
DUPLICATE_EXTENTS_TO_FILE = _fs(209, Method.BUFFERED, Access.WRITE)
SPARSE_OVERALLOCATE = _fs(211, Method.NEITHER, Access.SPECIAL)
STORAGE_QOS_CONTROL = _fs(212, Method.NEITHER, Access.ANY)
SVHDX_ASYNC_TUNNEL_REQUEST = _fs(217, Method.BUFFERED, Access.ANY)

# Codes added in Windows 10.
INITIATE_FILE_METADATA_OPTIMIZATION = _fs(215, Method.BUFFERED, Access.SPECIAL)
QUERY_FILE_METADATA_OPTIMIZATION = _fs(216, Method.BUFFERED, Access.SPECIAL)
HCS_SYNC_TUNNEL_REQUEST = _fs(219, Method.BUFFERED, Access.ANY)
HCS_ASYNC_TUNNEL_REQUEST = _fs(220, Method.BUFFERED, Access.ANY)
QUERY_EXTENT_READ_CACHE_INFO = _fs(221, Method.BUFFERED, Access.ANY)
QUERY_REFS_VOLUME_COUNTER_INFO = _fs(222, Method.BUFFERED, Access.ANY)
CLEAN_VOLUME_METADATA = _fs(223, Method.BUFFERED, Access.ANY)
SET_INTEGRITY_INFORMATION_EX = _fs(224, Method.BUFFERED, Access.ANY)
VIRTUAL_STORAGE_QUERY_PROPERTY = _fs(226, Method.BUFFERED, Access.ANY)