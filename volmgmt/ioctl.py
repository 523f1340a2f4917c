"""I/O control codes for mass storage drivers and volume mounts."""

from __future__ import annotations

from volmgmt import ioctlcode
from volmgmt.ioctlcode import Access, Method
from volmgmt.ioctltype import DeviceType, MountType


def _mount_mgr(function: int, access: Access) -> int:
    return ioctlcode.new(MountType.MOUNT_MGR, function, Method.BUFFERED, access)


def _mount_dev(function: int, access: Access) -> int:
    return ioctlcode.new(MountType.MOUNT_DEV, function, Method.BUFFERED, access)


def _storage(function: int, access: Access) -> int:
    return ioctlcode.new(DeviceType.MASS_STORAGE, function, Method.BUFFERED, access)


# Interaction with the mount manager.
MOUNTMGR_CREATE_POINT = _mount_mgr(0, Access.READ_WRITE)
MOUNTMGR_DELETE_POINTS = _mount_mgr(1, Access.READ_WRITE)
MOUNTMGR_QUERY_POINTS = _mount_mgr(2, Access.ANY)
MOUNTMGR_DELETE_POINTS_DBONLY = _mount_mgr(3, Access.READ_WRITE)
MOUNTMGR_NEXT_DRIVE_LETTER = _mount_mgr(4, Access.READ_WRITE)
MOUNTMGR_AUTO_DL_ASSIGNMENTS = _mount_mgr(5, Access.READ_WRITE)
MOUNTMGR_VOLUME_MOUNT_POINT_CREATED = _mount_mgr(6, Access.READ_WRITE)
MOUNTMGR_VOLUME_MOUNT_POINT_DELETED = _mount_mgr(7, Access.READ_WRITE)
MOUNTMGR_CHANGE_NOTIFY = _mount_mgr(8, Access.READ)
MOUNTMGR_KEEP_LINKS_WHEN_OFFLINE = _mount_mgr(9, Access.READ_WRITE)
MOUNTMGR_CHECK_UNPROCESSED_VOLUMES = _mount_mgr(10, Access.READ)
MOUNTMGR_VOLUME_ARRIVAL_NOTIFICATION = _mount_mgr(11, Access.READ)

# Interaction with mounted devices.
MOUNTDEV_QUERY_UNIQUE_ID = _mount_dev(0, Access.ANY)
MOUNTDEV_UNIQUE_ID_CHANGE_NOTIFY = _mount_dev(1, Access.READ_WRITE)
MOUNTDEV_QUERY_DEVICE_NAME = _mount_dev(2, Access.ANY)
MOUNTDEV_QUERY_SUGGESTED_LINK_NAME = _mount_dev(3, Access.ANY)
MOUNTDEV_LINK_CREATED = _mount_dev(4, Access.READ_WRITE)
MOUNTDEV_LINK_DELETED = _mount_dev(5, Access.READ_WRITE)
MOUNTDEV_QUERY_STABLE_GUID = _mount_dev(6, Access.ANY)

# Mass storage devices.
STORAGE_CHECK_VERIFY = _storage(0x0200, Access.READ)
STORAGE_CHECK_VERIFY2 = _storage(0x0200, Access.ANY)
STORAGE_EJECT_MEDIA = _storage(0x0202, Access.READ)
STORAGE_EJECTION_CONTROL = _storage(0x0250, Access.ANY)
STORAGE_FIND_NEW_DEVICES = _storage(0x0206, Access.READ)
STORAGE_GET_DEVICE_NUMBER = _storage(0x0420, Access.ANY)
STORAGE_MEDIA_SERIAL_NUMBER = _storage(0x0304, Access.ANY)
STORAGE_GET_MEDIA_TYPES = _storage(0x0300, Access.ANY)
STORAGE_GET_MEDIA_TYPES_EX = _storage(0x0301, Access.ANY)
STORAGE_LOAD_MEDIA = _storage(0x0203, Access.READ)
STORAGE_LOAD_MEDIA2 = _storage(0x0203, Access.ANY)
STORAGE_MCN_CONTROL = _storage(0x0251, Access.ANY)
STORAGE_MEDIA_REMOVAL = _storage(0x0201, Access.READ)
STORAGE_PREDICT_FAILURE = _storage(0x0440, Access.ANY)
STORAGE_QUERY_PROPERTY = _storage(0x0500, Access.ANY)
STORAGE_RELEASE = _storage(0x0205, Access.READ)
STORAGE_RESERVE = _storage(0x0204, Access.READ)
STORAGE_RESET_BUS = _storage(0x0400, Access.READ_WRITE)
STORAGE_RESET_DEVICE = _storage(0x0401, Access.READ_WRITE)