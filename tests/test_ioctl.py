import pytest

from volmgmt import ioctl, ioctlcode
from volmgmt.ioctlcode import Access, Method
from volmgmt.ioctltype import DeviceType, MountType


def _fields(code):
    return (code >> 16, (code >> 2) & 0xFFF, code & 0x3, (code >> 14) & 0x3)


@pytest.mark.parametrize(
    "code, device, function, access",
    [
        (ioctl.MOUNTMGR_CREATE_POINT, MountType.MOUNT_MGR, 0, Access.READ_WRITE),
        (ioctl.MOUNTMGR_QUERY_POINTS, MountType.MOUNT_MGR, 2, Access.ANY),
        (ioctl.MOUNTMGR_CHANGE_NOTIFY, MountType.MOUNT_MGR, 8, Access.READ),
        (ioctl.MOUNTMGR_VOLUME_ARRIVAL_NOTIFICATION, MountType.MOUNT_MGR, 11, Access.READ),
        (ioctl.MOUNTDEV_QUERY_UNIQUE_ID, MountType.MOUNT_DEV, 0, Access.ANY),
        (ioctl.MOUNTDEV_LINK_DELETED, MountType.MOUNT_DEV, 5, Access.READ_WRITE),
        (ioctl.MOUNTDEV_QUERY_STABLE_GUID, MountType.MOUNT_DEV, 6, Access.ANY),
        (ioctl.STORAGE_CHECK_VERIFY, DeviceType.MASS_STORAGE, 0x0200, Access.READ),
        (ioctl.STORAGE_GET_DEVICE_NUMBER, DeviceType.MASS_STORAGE, 0x0420, Access.ANY),
        (ioctl.STORAGE_QUERY_PROPERTY, DeviceType.MASS_STORAGE, 0x0500, Access.ANY),
        (ioctl.STORAGE_RESET_DEVICE, DeviceType.MASS_STORAGE, 0x0401, Access.READ_WRITE),
    ],
)
def test_fields_decode(code, device, function, access):
    assert _fields(code) == (device, function, Method.BUFFERED, access)
    assert code == ioctlcode.new(device, function, Method.BUFFERED, access)


def test_documented_values():
    assert (
        ioctl.STORAGE_QUERY_PROPERTY
        == ioctlcode.new(DeviceType.MASS_STORAGE, 0x0500, Method.BUFFERED, Access.ANY)
        == 0x2D1400
    )
    assert (
        ioctl.MOUNTMGR_QUERY_POINTS
        == ioctlcode.new(MountType.MOUNT_MGR, 2, Method.BUFFERED, Access.ANY)
        == 0x6D0008
    )


def test_variants_differ_only_in_access():
    ms = DeviceType.MASS_STORAGE
    assert ioctl.STORAGE_CHECK_VERIFY == ioctlcode.new(ms, 0x0200, Method.BUFFERED, Access.READ)
    assert ioctl.STORAGE_CHECK_VERIFY2 == ioctlcode.new(ms, 0x0200, Method.BUFFERED, Access.ANY)
    assert ioctl.STORAGE_LOAD_MEDIA == ioctlcode.new(ms, 0x0203, Method.BUFFERED, Access.READ)
    assert ioctl.STORAGE_LOAD_MEDIA2 == ioctlcode.new(ms, 0x0203, Method.BUFFERED, Access.ANY)
    assert ioctl.STORAGE_CHECK_VERIFY ^ ioctl.STORAGE_CHECK_VERIFY2 == Access.READ << 14
    assert ioctl.STORAGE_LOAD_MEDIA ^ ioctl.STORAGE_LOAD_MEDIA2 == Access.READ << 14


def test_mount_manager_codes_are_distinct():
    codes = [
        ioctl.MOUNTMGR_CREATE_POINT,
        ioctl.MOUNTMGR_DELETE_POINTS,
        ioctl.MOUNTMGR_QUERY_POINTS,
        ioctl.MOUNTMGR_DELETE_POINTS_DBONLY,
        ioctl.MOUNTMGR_NEXT_DRIVE_LETTER,
        ioctl.MOUNTMGR_AUTO_DL_ASSIGNMENTS,
        ioctl.MOUNTMGR_VOLUME_MOUNT_POINT_CREATED,
        ioctl.MOUNTMGR_VOLUME_MOUNT_POINT_DELETED,
        ioctl.MOUNTMGR_CHANGE_NOTIFY,
        ioctl.MOUNTMGR_KEEP_LINKS_WHEN_OFFLINE,
        ioctl.MOUNTMGR_CHECK_UNPROCESSED_VOLUMES,
        ioctl.MOUNTMGR_VOLUME_ARRIVAL_NOTIFICATION,
    ]
    assert len(set(codes)) == len(codes)
    assert all(MountType(code >> 16) is MountType.MOUNT_MGR for code in codes)
    assert sorted((code >> 2) & 0xFFF for code in codes) == list(range(12))