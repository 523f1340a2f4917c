import pytest

from volmgmt.ioctltype import DeviceType, MountType


def test_device_types_are_contiguous_from_one():
    assert [DeviceType(v) for v in range(1, 58)] == list(DeviceType)


def test_device_types_have_no_aliases():
    members = [DeviceType(v) for v in range(1, 58)]
    assert len(set(members)) == 57
    assert len(DeviceType.__members__) == 57


def test_device_type_count():
    assert DeviceType(57) is DeviceType.KSEC
    with pytest.raises(ValueError):
        DeviceType(58)
    with pytest.raises(ValueError):
        DeviceType(0)


def test_file_system_and_mass_storage():
    assert DeviceType(9) is DeviceType.FILE_SYSTEM
    assert DeviceType(45) is DeviceType.MASS_STORAGE


def test_first_and_last():
    assert DeviceType(1) is DeviceType.BEEP
    assert DeviceType(57) is DeviceType.KSEC


def test_mount_types():
    assert MountType(109) is MountType.MOUNT_MGR
    assert MountType(77) is MountType.MOUNT_DEV


def test_lookup_by_name():
    assert DeviceType(39) is DeviceType.PORT_8042
    assert DeviceType(40) is DeviceType.NETWORK_REDIRECTOR