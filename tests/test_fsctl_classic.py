import pytest

from volmgmt import fsctl_classic as fsctl
from volmgmt.ioctlcode import Access, Method, new
from volmgmt.ioctltype import DeviceType

KNOWN = [
    fsctl.REQUEST_OPLOCK_LEVEL_1,
    fsctl.LOCK_VOLUME,
    fsctl.DISMOUNT_VOLUME,
    fsctl.QUERY_RETRIEVAL_POINTERS,
    fsctl.SET_COMPRESSION,
    fsctl.GET_STATISTICS,
    fsctl.GET_VOLUME_BITMAP,
    fsctl.MOVE_FILE,
    fsctl.ALLOW_EXTENDED_DASD_IO,
    fsctl.SECURITY_ID_CHECK,
    fsctl.ENUM_USN_DATA,
    fsctl.READ_USN_JOURNAL,
    fsctl.SET_SPARSE,
    fsctl.SET_ZERO_DATA,
    fsctl.QUERY_USN_JOURNAL,
    fsctl.SIS_LINK_FILES,
    fsctl.READ_FROM_PLEX,
    fsctl.FILE_PREFETCH,
]


def _fields(code):
    return {
        "device": code >> 16,
        "access": (code >> 14) & 0x3,
        "function": (code >> 2) & 0xFFF,
        "method": code & 0x3,
    }


def test_documented_lock_volume():
    expected = new(DeviceType.FILE_SYSTEM, 6, Method.BUFFERED, Access.ANY)
    assert fsctl.LOCK_VOLUME == expected == 0x00090018


def test_documented_enum_usn_data():
    expected = new(DeviceType.FILE_SYSTEM, 44, Method.NEITHER, Access.ANY)
    assert fsctl.ENUM_USN_DATA == expected == 0x000900B3


def test_documented_set_sparse():
    expected = new(DeviceType.FILE_SYSTEM, 49, Method.BUFFERED, Access.SPECIAL)
    assert fsctl.SET_SPARSE == expected == 0x000900C4


def test_all_codes_are_file_system_device():
    for code in KNOWN:
        assert DeviceType(code >> 16) is DeviceType.FILE_SYSTEM


def test_codes_are_distinct():
    methods = [Method(code & 0x3) for code in KNOWN]
    assert len(methods) == len(KNOWN)
    assert len(set(KNOWN)) == len(KNOWN)


@pytest.mark.parametrize(
    "code, function, method, access",
    [
        (fsctl.REQUEST_OPLOCK_LEVEL_1, 0, Method.BUFFERED, Access.ANY),
        (fsctl.DISMOUNT_VOLUME, 8, Method.BUFFERED, Access.ANY),
        (fsctl.QUERY_RETRIEVAL_POINTERS, 14, Method.NEITHER, Access.ANY),
        (fsctl.SET_COMPRESSION, 16, Method.BUFFERED, Access.READ_WRITE),
        (fsctl.GET_STATISTICS, 24, Method.BUFFERED, Access.ANY),
        (fsctl.GET_VOLUME_BITMAP, 27, Method.NEITHER, Access.ANY),
        (fsctl.MOVE_FILE, 29, Method.BUFFERED, Access.SPECIAL),
        (fsctl.ALLOW_EXTENDED_DASD_IO, 32, Method.NEITHER, Access.ANY),
        (fsctl.SECURITY_ID_CHECK, 45, Method.NEITHER, Access.READ),
        (fsctl.READ_USN_JOURNAL, 46, Method.NEITHER, Access.ANY),
        (fsctl.SET_ZERO_DATA, 50, Method.BUFFERED, Access.WRITE),
        (fsctl.QUERY_USN_JOURNAL, 61, Method.BUFFERED, Access.ANY),
        (fsctl.SIS_LINK_FILES, 65, Method.BUFFERED, Access.READ_WRITE),
        (fsctl.READ_FROM_PLEX, 71, Method.OUT_DIRECT, Access.READ),
        (fsctl.FILE_PREFETCH, 72, Method.BUFFERED, Access.SPECIAL),
    ],
)
def test_code_fields(code, function, method, access):
    fields = _fields(code)
    assert fields["function"] == function
    assert fields["method"] == method
    assert fields["access"] == access
    assert code == new(DeviceType.FILE_SYSTEM, function, method, access)


def test_codes_fit_in_32_bits():
    for code in KNOWN:
        assert 0 <= code <= 0xFFFFFFFF
        assert DeviceType(code >> 16) is DeviceType.FILE_SYSTEM