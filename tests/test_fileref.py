import struct

import pytest

from volmgmt.fileref import (
    Descriptor,
    FileID,
    FileIDType,
    from_big_endian,
    from_little_endian,
    new64,
    new128,
)


@pytest.mark.parametrize("value", [0, 1, 12345, (1 << 63) - 1, -1, -(1 << 63)])
def test_new64_round_trip(value):
    fid = new64(value)
    assert fid.int64() == value
    assert fid.split() == (0, value)
    assert fid.is_int64()
    assert str(fid) == str(value)


@pytest.mark.parametrize("lower, upper", [(5, 7), (-1, 1), (0, -(1 << 63))])
def test_new128_split_round_trip(lower, upper):
    fid = new128(lower, upper)
    assert fid.split() == (upper, lower)
    assert fid.int64() == -1
    assert not fid.is_int64()


def test_string_of_wide_identifier_is_unsigned():
    assert str(new128(0, 1)) == str(1 << 64)
    assert str(new128(-1, -1)) == str((1 << 128) - 1)


def test_zero():
    assert new64(0).is_zero()
    assert FileID().is_zero()
    assert not new64(1).is_zero()
    assert not new128(0, 1).is_zero()


def test_byte_orders():
    raw = bytes(range(16))
    fid = from_big_endian(raw)
    assert fid.big_endian() == raw
    assert fid.little_endian() == raw[::-1]
    assert from_little_endian(fid.little_endian()) == fid
    assert from_little_endian(raw).big_endian() == raw[::-1]


def test_descriptor_for_64_bit_identifier():
    desc = new64(5).descriptor()
    assert desc.size == 24
    assert desc.type == FileIDType.FILE
    assert desc.data == bytes([5]) + bytes(15)


def test_descriptor_for_128_bit_identifier():
    fid = new128(3, 9)
    desc = fid.descriptor()
    assert desc.type == FileIDType.EXTENDED_FILE_ID
    assert desc.data == fid.little_endian()
    assert struct.unpack("<II16s", bytes(desc)) == (24, 2, fid.little_endian())


@pytest.mark.parametrize("length", [0, 8, 15, 17])
def test_wrong_length_rejected(length):
    with pytest.raises(ValueError):
        from_big_endian(bytes(length))
    with pytest.raises(ValueError):
        from_little_endian(bytes(length))
    with pytest.raises(ValueError):
        Descriptor(size=24, type=FileIDType.FILE, data=bytes(length))


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        new64(1 << 63)
    with pytest.raises(ValueError):
        new128(0, -(1 << 63) - 1)