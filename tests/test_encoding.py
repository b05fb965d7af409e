import struct

import pytest

from snmpagent.encoding import (
    marshal_base128_int,
    marshal_float32,
    marshal_float64,
    marshal_int32,
    marshal_length,
    marshal_object_identifier,
    marshal_oid,
    marshal_uint32,
    marshal_uint64,
    marshal_uvarint,
    oid_to_string,
)


@pytest.mark.parametrize(
    "length, expected",
    [
        (1, bytes([0x01])),
        (129, bytes([0x81, 0x81])),
        (256, bytes([0x82, 0x01, 0x00])),
        (272, bytes([0x82, 0x01, 0x10])),
        (435, bytes([0x82, 0x01, 0xB3])),
    ],
)
def test_marshal_length_cases(length, expected):
    assert marshal_length(length) == expected


def test_marshal_length_boundary_uses_long_form():
    assert marshal_length(126) == b"\x7e"
    assert marshal_length(127) == b"\x81\x7f"


def test_marshal_length_negative_raises():
    with pytest.raises(ValueError):
        marshal_length(-1)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, b"\x00"),
        (0x7F, b"\x7f"),
        (0x80, b"\x00\x80"),
        (0x1234, b"\x12\x34"),
        (0xFFFFFFFF, b"\x00\xff\xff\xff\xff"),
    ],
)
def test_marshal_uvarint(value, expected):
    assert marshal_uvarint(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(0, b"\x00"), (1, b"\x01"), (127, b"\x7f"), (128, b"\x81\x00"), (300, b"\x82\x2c")],
)
def test_marshal_base128_int(value, expected):
    assert marshal_base128_int(value) == expected


def test_marshal_base128_int_negative_is_empty():
    assert marshal_base128_int(-5) == b""


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, b"\x00"),
        (127, b"\x7f"),
        (128, b"\x00\x80"),
        (0x7FFF, b"\x7f\xff"),
        (0x8000, b"\x00\x80\x00"),
        (0x800000, b"\x00\x80\x00\x00"),
        (2147483647, b"\x7f\xff\xff\xff"),
        (-1, b"\xff\xff\xff\xff"),
        (-2147483648, b"\x80\x00\x00\x00"),
    ],
)
def test_marshal_int32(value, expected):
    assert marshal_int32(value) == expected


@pytest.mark.parametrize("value", [2147483648, -2147483649])
def test_marshal_int32_out_of_range(value):
    with pytest.raises(ValueError):
        marshal_int32(value)


def test_marshal_uint64():
    assert marshal_uint64(0x1234) == b"\x12\x34"
    assert marshal_uint64(0) == b""
    assert marshal_uint64(0xFFFFFFFFFFFFFFFF) == b"\xff" * 8


def test_marshal_uint64_rejects_negative():
    with pytest.raises(ValueError):
        marshal_uint64(-1)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, b"\x00"),
        (0x7F, b"\x7f"),
        (0x80, b"\x00\x80"),
        (1034156, b"\x0f\xc7\xac"),
        (0xFFFFFFFF, b"\xff\xff\xff\xff"),
    ],
)
def test_marshal_uint32(value, expected):
    assert marshal_uint32(value) == expected


def test_marshal_uint32_out_of_range():
    with pytest.raises(ValueError):
        marshal_uint32(1 << 32)


def test_marshal_uint32_rejects_non_int():
    with pytest.raises(TypeError):
        marshal_uint32("12")


def test_marshal_float32():
    assert marshal_float32(1.0) == b"\x3f\x80\x00\x00"
    assert struct.unpack(">f", marshal_float32(2.5))[0] == 2.5


def test_marshal_float64():
    assert marshal_float64(1.0) == b"\x3f\xf0\x00\x00\x00\x00\x00\x00"
    assert len(marshal_float64(3.25)) == 8


def test_marshal_object_identifier():
    assert marshal_object_identifier([1, 3, 6, 1]) == b"\x2b\x06\x01"


@pytest.mark.parametrize("oid", [[1], [7, 1], [1, 40]])
def test_marshal_object_identifier_invalid(oid):
    with pytest.raises(ValueError):
        marshal_object_identifier(oid)


def test_marshal_oid_matches_wire_bytes():
    expected = bytes(
        [0x2B, 0x06, 0x01, 0x02, 0x01, 0x2B, 0x0E, 0x01, 0x01, 0x06, 0x01, 0x05]
    )
    assert marshal_oid("1.3.6.1.2.1.43.14.1.1.6.1.5") == expected
    assert marshal_oid(".1.3.6.1.2.1.43.14.1.1.6.1.5") == expected


def test_marshal_oid_unparsable():
    with pytest.raises(ValueError, match="unable to parse OID"):
        marshal_oid("1.3.x.1")


def test_marshal_oid_invalid_identifier():
    with pytest.raises(ValueError, match="unable to marshal OID"):
        marshal_oid("9.3.6")


def test_oid_to_string():
    assert oid_to_string([1, 3, 6, 1, 2, 1]) == ".1.3.6.1.2.1"
    assert oid_to_string([]) == ""