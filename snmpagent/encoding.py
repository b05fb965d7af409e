"""BER encoders for the integers, floats, lengths and OIDs used in SNMP messages."""

from __future__ import annotations

import re
import struct
from collections.abc import Sequence

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_UINT32_MAX = (1 << 32) - 1
_UINT64_MAX = (1 << 64) - 1
_OID_PART = re.compile(r"[+-]?[0-9]+")


def _check_unsigned(value: int, limit: int, kind: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} value must be an int, got {type(value).__name__}")
    if value < 0 or value > limit:
        raise ValueError(f"value {value} out of range for {kind}")


def marshal_uvarint(value: int) -> bytes:
    """Encode an unsigned 32-bit value as a minimal positive BER integer body."""
    _check_unsigned(value, _UINT32_MAX, "uint32")
    buf = value.to_bytes(4, "big")
    stripped = 0
    while stripped < 3 and buf[stripped] == 0:
        stripped += 1
    buf = buf[stripped:]
    if buf and buf[0] & 0x80:
        buf = b"\x00" + buf
    return buf


def marshal_base128_int(n: int) -> bytes:
    """Encode ``n`` in base 128 with continuation bits, as used inside OIDs.

    Zero encodes as a single zero byte; negative values encode as nothing.
    """
    if n == 0:
        return b"\x00"
    groups = []
    while n > 0:
        groups.append(n & 0x7F)
        n >>= 7
    groups.reverse()
    last = len(groups) - 1
    return bytes(g | 0x80 if pos != last else g for pos, g in enumerate(groups))


def marshal_int32(value: int) -> bytes:
    """Encode a signed 32-bit integer in big-endian two's complement.

    Non-negative values are trimmed to the shortest form that keeps the
    sign bit clear; negative values always take four bytes.
    """
    if 0 <= value <= _INT32_MAX:
        raw = value.to_bytes(4, "big")
        if value < 0x80:
            return raw[3:]
        if value < 0x8000:
            return raw[2:]
        if value < 0x800000:
            return raw[1:]
        return raw
    if _INT32_MIN <= value < 0:
        return value.to_bytes(4, "big", signed=True)
    raise ValueError(f"unable to marshal {value}")


def marshal_uint64(value: int) -> bytes:
    """Encode an unsigned 64-bit value big-endian with leading zero bytes removed."""
    _check_unsigned(value, _UINT64_MAX, "uint64")
    return value.to_bytes(8, "big").lstrip(b"\x00")


def marshal_uint32(value: int) -> bytes:
    """Encode Counter32, Gauge32, TimeTicks or Unsigned32 values big-endian, trimmed."""
    _check_unsigned(value, _UINT32_MAX, "uint32")
    raw = value.to_bytes(4, "big")
    if value < 0x80:
        return raw[3:]
    if value < 0x8000:
        return raw[2:]
    if value < 0x800000:
        return raw[1:]
    return raw


def marshal_float32(value: float) -> bytes:
    """Encode a value as a big-endian IEEE 754 single-precision float."""
    return struct.pack(">f", value)


def marshal_float64(value: float) -> bytes:
    """Encode a value as a big-endian IEEE 754 double-precision float."""
    return struct.pack(">d", value)


def marshal_length(length: int) -> bytes:
    """Encode a BER length: short form below 127, long definite form otherwise."""
    if length < 0:
        raise ValueError("length must be greater than zero")
    if length < 127:
        return bytes([length])
    body = length.to_bytes(8, "big").lstrip(b"\x00")
    return bytes([0x80 | len(body)]) + body


def marshal_object_identifier(oid: Sequence[int]) -> bytes:
    """Encode the arcs of an object identifier as BER content bytes."""
    if len(oid) < 2 or oid[0] > 6 or oid[1] >= 40:
        raise ValueError("invalid object identifier")
    head = bytes([(oid[0] * 40 + oid[1]) & 0xFF])
    return head + b"".join(marshal_base128_int(arc) for arc in oid[2:])


def marshal_oid(oid: str) -> bytes:
    """Encode a dotted OID string such as ``.1.3.6.1`` as BER content bytes."""
    parts = oid.strip(".").split(".")
    arcs = []
    for part in parts:
        if not _OID_PART.fullmatch(part):
            raise ValueError(f"unable to parse OID: invalid syntax in {part!r}")
        arcs.append(int(part, 10))
    try:
        return marshal_object_identifier(arcs)
    except ValueError as exc:
        raise ValueError(f"unable to marshal OID: {exc}") from exc


def oid_to_string(oid: Sequence[int]) -> str:
    """Render OID arcs as a dotted string with a leading dot."""
    return ".".join([""] + [str(arc) for arc in oid])