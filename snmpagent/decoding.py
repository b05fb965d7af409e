"""BER decoders for the integers, lengths, OIDs and values found in SNMP messages."""

from __future__ import annotations

import ipaddress
import struct
from dataclasses import dataclass, field
from typing import Any

from .encoding import oid_to_string
from .types import ASN_EXTENSION_ID, Asn1BER

_UINT32_MASK = (1 << 32) - 1


@dataclass
class Variable:
    """A decoded value together with its ASN.1 type."""

    type: Asn1BER = Asn1BER.UnknownType
    value: Any = None
    name: list[int] = field(default_factory=list)


@dataclass
class BitStringValue:
    """An ASN.1 BIT STRING: bits packed into bytes plus the number of valid bits."""

    bytes: bytes = b""
    bit_length: int = 0

    def at(self, i: int) -> int:
        """Return the bit at index ``i``, or 0 when the index is out of range."""
        if i < 0 or i >= self.bit_length:
            return 0
        return (self.bytes[i // 8] >> (7 - i % 8)) & 1

    def right_align(self) -> bytes:
        """Return the bits with the padding moved to the start of the first byte."""
        shift = 8 - (self.bit_length % 8)
        if shift == 8 or not self.bytes:
            return bytes(self.bytes)
        data = self.bytes
        out = [data[0] >> shift]
        for prev, cur in zip(data, data[1:]):
            out.append(((prev << (8 - shift)) & 0xFF) | (cur >> shift))
        return bytes(out)


def parse_base128_int(data: bytes, offset: int) -> tuple[int, int]:
    """Parse a base-128 integer starting at ``offset``; return it and the next offset."""
    value = 0
    shifted = 0
    while offset < len(data):
        if shifted > 4:
            raise ValueError("Structural Error: base 128 integer too large")
        byte = data[offset]
        value = (value << 7) | (byte & 0x7F)
        offset += 1
        if not byte & 0x80:
            return value, offset
        shifted += 1
    raise ValueError("Syntax Error: truncated base 128 integer")


def parse_int64(data: bytes) -> int:
    """Read ``data`` as a big-endian signed integer of at most eight bytes."""
    if len(data) > 8:
        raise ValueError("integer too large")
    if not data:
        return 0
    return int.from_bytes(data, "big", signed=True)


def parse_int(data: bytes) -> int:
    """Read ``data`` as a big-endian signed integer."""
    return parse_int64(data)


def parse_length(data: bytes) -> tuple[int, int]:
    """Return the total length of a BER element and the offset of its content."""
    if len(data) <= 2:
        return len(data), len(data)
    if data[1] <= 127:
        return data[1] + 2, 2
    num_octets = data[1] & 0x7F
    if len(data) < 2 + num_octets:
        raise ValueError(f"truncated length field: {data.hex()}")
    length = int.from_bytes(data[2 : 2 + num_octets], "big")
    return length + 2 + num_octets, 2 + num_octets


def parse_object_identifier(data: bytes) -> list[int]:
    """Decode the content bytes of an OBJECT IDENTIFIER into its arcs."""
    if not data:
        return [0]
    arcs = [data[0] // 40, data[0] % 40]
    offset = 1
    while offset < len(data):
        arc, offset = parse_base128_int(data, offset)
        arcs.append(arc)
    return arcs


def _ipv4(data: bytes) -> str:
    return str(ipaddress.IPv4Address(bytes(data[2:6])))


def parse_raw_field(data: bytes) -> tuple[Any, int]:
    """Decode one header field; return its value and the length it occupies."""
    if not data:
        raise ValueError("empty data passed to parse_raw_field")
    tag = data[0]
    if tag == Asn1BER.Integer:
        length, cursor = parse_length(data)
        if length > len(data):
            raise ValueError(f"not enough data for Integer ({length} vs {len(data)}): {data.hex()}")
        try:
            return parse_int(data[cursor:length]), length
        except ValueError as exc:
            raise ValueError(f"Unable to parse raw INTEGER: {data.hex()} err: {exc}") from exc
    if tag == Asn1BER.OctetString:
        length, cursor = parse_length(data)
        if length > len(data):
            raise ValueError(f"not enough data for OctetString ({length} vs {len(data)}): {data.hex()}")
        return bytes(data[cursor:length]), length
    if tag == Asn1BER.ObjectIdentifier:
        length, cursor = parse_length(data)
        if length > len(data):
            raise ValueError(f"not enough data for OID ({length} vs {len(data)}): {data.hex()}")
        return parse_object_identifier(data[cursor:length]), length
    if tag == Asn1BER.IPAddress:
        length, _ = parse_length(data)
        if len(data) < 2:
            raise ValueError(f"not enough data for ipv4 address: {data.hex()}")
        if data[1] == 0:
            return None, length
        if data[1] == 4:
            if len(data) < 6:
                raise ValueError(f"not enough data for ipv4 address: {data.hex()}")
            return _ipv4(data), length
        raise ValueError(f"got ipaddress len {data[1]}, expected 4")
    if tag == Asn1BER.TimeTicks:
        length, cursor = parse_length(data)
        if length > len(data):
            raise ValueError(f"not enough data for TimeTicks ({length} vs {len(data)}): {data.hex()}")
        try:
            return parse_uint(data[cursor:length]), length
        except ValueError as exc:
            raise ValueError(f"Error in parse_uint: {exc}") from exc
    raise ValueError(f"unknown field type: {tag:x}")


def parse_uint64(data: bytes) -> int:
    """Read ``data`` as a big-endian unsigned integer that fits in 64 bits."""
    if len(data) > 9 or (len(data) > 8 and data[0] != 0):
        raise ValueError("integer too large")
    return int.from_bytes(data, "big")


def parse_uint32(data: bytes) -> int:
    """Read ``data`` as an unsigned integer truncated to 32 bits."""
    return parse_uint(data) & _UINT32_MASK


def parse_uint(data: bytes) -> int:
    """Read ``data`` as a big-endian unsigned integer."""
    return parse_uint64(data)


def parse_float32(data: bytes) -> float:
    """Read four bytes as a big-endian IEEE 754 single-precision float."""
    if len(data) > 4:
        raise ValueError("float too large")
    if len(data) < 4:
        raise ValueError("not enough data for float32")
    return struct.unpack(">f", bytes(data))[0]


def parse_float64(data: bytes) -> float:
    """Read eight bytes as a big-endian IEEE 754 double-precision float."""
    if len(data) > 8:
        raise ValueError("float too large")
    if len(data) < 8:
        raise ValueError("not enough data for float64")
    return struct.unpack(">d", bytes(data))[0]


def parse_bit_string(data: bytes) -> BitStringValue:
    """Decode the content bytes of an ASN.1 BIT STRING."""
    if not data:
        raise ValueError("zero length BIT STRING")
    padding = data[0]
    if padding > 7 or (len(data) == 1 and padding > 0) or data[-1] & ((1 << padding) - 1):
        raise ValueError("invalid padding bits in BIT STRING")
    return BitStringValue(bytes=bytes(data[1:]), bit_length=(len(data) - 1) * 8 - padding)


def _content(data: bytes, label: str) -> bytes:
    length, cursor = parse_length(data)
    if length > len(data):
        raise ValueError(
            f"not enough data for {label} {data.hex()} (data {len(data)} length {length})"
        )
    return data[cursor:length]


_UNSIGNED_PARSERS = {
    Asn1BER.Counter32: parse_uint,
    Asn1BER.Gauge32: parse_uint,
    Asn1BER.TimeTicks: parse_uint32,
    Asn1BER.Counter64: parse_uint64,
    Asn1BER.Uinteger32: parse_uint32,
}

_EMPTY_TYPES = (Asn1BER.Null, Asn1BER.NoSuchObject, Asn1BER.NoSuchInstance, Asn1BER.EndOfMibView)


def _decode_ip(data: bytes) -> Any:
    if len(data) < 2:
        raise ValueError(f"not enough data for ipv4 address: {data.hex()}")
    size = data[1]
    if size == 0:
        return None
    if size == 4:
        if len(data) < 6:
            raise ValueError(f"not enough data for ipv4 address: {data.hex()}")
        return _ipv4(data)
    if size == 16:
        if len(data) < 18:
            raise ValueError(f"not enough data for ipv6 address: {data.hex()}")
        address = ipaddress.IPv6Address(bytes(data[2:18]))
        mapped = address.ipv4_mapped
        return str(mapped) if mapped is not None else str(address)
    raise ValueError(f"got ipaddress len {size}, expected 4 or 16")


def decode_value(data: bytes) -> Variable:
    """Decode one BER-encoded SNMP value into a :class:`Variable`."""
    if not data:
        raise ValueError("err: zero byte buffer")
    if data[0] & ASN_EXTENSION_ID == ASN_EXTENSION_ID:
        if len(data) < 2:
            raise ValueError(f"bytes: {data.hex()} err: truncated (data {len(data)} length 2)")
        data = data[1:]

    try:
        tag = Asn1BER(data[0])
    except ValueError:
        return Variable(Asn1BER.UnknownType, None)

    if tag == Asn1BER.Integer:
        body = _content(data, "Integer")
        try:
            return Variable(Asn1BER.Integer, parse_int(body))
        except ValueError as exc:
            raise ValueError(f"bytes: {data.hex()} err: {exc}") from exc
    if tag == Asn1BER.OctetString:
        return Variable(Asn1BER.OctetString, bytes(_content(data, "OctetString")))
    if tag in _EMPTY_TYPES:
        return Variable(tag, None)
    if tag == Asn1BER.ObjectIdentifier:
        try:
            arcs, _ = parse_raw_field(data)
        except ValueError as exc:
            raise ValueError(f"Error parsing OID Value: {exc}") from exc
        return Variable(Asn1BER.ObjectIdentifier, oid_to_string(arcs))
    if tag == Asn1BER.IPAddress:
        return Variable(Asn1BER.IPAddress, _decode_ip(data))
    if tag in _UNSIGNED_PARSERS:
        body = _content(data, tag.name)
        try:
            return Variable(tag, _UNSIGNED_PARSERS[tag](body))
        except ValueError:
            return Variable(Asn1BER.UnknownType, None)
    if tag == Asn1BER.Opaque:
        return decode_value(_content(data, "Opaque"))
    if tag == Asn1BER.OpaqueFloat:
        return Variable(Asn1BER.OpaqueFloat, parse_float32(_content(data, "OpaqueFloat")))
    if tag == Asn1BER.OpaqueDouble:
        return Variable(Asn1BER.OpaqueDouble, parse_float64(_content(data, "OpaqueDouble")))
    return Variable(Asn1BER.UnknownType, None)