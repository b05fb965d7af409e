# snmpagent

`snmpagent` holds the low-level pieces of SNMP:
- the protocol's types, error codes, versions and PDU kinds;
- data classes for variable bindings and messages;
- BER encoders and decoders for the values that SNMP messages carry.

It uses only the Python standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `snmpagent.types`

- `Asn1BER`: the ASN.1 type tags, such as `Integer`, `OctetString`, `Counter64` and `EndOfMibView`.
- `SNMPError`: the error-status codes, from `NoError` to `InconsistentName`.
- `SnmpVersion`: `str()` gives `"1"`, `"2c"` or `"3"`.
- `PDUType`: `GetRequest` … `Report`.
- `SnmpPDU`: one variable binding, made of a name, a type and a value.
- `SnmpPacket`: a message with its header fields and a list of variables. `copy()` returns a duplicate whose variable list and security parameters are independent of the original.

### `snmpagent.convert`

- `partition(current_position, partition_size, slice_length)` tells whether a position ends a batch. This helps split a long OID list into requests:

  ```python
  from snmpagent.convert import partition

  [partition(i, 3, 8) for i in range(8)]
  # [False, False, True, False, False, True, False, True]
  ```

- `to_big_int(value)` behaves as follows:
  - An integer comes back unchanged.
  - A base-10 string in the signed 64-bit range is parsed.
  - Anything else, booleans included, gives `0`.

### `snmpagent.encoding`

This module holds the encoders:
- `marshal_length`
- `marshal_int32`
- `marshal_uint32`
- `marshal_uint64`
- `marshal_uvarint`
- `marshal_float32`
- `marshal_float64`
- `marshal_base128_int`
- `marshal_object_identifier`
- `marshal_oid`
- `oid_to_string`

Values out of range raise `ValueError`.

```python
from snmpagent.encoding import marshal_length, marshal_oid, oid_to_string

marshal_length(129)          # b"\x81\x81"
oid_to_string([1, 3, 6, 1])  # ".1.3.6.1"
marshal_oid(".1.3.6.1")      # b"\x2b\x06\x01"
```

### `snmpagent.decoding`

This module holds the decoders:
- `parse_length`
- `parse_int`
- `parse_int64`
- `parse_uint`
- `parse_uint32`
- `parse_uint64`
- `parse_float32`
- `parse_float64`
- `parse_base128_int`
- `parse_object_identifier`
- `parse_raw_field`
- `parse_bit_string`

`decode_value(data)` turns one BER-encoded value into a `Variable`, which holds a `type` and a `value`:
- Opaque values are decoded recursively.
- IP addresses are returned as strings.
- Tags it does not know give `Asn1BER.UnknownType`.

`BitStringValue` offers `at(i)` and `right_align()`. Malformed input raises `ValueError`.

```python
from snmpagent.decoding import decode_value

decode_value(b"\x46\x02\x12\x34")  # Variable(type=Asn1BER.Counter64, value=4660, ...)
```

## What this package does not do

The package encodes and decodes single values. It does not do the following:
- assemble or parse whole SNMP messages;
- implement user-based security (authentication or privacy);
- serve requests from an OID table;
- dispatch requests by community;
- listen on a network socket;
- provide a command to run.

Those parts have to be built on top of these modules.