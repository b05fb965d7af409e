"""Core SNMP value types: ASN.1 tags, error codes, versions, PDUs and packets."""

from __future__ import annotations

import copy as _copy
import enum
from dataclasses import dataclass, field, replace
from typing import Any

# Maximum number of OIDs permitted in a single request.
MAX_OIDS = 60

# Mask identifying ASN.1 types whose tag continues in the following byte.
ASN_EXTENSION_ID = 0x1F


class Asn1BER(enum.IntEnum):
    """ASN.1 BER type tag of an SNMP variable."""

    EndOfContents = 0x00
    UnknownType = 0x00
    Boolean = 0x01
    Integer = 0x02
    BitString = 0x03
    OctetString = 0x04
    Null = 0x05
    ObjectIdentifier = 0x06
    ObjectDescription = 0x07
    IPAddress = 0x40
    Counter32 = 0x41
    Gauge32 = 0x42
    TimeTicks = 0x43
    Opaque = 0x44
    NsapAddress = 0x45
    Counter64 = 0x46
    Uinteger32 = 0x47
    OpaqueFloat = 0x78
    OpaqueDouble = 0x79
    NoSuchObject = 0x80
    NoSuchInstance = 0x81
    EndOfMibView = 0x82


class SNMPError(enum.IntEnum):
    """Standard SNMP error-status codes."""

    NoError = 0
    TooBig = 1
    NoSuchName = 2
    BadValue = 3
    ReadOnly = 4
    GenErr = 5
    NoAccess = 6
    WrongType = 7
    WrongLength = 8
    WrongEncoding = 9
    WrongValue = 10
    NoCreation = 11
    InconsistentValue = 12
    ResourceUnavailable = 13
    CommitFailed = 14
    UndoFailed = 15
    AuthorizationError = 16
    NotWritable = 17
    InconsistentName = 18


class SnmpVersion(enum.IntEnum):
    """SNMP protocol version as carried on the wire."""

    Version1 = 0x0
    Version2c = 0x1
    Version3 = 0x3

    def __str__(self) -> str:
        if self is SnmpVersion.Version1:
            return "1"
        if self is SnmpVersion.Version2c:
            return "2c"
        return "3"


class PDUType(enum.IntEnum):
    """Context-specific tag of an SNMP PDU."""

    GetRequest = 0xA0
    GetNextRequest = 0xA1
    GetResponse = 0xA2
    SetRequest = 0xA3
    Trap = 0xA4
    GetBulkRequest = 0xA5
    InformRequest = 0xA6
    SNMPv2Trap = 0xA7
    Report = 0xA8


@dataclass
class SnmpPDU:
    """A single variable binding: OID name, ASN.1 type and value."""

    name: str
    type: Asn1BER = Asn1BER.Null
    value: Any = None


@dataclass
class SnmpPacket:
    """A decoded SNMP message with its header fields and variable bindings."""

    version: SnmpVersion = SnmpVersion.Version1
    community: str = ""
    msg_flags: int = 0
    security_model: int = 0
    security_parameters: Any = None
    context_engine_id: str = ""
    context_name: str = ""
    pdu_type: PDUType = PDUType.GetRequest
    msg_id: int = 0
    request_id: int = 0
    error: SNMPError = SNMPError.NoError
    error_index: int = 0
    non_repeaters: int = 0
    max_repetitions: int = 0
    variables: list[SnmpPDU] = field(default_factory=list)

    def copy(self) -> SnmpPacket:
        """Return a copy whose variable list and security parameters are independent."""
        params = self.security_parameters
        if params is not None:
            params = params.copy() if hasattr(params, "copy") else _copy.copy(params)
        return replace(
            self,
            security_parameters=params,
            variables=[replace(pdu) for pdu in self.variables],
        )