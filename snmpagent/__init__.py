"""SNMP protocol types, conversion helpers and BER encoders and decoders."""

__version__ = "0.1.0"

__all__ = [
    "convert",
    "decoding",
    "encoding",
    "types",
]