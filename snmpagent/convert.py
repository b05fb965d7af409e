"""Convenience helpers for working with SNMP values and OID batches."""

from __future__ import annotations

import re
from typing import Any

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def partition(current_position: int, partition_size: int, slice_length: int) -> bool:
    """Tell whether ``current_position`` ends a partition of ``partition_size`` items.

    Useful when splitting a long list of OIDs into requests: the last
    partition may be shorter than ``partition_size``.
    """
    if current_position < 0 or current_position >= slice_length:
        return False
    if partition_size == 1:
        return True
    if current_position % partition_size == partition_size - 1:
        return True
    return current_position == slice_length - 1


def to_big_int(value: Any) -> int:
    """Return ``value`` as an integer, or 0 for values that are not int-like.

    Integers are returned unchanged; strings holding a base-10 number in
    the signed 64-bit range are parsed; anything else yields 0.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        if not _DECIMAL.fullmatch(value):
            return 0
        parsed = int(value, 10)
        if parsed < _INT64_MIN or parsed > _INT64_MAX:
            return 0
        return parsed
    return 0