"""
pkcs15_core.utils
-----------------
Small helpers for hex rendering of file identifiers and BIT STRING plumbing.
"""

from __future__ import annotations
import binascii
from typing import Iterable


def hexs(data: bytes) -> str:
    return binascii.hexlify(data).decode("ascii")


def split_fids(efid_or_path: bytes) -> Iterable[str]:
    # 2-byte file identifiers, "3f00/5015/4401"
    return [hexs(efid_or_path[i:i + 2]) for i in range(0, len(efid_or_path), 2)]


def bits_to_int(bits: str) -> int:
    # named bit n is the n-th character of the binary form
    return sum(1 << idx for idx, bit in enumerate(bits) if bit == "1")


def int_to_bits(value: int) -> str:
    bits = ""
    while value:
        bits += "1" if value & 1 else "0"
        value >>= 1
    return bits
