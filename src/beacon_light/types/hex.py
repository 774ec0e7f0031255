"""
Hex encoding used at the package boundary.

Every byte value that leaves or enters the package as text is a lowercase
hexadecimal string prefixed with `0x`. Decoding tolerates a missing prefix.
"""

from __future__ import annotations

from typing import SupportsInt

from .constants import HEX_PREFIX


def hex_str_to_bytes(value: str) -> bytes:
    """
    Decode a hex string, with or without a `0x` prefix.

    Raises:
        ValueError: If the remaining characters are not valid hex. Whitespace,
            which `bytes.fromhex` would skip, is rejected too.
    """
    digits = value.removeprefix(HEX_PREFIX)
    if any(char.isspace() for char in digits):
        raise ValueError(f"hex string must not contain whitespace: {value!r}")
    return bytes.fromhex(digits)


def bytes_to_hex_string(value: bytes) -> str:
    """Encode `value` as `0x`-prefixed lowercase hex."""
    return HEX_PREFIX + bytes(value).hex()


def u64_to_hex_string(value: SupportsInt) -> str:
    """
    Encode an unsigned 64-bit integer as minimal `0x`-prefixed hex.

    Zero encodes as `0x0`.

    Raises:
        OverflowError: If `value` does not fit in 64 unsigned bits.
    """
    int_value = int(value)
    if not (0 <= int_value < 2**64):
        raise OverflowError(f"{int_value} is out of range for uint64")
    return f"{HEX_PREFIX}{int_value:x}"
