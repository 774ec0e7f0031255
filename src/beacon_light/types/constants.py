"""Constants used throughout the library."""

from __future__ import annotations

from typing import Final

BYTES_PER_CHUNK: Final = 32
"""Number of bytes per Merkle chunk."""

HEX_PREFIX: Final = "0x"
"""Prefix carried by every hex string crossing the package boundary."""
