"""Packing helpers for SSZ Merkleization.

These helpers convert existing *serialized* data into 32-byte chunks (Bytes32).
They do not serialize objects themselves; they only arrange bytes into chunks
as required by the SSZ Merkleization rules.
"""

from __future__ import annotations

from typing import List

from beacon_light.types.byte_arrays import Bytes32
from beacon_light.types.constants import BYTES_PER_CHUNK


class Packer:
    """Collection of static helpers to pack byte data into 32-byte chunks."""

    @staticmethod
    def _right_pad_to_chunk(b: bytes) -> bytes:
        """Right-pad `b` with zeros up to a multiple of BYTES_PER_CHUNK."""
        if len(b) % BYTES_PER_CHUNK == 0:
            return b
        pad = BYTES_PER_CHUNK - (len(b) % BYTES_PER_CHUNK)
        return b + b"\x00" * pad

    @staticmethod
    def _partition_chunks(b: bytes) -> List[Bytes32]:
        """Partition an already-aligned byte-string into 32-byte chunks.

        Precondition: `len(b)` must be a multiple of 32.
        """
        if len(b) == 0:
            return []
        if len(b) % BYTES_PER_CHUNK != 0:
            raise ValueError("partition requires a multiple of BYTES_PER_CHUNK")
        return [Bytes32(b[i : i + BYTES_PER_CHUNK]) for i in range(0, len(b), BYTES_PER_CHUNK)]

    @staticmethod
    def pack_bytes(data: bytes) -> List[Bytes32]:
        """Pack serialized bytes (uintN encodings, byte vectors) into 32-byte chunks."""
        return Packer._partition_chunks(Packer._right_pad_to_chunk(data))
