"""Merkleization utilities per SSZ."""

from __future__ import annotations

from typing import List, Optional, Sequence

from beacon_light.types.byte_arrays import ZERO_HASH, Bytes32

from .utils import get_power_of_two_ceil, hash_nodes


class Merkle:
    """Static Merkle helpers for SSZ."""

    @staticmethod
    def merkleize(chunks: Sequence[Bytes32], limit: Optional[int] = None) -> Bytes32:
        """Compute the Merkle root of `chunks`.

        Behavior
        --------
        - If `limit` is None: pad to next power of two of len(chunks).
        - If `limit` is provided and >= len(chunks): pad to next power of two of `limit`.
        - If `limit` < len(chunks): raise (exceeds limit).
        - If no chunks: return ZERO_HASH.
          *Exception when `limit` is provided:* return the zero-subtree root for the padded width.
        """
        n = len(chunks)
        if n == 0:
            if limit is not None:
                return Merkle._zero_tree_root(get_power_of_two_ceil(limit))
            return ZERO_HASH

        if limit is None:
            width = get_power_of_two_ceil(n)
        else:
            if limit < n:
                raise ValueError("merkleize: input exceeds limit")
            width = get_power_of_two_ceil(limit)

        # Width of 1: the single chunk is the root.
        if width == 1:
            return chunks[0]

        level: List[Bytes32] = list(chunks) + [ZERO_HASH] * (width - n)

        # Reduce bottom-up: pairwise hash until a single root remains.
        while len(level) > 1:
            level = [hash_nodes(level[i], level[i + 1]) for i in range(0, len(level), 2)]
        return level[0]

    @staticmethod
    def _zero_tree_root(width_pow2: int) -> Bytes32:
        """Return the Merkle root of a full zero tree with `width_pow2` leaves."""
        h = ZERO_HASH
        w = width_pow2
        while w > 1:
            h = hash_nodes(h, h)
            w //= 2
        return h
