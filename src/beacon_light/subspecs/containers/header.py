"""
Block header container.

Light clients follow the chain through headers alone. A header commits to the
post-state of its block through `state_root`, which is the root every Merkle
proof received by a light client is checked against.
"""

from typing import Protocol

from beacon_light.types import Bytes32, Container

from .slot import Slot, ValidatorIndex


class BeaconBlockHeader(Container):
    """The header of a beacon block."""

    slot: Slot
    """The slot for which this block is created."""

    proposer_index: ValidatorIndex
    """The index of the validator that proposed the block."""

    parent_root: Bytes32
    """The root of the parent block."""

    state_root: Bytes32
    """The root of the state after applying the block."""

    body_root: Bytes32
    """The root of the block body."""


class HasStateRoot(Protocol):
    """Any header-shaped value exposing the state root proofs are checked against."""

    @property
    def state_root(self) -> bytes:
        """The 32-byte root of the state the header commits to."""
        ...
