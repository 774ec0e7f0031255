"""
Chain and Consensus Configuration Specification

This file defines the time parameters, sync committee presets, and signature
domain types the light client primitives depend on.
"""

from typing_extensions import Final

from beacon_light.config import BEACON_PRESET
from beacon_light.types import Bytes4, StrictBaseModel, Uint64

# --- Time Parameters ---

SLOTS_PER_EPOCH: Final = Uint64(32)
"""The number of slots in one epoch."""

EPOCHS_PER_SYNC_COMMITTEE_PERIOD: Final = Uint64(256)
"""The number of epochs a sync committee serves before rotation."""

SLOTS_PER_SYNC_COMMITTEE_PERIOD: Final = SLOTS_PER_EPOCH * EPOCHS_PER_SYNC_COMMITTEE_PERIOD
"""The number of slots in one sync committee period (8192)."""

# --- Sync Committee Presets ---

MAINNET_SYNC_COMMITTEE_SIZE: Final = Uint64(512)
"""Members of a mainnet sync committee."""

MINIMAL_SYNC_COMMITTEE_SIZE: Final = Uint64(32)
"""Members of a minimal-preset sync committee."""

# --- Domain Types ---

DOMAIN_BEACON_PROPOSER: Final = Bytes4("0x00000000")
DOMAIN_BEACON_ATTESTER: Final = Bytes4("0x01000000")
DOMAIN_RANDAO: Final = Bytes4("0x02000000")
DOMAIN_DEPOSIT: Final = Bytes4("0x03000000")
DOMAIN_VOLUNTARY_EXIT: Final = Bytes4("0x04000000")
DOMAIN_SELECTION_PROOF: Final = Bytes4("0x05000000")
DOMAIN_AGGREGATE_AND_PROOF: Final = Bytes4("0x06000000")
DOMAIN_SYNC_COMMITTEE: Final = Bytes4("0x07000000")
"""The domain sync committee members sign block roots under."""


class _ChainConfig(StrictBaseModel):
    """
    A model holding the canonical, immutable configuration constants
    for the chain.
    """

    # Time Parameters
    slots_per_epoch: Uint64
    epochs_per_sync_committee_period: Uint64

    # Sync Committee Presets
    sync_committee_size: Uint64


MAINNET_CONFIG: Final = _ChainConfig(
    slots_per_epoch=SLOTS_PER_EPOCH,
    epochs_per_sync_committee_period=EPOCHS_PER_SYNC_COMMITTEE_PERIOD,
    sync_committee_size=MAINNET_SYNC_COMMITTEE_SIZE,
)

MINIMAL_CONFIG: Final = _ChainConfig(
    slots_per_epoch=SLOTS_PER_EPOCH,
    epochs_per_sync_committee_period=EPOCHS_PER_SYNC_COMMITTEE_PERIOD,
    sync_committee_size=MINIMAL_SYNC_COMMITTEE_SIZE,
)
"""
The minimal preset only shrinks the committee.

Slot and epoch arithmetic stays on mainnet values so periods are identical in both presets.
"""

ACTIVE_CONFIG: Final = MAINNET_CONFIG if BEACON_PRESET == "mainnet" else MINIMAL_CONFIG
"""The configuration selected by the `BEACON_PRESET` environment variable."""

SYNC_COMMITTEE_SIZE: Final = ACTIVE_CONFIG.sync_committee_size
"""Members of a sync committee under the active preset."""
