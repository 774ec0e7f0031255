"""
Mapping of slots to epochs and sync committee periods.

A sync committee serves for `EPOCHS_PER_SYNC_COMMITTEE_PERIOD` epochs. Rotation
logic uses the period of a slot to pick the committee whose public keys are the
right ones to verify a header's signature against.
"""

from __future__ import annotations

from typing import SupportsInt

from beacon_light.subspecs.containers.slot import Epoch, Slot, SyncCommitteePeriod

from .config import EPOCHS_PER_SYNC_COMMITTEE_PERIOD, SLOTS_PER_EPOCH


def compute_epoch_at_slot(slot: SupportsInt) -> Epoch:
    """Return the epoch `slot` belongs to."""
    return Epoch(Slot(slot) // SLOTS_PER_EPOCH)


def calc_sync_period(slot: SupportsInt) -> SyncCommitteePeriod:
    """
    Return the sync committee period `slot` belongs to.

    The period is `floor(floor(slot / 32) / 256)`; every slot including 0 is valid.

    Raises:
        OverflowError: If `slot` does not fit in 64 unsigned bits.
    """
    epoch = compute_epoch_at_slot(slot)
    return SyncCommitteePeriod(epoch // EPOCHS_PER_SYNC_COMMITTEE_PERIOD)


def compute_start_slot_at_period(period: SupportsInt) -> Slot:
    """
    Return the first slot of sync committee `period`.

    Raises:
        OverflowError: If the start slot does not fit in 64 unsigned bits.
    """
    start_epoch = SyncCommitteePeriod(period) * EPOCHS_PER_SYNC_COMMITTEE_PERIOD
    return Slot(start_epoch * SLOTS_PER_EPOCH)
