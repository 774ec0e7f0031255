"""Slot, epoch, and sync committee period numbers."""

from __future__ import annotations

from beacon_light.types import Uint64


class Slot(Uint64):
    """Represents a slot number as a 64-bit unsigned integer."""


class Epoch(Uint64):
    """Represents an epoch number; one epoch spans `SLOTS_PER_EPOCH` slots."""


class SyncCommitteePeriod(Uint64):
    """Represents the index of the sync committee period a slot belongs to."""


class ValidatorIndex(Uint64):
    """Represents a validator's position in the registry."""
