"""Specifications for chain and consensus parameters."""

from .config import ACTIVE_CONFIG, MAINNET_CONFIG, MINIMAL_CONFIG, SYNC_COMMITTEE_SIZE
from .period import calc_sync_period, compute_epoch_at_slot, compute_start_slot_at_period

__all__ = [
    "ACTIVE_CONFIG",
    "MAINNET_CONFIG",
    "MINIMAL_CONFIG",
    "SYNC_COMMITTEE_SIZE",
    "calc_sync_period",
    "compute_epoch_at_slot",
    "compute_start_slot_at_period",
]
