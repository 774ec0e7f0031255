"""
The container types consumed by the light client primitives.

All containers use SSZ encoding and SHA-256 merkleization.
"""

from .fork import Domain, DomainType, ForkData, Root, SigningData, Version
from .header import BeaconBlockHeader, HasStateRoot
from .slot import Epoch, Slot, SyncCommitteePeriod, ValidatorIndex
from .sync_committee import SyncCommittee, SyncCommitteePubkeys

__all__ = [
    "BeaconBlockHeader",
    "Domain",
    "DomainType",
    "Epoch",
    "ForkData",
    "HasStateRoot",
    "Root",
    "SigningData",
    "Slot",
    "SyncCommittee",
    "SyncCommitteePeriod",
    "SyncCommitteePubkeys",
    "ValidatorIndex",
    "Version",
]
