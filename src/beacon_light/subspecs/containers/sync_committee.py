"""Sync committee container."""

from beacon_light.subspecs.bls.containers import BLSPubkey
from beacon_light.subspecs.chain.config import SYNC_COMMITTEE_SIZE
from beacon_light.types import Container, SSZVector


class SyncCommitteePubkeys(SSZVector[BLSPubkey]):
    """The public keys of every member of a sync committee, in committee order."""

    ELEMENT_TYPE = BLSPubkey
    LENGTH = int(SYNC_COMMITTEE_SIZE)


class SyncCommittee(Container):
    """
    A snapshot of the committee signing headers during one period.

    Light clients receive the next committee with a Merkle branch proving it
    under an attested header's state root.
    """

    pubkeys: SyncCommitteePubkeys
    """Member public keys."""

    aggregate_pubkey: BLSPubkey
    """The aggregate of all member public keys."""
