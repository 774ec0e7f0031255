"""BLS12-381 key and signature containers."""

from beacon_light.types import Bytes48, Bytes96


class BLSPubkey(Bytes48):
    """A compressed G1 public key."""


class BLSSignature(Bytes96):
    """A compressed G2 signature, possibly an aggregate of several signatures."""
