"""BLS12-381 signature verification for sync committee attestations."""

from .aggregation import (
    AggregateVerificationError,
    BlsError,
    EmptyParticipantsError,
    SignatureDecodeError,
    decode_signature,
    is_aggregate_valid,
    verify_aggregate,
)
from .containers import BLSPubkey, BLSSignature

__all__ = [
    "AggregateVerificationError",
    "BLSPubkey",
    "BLSSignature",
    "BlsError",
    "EmptyParticipantsError",
    "SignatureDecodeError",
    "decode_signature",
    "is_aggregate_valid",
    "verify_aggregate",
]
