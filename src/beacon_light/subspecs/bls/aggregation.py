"""
Sync committee aggregate signature verification.

Every participating sync committee member signs the same signing root, so the
committee's signatures collapse into one G2 point checked against the
participants' public keys with a single pairing (`FastAggregateVerify`).

Verification is split in two layers:

- `verify_aggregate` raises a typed error when its inputs are malformed and
  otherwise returns the outcome of the pairing check.
- `is_aggregate_valid` never raises; any failure is reported as `False`.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List

from py_ecc.bls import G2ProofOfPossession as bls
from py_ecc.bls.g2_primitives import signature_to_G2
from py_ecc.bls.typing import G2Uncompressed

from beacon_light.types import SSZError

from .containers import BLSPubkey, BLSSignature

logger = logging.getLogger(__name__)


class BlsError(RuntimeError):
    """Base exception for BLS verification helpers."""


class SignatureDecodeError(BlsError):
    """Raised when 96 bytes do not encode a point on the G2 curve."""


class EmptyParticipantsError(BlsError):
    """Raised when an aggregate is checked against no public keys at all."""


class AggregateVerificationError(BlsError):
    """Raised when the pairing check itself fails to run."""


def decode_signature(signature: Any) -> G2Uncompressed:
    """
    Decompress a 96-byte signature into a G2 point.

    Raises:
        MalformedInputError: If `signature` is not exactly 96 bytes.
        SignatureDecodeError: If the bytes are not a valid compressed G2 point.
    """
    sig = BLSSignature(signature)
    try:
        return signature_to_G2(sig)
    except Exception as exc:
        raise SignatureDecodeError(f"Invalid signature encoding: {exc}") from exc


def verify_aggregate(
    signature: Any,
    message: bytes,
    public_keys: Iterable[Any],
) -> bool:
    """
    Check an aggregate signature over `message` by every key in `public_keys`.

    Args:
        signature: The 96-byte compressed aggregate signature.
        message: The message every signer signed, typically a signing root.
        public_keys: The 48-byte public keys of the participants, in committee order.

    Returns:
        The outcome of the pairing check.

    Raises:
        MalformedInputError: If the signature or a public key has the wrong length.
        SignatureDecodeError: If the signature is not a valid G2 point.
        EmptyParticipantsError: If `public_keys` is empty.
        AggregateVerificationError: If the message is not bytes, the public keys cannot
            be read, or the pairing check cannot run on these inputs.
    """
    sig = BLSSignature(signature)
    # Decoded only for the typed error; FastAggregateVerify decodes again.
    decode_signature(sig)

    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise AggregateVerificationError(f"Message must be bytes, got {type(message).__name__}")

    try:
        pubkeys: List[BLSPubkey] = [BLSPubkey(pk) for pk in public_keys]
    except SSZError:
        raise
    except Exception as exc:
        raise AggregateVerificationError(f"Public keys could not be read: {exc!r}") from exc
    if not pubkeys:
        raise EmptyParticipantsError("Cannot verify an aggregate without participants")

    try:
        return bls.FastAggregateVerify(pubkeys, bytes(message), sig)
    except Exception as exc:
        raise AggregateVerificationError(f"Aggregate verification failed: {exc}") from exc


def is_aggregate_valid(
    signature: Any,
    message: bytes,
    public_keys: Iterable[Any],
) -> bool:
    """
    Return True only when `signature` is a valid aggregate over `message` by `public_keys`.

    Malformed signatures, malformed keys, and empty key sets all yield False.
    """
    try:
        return verify_aggregate(signature, message, public_keys)
    except (SSZError, BlsError) as exc:
        logger.debug("Rejected aggregate signature: %s", exc)
        return False
    except Exception as exc:
        logger.debug("Rejected aggregate signature with unusable inputs: %r", exc)
        return False
