"""Tests for sync committee aggregate signature verification."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List

import pytest
from py_ecc.bls import G2ProofOfPossession as bls

from beacon_light.subspecs.bls import (
    AggregateVerificationError,
    BLSPubkey,
    BLSSignature,
    EmptyParticipantsError,
    SignatureDecodeError,
    decode_signature,
    is_aggregate_valid,
    verify_aggregate,
)
from beacon_light.subspecs.chain.config import DOMAIN_SYNC_COMMITTEE
from beacon_light.subspecs.light_client import compute_domain, compute_signing_root
from beacon_light.types import MalformedInputError

SECRET_KEYS = [11, 22, 33]
G2_POINT_AT_INFINITY = b"\xc0" + b"\x00" * 95


@pytest.fixture(scope="module")
def signed() -> Dict[str, Any]:
    """Three committee members signing the same signing root."""
    domain = compute_domain(DOMAIN_SYNC_COMMITTEE, b"\x01\x00\x00\x00", b"\x00" * 32)
    message = compute_signing_root(b"\x42" * 32, domain)
    pubkeys = [bls.SkToPk(sk) for sk in SECRET_KEYS]
    signature = bls.Aggregate([bls.Sign(sk, bytes(message)) for sk in SECRET_KEYS])
    return {"message": bytes(message), "pubkeys": pubkeys, "signature": signature}


def flip_bit(value: bytes, byte: int, bit: int) -> bytes:
    mutable = bytearray(value)
    mutable[byte] ^= 1 << bit
    return bytes(mutable)


class TestValidAggregate:
    def test_all_signers(self, signed: Dict[str, Any]) -> None:
        assert is_aggregate_valid(signed["signature"], signed["message"], signed["pubkeys"])

    def test_inner_layer_agrees(self, signed: Dict[str, Any]) -> None:
        result = verify_aggregate(
            BLSSignature(signed["signature"]),
            signed["message"],
            [BLSPubkey(pk) for pk in signed["pubkeys"]],
        )
        assert result is True

    def test_single_signer(self) -> None:
        message = b"\x07" * 32
        pubkey = bls.SkToPk(5)
        signature = bls.Sign(5, message)
        assert is_aggregate_valid(signature, message, [pubkey]) is True


class TestRejectedAggregate:
    def test_wrong_message(self, signed: Dict[str, Any]) -> None:
        message = flip_bit(signed["message"], 0, 0)
        assert is_aggregate_valid(signed["signature"], message, signed["pubkeys"]) is False

    def test_missing_signer(self, signed: Dict[str, Any]) -> None:
        pubkeys: List[bytes] = signed["pubkeys"][:2]
        assert is_aggregate_valid(signed["signature"], signed["message"], pubkeys) is False

    def test_extra_participant(self, signed: Dict[str, Any]) -> None:
        pubkeys: List[bytes] = signed["pubkeys"] + [bls.SkToPk(44)]
        assert is_aggregate_valid(signed["signature"], signed["message"], pubkeys) is False

    def test_bit_flipped_signature(self, signed: Dict[str, Any]) -> None:
        signature = flip_bit(signed["signature"], 95, 0)
        assert is_aggregate_valid(signature, signed["message"], signed["pubkeys"]) is False

    def test_point_at_infinity(self, signed: Dict[str, Any]) -> None:
        assert (
            is_aggregate_valid(G2_POINT_AT_INFINITY, signed["message"], signed["pubkeys"])
            is False
        )


class TestMalformedInputs:
    def test_empty_participants(self, signed: Dict[str, Any]) -> None:
        assert is_aggregate_valid(signed["signature"], signed["message"], []) is False
        with pytest.raises(EmptyParticipantsError):
            verify_aggregate(signed["signature"], signed["message"], [])

    @pytest.mark.parametrize("length", [0, 95, 97])
    def test_wrong_signature_length(self, signed: Dict[str, Any], length: int) -> None:
        signature = (signed["signature"] * 2)[:length]
        assert is_aggregate_valid(signature, signed["message"], signed["pubkeys"]) is False
        with pytest.raises(MalformedInputError):
            verify_aggregate(signature, signed["message"], signed["pubkeys"])

    @pytest.mark.parametrize("length", [47, 49])
    def test_wrong_pubkey_length(self, signed: Dict[str, Any], length: int) -> None:
        pubkeys = list(signed["pubkeys"])
        pubkeys[1] = (pubkeys[1] * 2)[:length]
        assert is_aggregate_valid(signed["signature"], signed["message"], pubkeys) is False
        with pytest.raises(MalformedInputError):
            verify_aggregate(signed["signature"], signed["message"], pubkeys)

    def test_pubkey_not_on_curve(self, signed: Dict[str, Any]) -> None:
        pubkeys = list(signed["pubkeys"])
        pubkeys[0] = b"\x00" * 48
        assert is_aggregate_valid(signed["signature"], signed["message"], pubkeys) is False

    def test_signature_not_a_point(self, signed: Dict[str, Any]) -> None:
        signature = b"\x00" * 96
        assert is_aggregate_valid(signature, signed["message"], signed["pubkeys"]) is False
        with pytest.raises(SignatureDecodeError):
            verify_aggregate(signature, signed["message"], signed["pubkeys"])

    @pytest.mark.parametrize("message", ["signing root", None, 42])
    def test_message_not_bytes(self, signed: Dict[str, Any], message: Any) -> None:
        assert is_aggregate_valid(signed["signature"], message, signed["pubkeys"]) is False
        with pytest.raises(AggregateVerificationError):
            verify_aggregate(signed["signature"], message, signed["pubkeys"])

    def test_public_keys_not_iterable(self, signed: Dict[str, Any]) -> None:
        assert is_aggregate_valid(signed["signature"], signed["message"], 7) is False
        with pytest.raises(AggregateVerificationError):
            verify_aggregate(signed["signature"], signed["message"], 7)

    def test_public_keys_failing_mid_iteration(self, signed: Dict[str, Any]) -> None:
        def keys() -> Iterator[bytes]:
            yield signed["pubkeys"][0]
            raise ValueError("peer sent garbage")

        assert is_aggregate_valid(signed["signature"], signed["message"], keys()) is False
        with pytest.raises(AggregateVerificationError) as exc_info:
            verify_aggregate(signed["signature"], signed["message"], keys())
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_public_key_that_cannot_be_read(self, signed: Dict[str, Any]) -> None:
        class UnreadableKey:
            def __iter__(self) -> Iterator[int]:
                raise RuntimeError("key storage unavailable")

        pubkeys = [signed["pubkeys"][0], UnreadableKey()]
        assert is_aggregate_valid(signed["signature"], signed["message"], pubkeys) is False

    def test_rejection_is_logged(
        self, signed: Dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="beacon_light.subspecs.bls.aggregation"):
            assert is_aggregate_valid(signed["signature"], signed["message"], []) is False
        assert "Rejected aggregate signature" in caplog.text


class TestDecodeSignature:
    def test_decodes_valid_signature(self, signed: Dict[str, Any]) -> None:
        point = decode_signature(signed["signature"])
        assert len(point) == 3

    def test_rejects_invalid_encoding(self) -> None:
        with pytest.raises(SignatureDecodeError):
            decode_signature(b"\x00" * 96)

    def test_rejects_wrong_length(self) -> None:
        with pytest.raises(MalformedInputError):
            decode_signature(b"\xc0" * 10)
