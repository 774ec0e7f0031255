"""
Signature domains and signing roots.

Validators never sign an object root directly. They sign the root of a
`SigningData` record that mixes the object root with a domain. The domain
carries a domain type and a truncated fork data root, so a signature made on
one fork or chain never verifies on another.

These are computations, not verification gates: a malformed input raises
instead of collapsing to a boolean, so callers can tell "the message could
not be formed" apart from "the signature over the message is invalid".
"""

from __future__ import annotations

from typing import Any

from beacon_light.subspecs.containers.fork import (
    Domain,
    DomainType,
    ForkData,
    Root,
    SigningData,
    Version,
)
from beacon_light.subspecs.ssz.hash import merkleize_object

FORK_DATA_ROOT_PREFIX_LENGTH = 28
"""The number of fork data root bytes kept in a domain, after the 4-byte domain type."""


def compute_fork_data_root(current_version: Any, genesis_validators_root: Any) -> Root:
    """
    Return the hash tree root of `ForkData(current_version, genesis_validators_root)`.

    Raises:
        MalformedInputError: If the version is not 4 bytes or the root is not 32 bytes.
        HashingFailureError: If the record cannot be merkleized.
    """
    fork_data = ForkData(
        current_version=Version(current_version),
        genesis_validators_root=Root(genesis_validators_root),
    )
    return merkleize_object(fork_data)


def compute_domain(domain_type: Any, fork_version: Any, genesis_validators_root: Any) -> Domain:
    """
    Return `domain_type || fork_data_root[:28]`.

    Raises:
        MalformedInputError: If any input has the wrong byte length.
        HashingFailureError: If the fork data cannot be merkleized.
    """
    fork_data_root = compute_fork_data_root(fork_version, genesis_validators_root)
    return Domain(DomainType(domain_type) + fork_data_root[:FORK_DATA_ROOT_PREFIX_LENGTH])


def compute_signing_root(object_root: Any, domain: Any) -> Root:
    """
    Return the hash tree root of `SigningData(object_root, domain)`.

    This is the exact message a sync committee signs for a header whose root is `object_root`.

    Raises:
        MalformedInputError: If either input is not 32 bytes.
        HashingFailureError: If the record cannot be merkleized.
    """
    signing_data = SigningData(object_root=Root(object_root), domain=Domain(domain))
    return merkleize_object(signing_data)
