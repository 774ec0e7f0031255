"""
Merkle inclusion proofs against a header's state root.

A light client learns about state (the next sync committee, the finalized
checkpoint, ...) from untrusted peers together with a Merkle branch. The
branch proves that the object's hash tree root sits at a known position of the
state tree whose root the attested header commits to.

The verifier is fail-closed: `is_proof_valid` never raises, and "cannot be
checked" is reported exactly like "does not match". `check_proof` keeps the
typed failures for callers and tests that need to tell them apart.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from beacon_light.subspecs.containers.header import HasStateRoot
from beacon_light.subspecs.ssz.hash import merkleize_object
from beacon_light.subspecs.ssz.merkle_proof.proof import compute_merkle_root
from beacon_light.subspecs.ssz.node import branch_to_nodes, bytes32_to_node
from beacon_light.types import SSZError

logger = logging.getLogger(__name__)


def check_proof(
    header: HasStateRoot,
    leaf_object: object,
    branch: Sequence[Any],
    depth: int,
    index: int,
) -> bool:
    """
    Recompute the state root above `leaf_object` and compare it with the header's.

    Args:
        header: Any value exposing the 32-byte `state_root` to verify against.
        leaf_object: Any value `hash_tree_root` accepts.
        branch: Sibling nodes, leaf level first.
        depth: The depth of the leaf below the state root.
        index: The position of the leaf among the nodes at that depth.

    Returns:
        Whether the recomputed root equals the header's state root.

    Raises:
        HashingFailureError: If the leaf object cannot be merkleized.
        MalformedNodeError: If the state root or a branch element is not 32 bytes.
        InvalidBranchError: If the branch length or index does not fit `depth`.
    """
    leaf = merkleize_object(leaf_object)
    state_root = bytes32_to_node(header.state_root)
    nodes = branch_to_nodes(branch)

    return compute_merkle_root(leaf, nodes, depth, index) == state_root


def is_proof_valid(
    header: HasStateRoot,
    leaf_object: object,
    branch: Sequence[Any],
    depth: int,
    index: int,
) -> bool:
    """
    Return True only when `branch` proves `leaf_object` under `header.state_root`.

    Every failure, whether a malformed input or a root mismatch, yields False.
    """
    try:
        return check_proof(header, leaf_object, branch, depth, index)
    except SSZError as exc:
        logger.debug("Rejected Merkle proof at depth %s, index %s: %s", depth, index, exc)
        return False
    except Exception as exc:
        logger.debug("Rejected Merkle proof with unusable inputs: %r", exc)
        return False
