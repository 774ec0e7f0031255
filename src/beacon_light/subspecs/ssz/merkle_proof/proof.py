"""Single-leaf Merkle proofs for SSZ."""

from __future__ import annotations

import operator
from typing import Sequence

from pydantic import Field

from beacon_light.types import InvalidBranchError, StrictBaseModel
from beacon_light.types.byte_arrays import Bytes32

from ..utils import hash_nodes
from .gindex import GeneralizedIndex

Root = Bytes32
"""The type of a Merkle tree root."""
ProofHashes = Sequence[Bytes32]
"""The type of a Merkle proof's sibling nodes."""


class MerkleProof(StrictBaseModel):
    """
    A leaf, its generalized index, and the sibling nodes proving it under a root.

    This object is immutable; once created, its contents cannot be changed.
    """

    leaf: Bytes32 = Field(..., description="The leaf being proven.")

    index: GeneralizedIndex = Field(..., description="The generalized index of the leaf.")

    proof_hashes: ProofHashes = Field(..., description="The sibling nodes, leaf level first.")

    def calculate_root(self) -> Root:
        """
        Calculates the Merkle root from the leaf and its sibling nodes.

        At level `i` the bit `i` of the index tells on which side the running
        hash sits: 0 means it is the left child, 1 means it is the right child.

        Raises:
            InvalidBranchError: If the number of siblings differs from the index depth.
        """
        depth = self.index.depth
        if len(self.proof_hashes) != depth:
            raise InvalidBranchError(
                "Proof length must match the depth of the index",
                depth=depth,
                index=self.index.index_at_depth,
                branch_length=len(self.proof_hashes),
            )

        root = self.leaf
        for i, branch_node in enumerate(self.proof_hashes):
            if self.index.get_bit(i):
                root = hash_nodes(branch_node, root)
            else:
                root = hash_nodes(root, branch_node)
        return root

    def verify(self, root: Root) -> bool:
        """Verifies the Merkle proof against a known root."""
        try:
            return self.calculate_root() == root
        except InvalidBranchError:
            return False


def compute_merkle_root(
    leaf: Bytes32,
    branch: ProofHashes,
    depth: int,
    index: int,
) -> Root:
    """
    Recompute the root above `leaf` sitting at position `index` of a depth-`depth` subtree.

    Raises:
        InvalidBranchError: If `depth` or `index` is not an integer, `index` does not
            fit in `depth` bits, or the branch length differs from `depth`.
    """
    try:
        depth, index = operator.index(depth), operator.index(index)
    except TypeError as exc:
        raise InvalidBranchError(
            f"Depth and index must be integers: {exc}",
            depth=depth,
            index=index,
            branch_length=len(branch),
        ) from exc

    if depth < 0 or len(branch) != depth:
        raise InvalidBranchError(
            "Branch length must equal the claimed depth",
            depth=depth,
            index=index,
            branch_length=len(branch),
        )
    # `index >> depth` avoids materializing 2**depth for hostile depths.
    if index < 0 or index >> depth != 0:
        raise InvalidBranchError(
            "Index does not fit in the claimed depth",
            depth=depth,
            index=index,
            branch_length=len(branch),
        )

    proof = MerkleProof(
        leaf=leaf,
        index=GeneralizedIndex.from_position(depth, index),
        proof_hashes=list(branch),
    )
    return proof.calculate_root()


def is_valid_merkle_branch(
    leaf: Bytes32,
    branch: ProofHashes,
    depth: int,
    index: int,
    root: Root,
) -> bool:
    """Check that `branch` proves `leaf` at (`depth`, `index`) under `root`."""
    try:
        return compute_merkle_root(leaf, branch, depth, index) == root
    except InvalidBranchError:
        return False
