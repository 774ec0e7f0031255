"""Merkle proofs over SSZ trees."""

from .gindex import GeneralizedIndex
from .proof import MerkleProof, compute_merkle_root, is_valid_merkle_branch
from .tree import build_merkle_tree, get_merkle_branch

__all__ = [
    "GeneralizedIndex",
    "MerkleProof",
    "build_merkle_tree",
    "compute_merkle_root",
    "get_merkle_branch",
    "is_valid_merkle_branch",
]
