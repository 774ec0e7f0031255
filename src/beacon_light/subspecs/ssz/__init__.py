"""SSZ (Simple Serialize) Merkleization and proofs."""

from .hash import Merkleized, hash_tree_root, merkleize_object
from .node import Node, branch_to_nodes, bytes32_to_node

__all__ = [
    "Merkleized",
    "Node",
    "branch_to_nodes",
    "bytes32_to_node",
    "hash_tree_root",
    "merkleize_object",
]
