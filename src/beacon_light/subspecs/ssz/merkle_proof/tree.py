"""Merkle tree building logic."""

from typing import List, Sequence

from beacon_light.types import ZERO_HASH
from beacon_light.types.byte_arrays import Bytes32

from ..utils import get_power_of_two_ceil, hash_nodes
from .gindex import GeneralizedIndex


def build_merkle_tree(leaves: Sequence[Bytes32]) -> List[Bytes32]:
    r"""
    Builds a full Merkle tree and returns it as a flat list.

    The tree is represented as a list where the node at a generalized
    index `i` is located at `tree[i]`. The 0-index is a placeholder.
    """
    if not leaves:
        # A tree of an empty list is a single ZERO_HASH, behind the placeholder.
        return [ZERO_HASH] * 2

    # The bottom layer must be a power of two.
    bottom_layer_size = get_power_of_two_ceil(len(leaves))
    padded_leaves = list(leaves) + [ZERO_HASH] * (bottom_layer_size - len(leaves))

    # The first half of the list stores the parent nodes.
    tree = [ZERO_HASH] * bottom_layer_size + padded_leaves

    # A parent at index `i` is the hash of its two children at `2*i` and `2*i+1`.
    for i in range(bottom_layer_size - 1, 0, -1):
        tree[i] = hash_nodes(tree[i * 2], tree[i * 2 + 1])

    return tree


def get_merkle_branch(tree: Sequence[Bytes32], leaf_index: int) -> List[Bytes32]:
    """
    Extract the sibling branch of a bottom-layer leaf from a flat tree.

    Args:
        tree: A tree produced by `build_merkle_tree`.
        leaf_index: Position of the leaf in the bottom layer.

    Returns:
        The sibling nodes, leaf level first.

    Raises:
        ValueError: If `leaf_index` is outside the bottom layer.
    """
    bottom_layer_size = len(tree) // 2
    depth = bottom_layer_size.bit_length() - 1
    gindex = GeneralizedIndex.from_position(depth, leaf_index)
    return [tree[node.value] for node in gindex.get_branch_indices()]
