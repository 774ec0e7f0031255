"""Generalized Index implementation."""

from __future__ import annotations

from typing import List

from pydantic import Field

from beacon_light.types import StrictBaseModel


class GeneralizedIndex(StrictBaseModel):
    """
    Represents a Generalized Merkle Tree Index.

    The root is 1, and the children of node `i` are `2i` and `2i + 1`. A leaf at
    position `index` of a subtree of depth `depth` has generalized index
    `2**depth + index`.
    """

    value: int = Field(..., gt=0, description="The index value, must be a positive integer.")

    @classmethod
    def from_position(cls, depth: int, index: int) -> GeneralizedIndex:
        """
        Build the generalized index of leaf `index` in a tree of `depth` levels.

        Raises:
            ValueError: If `depth` is negative or `index` does not fit in `depth` bits.
        """
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        if not (0 <= index < 2**depth):
            raise ValueError(f"index {index} does not fit in a tree of depth {depth}")
        return cls(value=2**depth + index)

    @property
    def depth(self) -> int:
        """The depth of the node in the tree."""
        return self.value.bit_length() - 1

    @property
    def index_at_depth(self) -> int:
        """The position of the node among the nodes of its depth."""
        return self.value - 2**self.depth

    def get_bit(self, position: int) -> bool:
        """Returns the bit at a specific position (from the right)."""
        return (self.value >> position) & 1 == 1

    @property
    def sibling(self) -> GeneralizedIndex:
        """Returns the index of the sibling node."""
        if self.value <= 1:
            raise ValueError("Root node has no sibling.")
        return type(self)(value=self.value ^ 1)

    @property
    def parent(self) -> GeneralizedIndex:
        """Returns the index of the parent node."""
        if self.value <= 1:
            raise ValueError("Root node has no parent.")
        return type(self)(value=self.value // 2)

    def get_branch_indices(self) -> List[GeneralizedIndex]:
        """Gets the indices of the sibling nodes along the path to the root, leaf first."""
        indices: List[GeneralizedIndex] = []
        node = self
        while node.value > 1:
            indices.append(node.sibling)
            node = node.parent
        return indices

    def get_path_indices(self) -> List[GeneralizedIndex]:
        """Gets the indices of the nodes along the path to the root."""
        indices: List[GeneralizedIndex] = [self]
        while indices[-1].value > 1:
            indices.append(indices[-1].parent)
        return indices[:-1]
