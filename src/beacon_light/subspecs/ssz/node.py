"""
Canonicalization of raw 32-byte values into Merkle nodes.

A node is the 32-byte value a Merkle tree is built from. Turning a root or a
branch element into a node performs no computation; it only checks that the
value is exactly 32 bytes.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from beacon_light.types.byte_arrays import Bytes32
from beacon_light.types.exceptions import MalformedInputError, MalformedNodeError

Node = Bytes32
"""The type of a node in a Merkle tree."""


def bytes32_to_node(value: Any) -> Node:
    """
    Reinterpret a 32-byte value as a Merkle node.

    Raises:
        MalformedNodeError: If `value` is not exactly 32 bytes.
    """
    if isinstance(value, Bytes32):
        return value
    try:
        return Node(value)
    except MalformedInputError as exc:
        raise MalformedNodeError("Node", expected=exc.expected, actual=exc.actual) from exc


def branch_to_nodes(branch: Iterable[Any]) -> List[Node]:
    """
    Reinterpret every element of a branch as a Merkle node, preserving order.

    Raises:
        MalformedNodeError: If any element is not exactly 32 bytes.
    """
    return [bytes32_to_node(value) for value in branch]
