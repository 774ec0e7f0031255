"""Tests for reinterpreting raw values as Merkle nodes."""

from typing import Any

import pytest

from beacon_light.subspecs.ssz import Node, branch_to_nodes, bytes32_to_node
from beacon_light.types import Bytes32, MalformedInputError, MalformedNodeError


def test_bytes32_is_returned_unchanged() -> None:
    value = Bytes32(b"\x42" * 32)
    assert bytes32_to_node(value) is value


@pytest.mark.parametrize(
    "value",
    [b"\x42" * 32, bytearray(b"\x42" * 32), "0x" + "42" * 32, list(b"\x42" * 32)],
)
def test_accepts_any_32_byte_input(value: Any) -> None:
    node = bytes32_to_node(value)
    assert isinstance(node, Node)
    assert node == b"\x42" * 32


@pytest.mark.parametrize("length", [0, 1, 31, 33, 64])
def test_wrong_length_raises(length: int) -> None:
    with pytest.raises(MalformedNodeError) as exc_info:
        bytes32_to_node(b"\x00" * length)
    assert exc_info.value.expected == 32
    assert exc_info.value.actual == length


@pytest.mark.parametrize("value", [None, 7, "0xnothex"])
def test_non_bytes_raises(value: Any) -> None:
    with pytest.raises(MalformedNodeError) as exc_info:
        bytes32_to_node(value)
    assert exc_info.value.actual is None


def test_malformed_node_is_a_malformed_input() -> None:
    with pytest.raises(MalformedInputError):
        bytes32_to_node(b"\x00")


def test_branch_to_nodes_preserves_order() -> None:
    branch = [bytes([i]) * 32 for i in range(5)]
    nodes = branch_to_nodes(branch)
    assert nodes == branch
    assert all(isinstance(node, Bytes32) for node in nodes)


def test_branch_to_nodes_accepts_any_iterable() -> None:
    nodes = branch_to_nodes(bytes([i]) * 32 for i in range(3))
    assert len(nodes) == 3


def test_empty_branch() -> None:
    assert branch_to_nodes([]) == []


def test_branch_with_one_bad_element_raises() -> None:
    branch = [b"\x00" * 32, b"\x01" * 31, b"\x02" * 32]
    with pytest.raises(MalformedNodeError) as exc_info:
        branch_to_nodes(branch)
    assert exc_info.value.actual == 31
