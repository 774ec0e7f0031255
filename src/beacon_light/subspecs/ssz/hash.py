"""
SSZ Merkleization entry point (`hash_tree_root`).

This module exposes:
- A `hash_tree_root(value: object) -> Bytes32` singledispatch function.
- The `Merkleized` protocol for foreign objects that compute their own root.
- `merkleize_object`, which reports any failure as `HashingFailureError`.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Protocol, Type, runtime_checkable

from beacon_light.types.byte_arrays import Bytes32
from beacon_light.types.collections import SSZVector
from beacon_light.types.constants import BYTES_PER_CHUNK
from beacon_light.types.container import Container
from beacon_light.types.exceptions import HashingFailureError
from beacon_light.types.uint import BaseUint

from .merkleization import Merkle
from .pack import Packer


@runtime_checkable
class Merkleized(Protocol):
    """Any value that can reduce itself to a single 32-byte root."""

    def hash_tree_root(self) -> bytes:
        """Return the 32-byte hash tree root of the value."""
        ...


@singledispatch
def hash_tree_root(value: object) -> Bytes32:
    """
    Compute `hash_tree_root(value)` for SSZ values.

    Concrete specializations are registered below with `@hash_tree_root.register`.
    Unregistered values are accepted when they implement `Merkleized`.

    Raises:
        TypeError: If `value` has no registered specialization.
    """
    if isinstance(value, Merkleized):
        return Bytes32(value.hash_tree_root())
    raise TypeError(f"hash_tree_root: unsupported value type {type(value).__name__}")


@hash_tree_root.register
def _htr_uint(value: BaseUint) -> Bytes32:
    """Basic scalars merkleize as `merkleize(pack(bytes))`."""
    return Merkle.merkleize(Packer.pack_bytes(value.encode_bytes()))


@hash_tree_root.register
def _htr_bytes(value: bytes) -> Bytes32:
    """Raw bytes and every fixed-size byte type merkleize like ByteVector[N]."""
    return Merkle.merkleize(Packer.pack_bytes(bytes(value)))


@hash_tree_root.register
def _htr_vector(value: SSZVector) -> Bytes32:
    elem_t: Type[object] = type(value).ELEMENT_TYPE
    length: int = type(value).LENGTH

    # BASIC elements (uint): pack serialized bytes
    if issubclass(elem_t, BaseUint):
        concat = b"".join(e.encode_bytes() for e in value)
        limit_chunks = (length * elem_t.get_byte_length() + BYTES_PER_CHUNK - 1) // BYTES_PER_CHUNK
        return Merkle.merkleize(Packer.pack_bytes(concat), limit=limit_chunks)

    # COMPOSITE elements: merkleize child roots with limit = length
    leaves = [hash_tree_root(e) for e in value]
    return Merkle.merkleize(leaves, limit=length)


@hash_tree_root.register
def _htr_container(value: Container) -> Bytes32:
    # Preserve declared field order from the Pydantic model.
    leaves = [hash_tree_root(getattr(value, fname)) for fname in type(value).model_fields.keys()]
    return Merkle.merkleize(leaves)


def merkleize_object(value: object) -> Bytes32:
    """
    Compute the hash tree root of `value`, reporting failures uniformly.

    Raises:
        HashingFailureError: If `value` is unsupported or its root cannot be computed.
    """
    try:
        return hash_tree_root(value)
    except Exception as exc:
        raise HashingFailureError(type(value).__name__, str(exc)) from exc
