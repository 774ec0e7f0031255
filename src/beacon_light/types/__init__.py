"""Reusable type definitions for the beacon light client primitives."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import ZERO_HASH, BaseBytes, Bytes4, Bytes32, Bytes48, Bytes96
from .collections import SSZVector
from .container import Container
from .exceptions import (
    HashingFailureError,
    InvalidBranchError,
    MalformedInputError,
    MalformedNodeError,
    SSZDecodeError,
    SSZError,
    SSZSerializationError,
    SSZTypeError,
    SSZValueError,
)
from .hex import bytes_to_hex_string, hex_str_to_bytes, u64_to_hex_string
from .ssz_base import SSZType
from .uint import BaseUint, Uint64

__all__ = [
    # Core types
    "Uint64",
    "BaseUint",
    "BaseBytes",
    "Bytes4",
    "Bytes32",
    "Bytes48",
    "Bytes96",
    "ZERO_HASH",
    "CamelModel",
    "StrictBaseModel",
    "SSZVector",
    "SSZType",
    "Container",
    # Hex boundary encoding
    "hex_str_to_bytes",
    "bytes_to_hex_string",
    "u64_to_hex_string",
    # Exceptions
    "SSZError",
    "SSZTypeError",
    "SSZValueError",
    "SSZSerializationError",
    "SSZDecodeError",
    "MalformedInputError",
    "MalformedNodeError",
    "InvalidBranchError",
    "HashingFailureError",
]
