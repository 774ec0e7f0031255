"""Containers binding signatures to a fork, a chain, and a signed object."""

from beacon_light.types import Bytes4, Bytes32, Container

Root = Bytes32
"""The 32-byte hash tree root of an object."""

Version = Bytes4
"""A 4-byte fork version."""

DomainType = Bytes4
"""A 4-byte signature domain type."""

Domain = Bytes32
"""A 32-byte signature domain: a domain type followed by 28 bytes of fork data root."""


class ForkData(Container):
    """The fork and chain a signature domain is scoped to."""

    current_version: Version
    """The version of the active fork."""

    genesis_validators_root: Root
    """The validators root at genesis, unique to each chain."""


class SigningData(Container):
    """The record validators actually sign: an object root mixed with its domain."""

    object_root: Root
    """The hash tree root of the signed object."""

    domain: Domain
    """The domain the signature is scoped to."""
