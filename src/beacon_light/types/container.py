"""
SSZ Container Type: Ordered heterogeneous collections with named fields.

Containers are the primary way to define structured records such as block
headers, fork data, and signing data. Every container used by the light client
is made of fixed-size fields, so the serialized form is the field encodings
concatenated in declaration order.
"""

from __future__ import annotations

from typing import IO, Type, cast

from typing_extensions import Self

from .base import StrictBaseModel
from .byte_arrays import Bytes32
from .exceptions import SSZDecodeError, SSZTypeDefinitionError
from .ssz_base import SSZType


class Container(StrictBaseModel, SSZType):
    """
    SSZ Container: A strict, ordered collection of heterogeneous named fields.

    Example:
        >>> class ForkData(Container):
        ...     current_version: Version
        ...     genesis_validators_root: Root

    Serialization format:
        [field_1][field_2]...[field_n]
    """

    @classmethod
    def _field_types(cls) -> list[tuple[str, Type[SSZType]]]:
        """Return `(name, type)` pairs in declaration order."""
        return [
            (name, cast(Type[SSZType], field.annotation))
            for name, field in cls.model_fields.items()
        ]

    @classmethod
    def is_fixed_size(cls) -> bool:
        """A container is fixed-size when all of its fields are."""
        return all(field_type.is_fixed_size() for _, field_type in cls._field_types())

    @classmethod
    def get_byte_length(cls) -> int:
        """
        Total byte length of all fields summed together.

        Raises:
            SSZTypeDefinitionError: If a field is variable-size.
        """
        if not cls.is_fixed_size():
            raise SSZTypeDefinitionError(cls.__name__, detail="variable-size containers")
        return sum(field_type.get_byte_length() for _, field_type in cls._field_types())

    def serialize(self, stream: IO[bytes]) -> int:
        """Write every field in definition order and return the byte count."""
        written = 0
        for field_name, _ in type(self)._field_types():
            value = cast(SSZType, getattr(self, field_name))
            written += value.serialize(stream)
        return written

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Read every field in definition order.

        Raises:
            SSZDecodeError: If `scope` does not match the container length or the stream is short.
        """
        expected = cls.get_byte_length()
        if scope != expected:
            raise SSZDecodeError(cls.__name__, f"expected {expected} bytes, got {scope}")

        fields = {}
        offset = 0
        for field_name, field_type in cls._field_types():
            size = field_type.get_byte_length()
            data = stream.read(size)
            if len(data) != size:
                raise SSZDecodeError(
                    cls.__name__, f"unexpected EOF reading {field_name}", offset=offset
                )
            fields[field_name] = field_type.decode_bytes(data)
            offset += size

        return cls(**fields)

    def hash_tree_root(self) -> Bytes32:
        """Return the SSZ hash tree root of this container."""
        from beacon_light.subspecs.ssz.hash import hash_tree_root

        return hash_tree_root(self)
