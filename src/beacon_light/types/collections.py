"""Vector Type Specification."""

from __future__ import annotations

from typing import IO, Any, ClassVar, Generic, Sequence, Type, TypeVar, cast

from pydantic import Field, field_validator
from typing_extensions import Self

from .exceptions import SSZDecodeError, SSZTypeDefinitionError, SSZValueError
from .ssz_base import SSZModel, SSZType

T = TypeVar("T", bound=SSZType)
"""
Generic type parameter for SSZ collection elements.

Bound to `SSZType` so that type checkers infer element types on access:

    class Pubkeys(SSZVector[BLSPubkey]):
        ELEMENT_TYPE = BLSPubkey
        LENGTH = 512

    pubkeys[0]  # inferred as BLSPubkey
"""


class SSZVector(SSZModel, Generic[T]):
    """
    Fixed-length, immutable SSZ sequence of fixed-size elements.

    An SSZ Vector contains exactly `LENGTH` elements of type `ELEMENT_TYPE`.
    The length is fixed at the type level and cannot change at runtime.

    Subclasses must define:
        ELEMENT_TYPE: The SSZ type of each element
        LENGTH: The exact number of elements

    SSZ Encoding:
        Elements are serialized back-to-back.
    """

    ELEMENT_TYPE: ClassVar[Type[SSZType]]
    """The SSZ type of elements in this vector."""

    LENGTH: ClassVar[int]
    """The exact number of elements (fixed at the type level)."""

    data: Sequence[T] = Field(default_factory=tuple)
    """
    The immutable sequence of elements.

    Accepts lists or tuples on input; stored as a tuple after validation.
    """

    @field_validator("data", mode="before")
    @classmethod
    def _validate_vector_data(cls, v: Any) -> tuple[SSZType, ...]:
        """Validate and convert input to a typed tuple of exactly LENGTH elements."""
        if not hasattr(cls, "ELEMENT_TYPE") or not hasattr(cls, "LENGTH"):
            raise SSZTypeDefinitionError(cls.__name__, missing_attr="ELEMENT_TYPE and LENGTH")
        if not cls.ELEMENT_TYPE.is_fixed_size():
            raise SSZTypeDefinitionError(cls.__name__, detail="elements must be fixed-size")

        if not isinstance(v, (list, tuple)):
            v = tuple(v)

        typed_values = tuple(
            item if isinstance(item, cls.ELEMENT_TYPE) else cast(Any, cls.ELEMENT_TYPE)(item)
            for item in v
        )

        if len(typed_values) != cls.LENGTH:
            raise SSZValueError(
                f"{cls.__name__} requires exactly {cls.LENGTH} elements, got {len(typed_values)}"
            )

        return typed_values

    @classmethod
    def is_fixed_size(cls) -> bool:
        """A vector of fixed-size elements is fixed-size."""
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        """Get the byte length of the vector."""
        return cls.ELEMENT_TYPE.get_byte_length() * cls.LENGTH

    def serialize(self, stream: IO[bytes]) -> int:
        """Serialize the elements back-to-back."""
        return sum(element.serialize(stream) for element in self.data)

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """Deserialize `LENGTH` elements from a binary stream."""
        if scope != cls.get_byte_length():
            raise SSZDecodeError(
                cls.__name__, f"expected {cls.get_byte_length()} bytes, got {scope}"
            )
        elem_byte_length = cls.ELEMENT_TYPE.get_byte_length()
        elements = [
            cls.ELEMENT_TYPE.deserialize(stream, elem_byte_length) for _ in range(cls.LENGTH)
        ]
        return cls(data=elements)
