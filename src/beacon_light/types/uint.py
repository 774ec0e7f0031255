"""Unsigned Integer Type Specification."""

from __future__ import annotations

from typing import IO, Any, ClassVar, Literal, SupportsIndex, SupportsInt

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .exceptions import SSZDecodeError
from .ssz_base import SSZType


class BaseUint(int, SSZType):
    """A base class for custom unsigned integer types that inherits from `int`."""

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            OverflowError: If `value` is outside the allowed range [0, 2**BITS - 1].
        """
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            """Pydantic validation function that calls the class constructor."""
            if isinstance(value, bool):
                raise ValueError(f"{cls.__name__} does not accept booleans")
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                validate, core_schema.int_schema(ge=0, lt=2**cls.BITS)
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    @classmethod
    def is_fixed_size(cls) -> bool:
        """Unsigned integers are always fixed-size."""
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        """Get the byte length of the integer."""
        return cls.BITS // 8

    def serialize(self, stream: IO[bytes]) -> int:
        """Write the little-endian encoding of the integer to `stream`."""
        data = self.encode_bytes()
        stream.write(data)
        return len(data)

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Read a little-endian integer from `stream`.

        Raises:
            SSZDecodeError: If `scope` does not match the byte length or the stream is short.
        """
        byte_length = cls.get_byte_length()
        if scope != byte_length:
            raise SSZDecodeError(cls.__name__, f"expected scope {byte_length}, got {scope}")
        data = stream.read(scope)
        if len(data) != scope:
            raise SSZDecodeError(cls.__name__, "stream ended prematurely")
        return cls.decode_bytes(data)

    def encode_bytes(self) -> bytes:
        """Return the little-endian SSZ encoding."""
        return self.to_bytes()

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """Parse a little-endian SSZ encoding."""
        if len(data) != cls.get_byte_length():
            raise SSZDecodeError(
                cls.__name__, f"expected {cls.get_byte_length()} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, "little"))

    def to_bytes(
        self,
        length: SupportsIndex | None = None,
        byteorder: Literal["little", "big"] = "little",
        *,
        signed: bool = False,
    ) -> bytes:
        """
        Return an array of bytes representing the integer.

        Defaults to little-endian and a fixed length based on `BITS`.
        """
        actual_length = self.BITS // 8 if length is None else int(length)
        return super().to_bytes(length=actual_length, byteorder=byteorder, signed=signed)

    def _raise_type_error(self, other: Any, op_symbol: str) -> None:
        """Helper to raise a consistent TypeError."""
        raise TypeError(
            f"Unsupported operand type(s) for {op_symbol}: "
            f"'{type(self).__name__}' and '{type(other).__name__}'"
        )

    def __add__(self, other: Any) -> Self:
        """Handle the addition operator (`+`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, "+")
        return type(self)(super().__add__(other))

    def __sub__(self, other: Any) -> Self:
        """Handle the subtraction operator (`-`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, "-")
        return type(self)(super().__sub__(other))

    def __mul__(self, other: Any) -> Self:
        """Handle the multiplication operator (`*`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, "*")
        return type(self)(super().__mul__(other))

    def __floordiv__(self, other: Any) -> Self:
        """Handle the floor division operator (`//`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, "//")
        return type(self)(super().__floordiv__(other))

    def __mod__(self, other: Any) -> Self:
        """Handle the modulo operator (`%`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, "%")
        return type(self)(super().__mod__(other))

    def __eq__(self, other: object) -> bool:
        """Handle the equality operator (`==`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, "==")
        return super().__eq__(other)

    def __ne__(self, other: object) -> bool:
        """Handle the inequality operator (`!=`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, "!=")
        return super().__ne__(other)

    def __lt__(self, other: Any) -> bool:
        """Handle the less-than operator (`<`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, "<")
        return super().__lt__(other)

    def __le__(self, other: Any) -> bool:
        """Handle the less-than-or-equal-to operator (`<=`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, "<=")
        return super().__le__(other)

    def __gt__(self, other: Any) -> bool:
        """Handle the greater-than operator (`>`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, ">")
        return super().__gt__(other)

    def __ge__(self, other: Any) -> bool:
        """Handle the greater-than-or-equal-to operator (`>=`)."""
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            self._raise_type_error(other, ">=")
        return super().__ge__(other)

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))

    def __hash__(self) -> int:
        """Return a hash shared by every equal value of the same width."""
        return hash((self.BITS, int(self)))


class Uint64(BaseUint):
    """A type representing a 64-bit unsigned integer (uint64)."""

    BITS = 64
