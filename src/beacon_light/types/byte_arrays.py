"""
Fixed-length byte vector SSZ types.

Every type here is a `bytes` subclass whose length is checked on construction:
a 32-byte root can never hold 31 or 33 bytes. A wrong length raises
`MalformedInputError`.
"""

from __future__ import annotations

from typing import IO, Any, ClassVar, Iterable, SupportsIndex

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .exceptions import MalformedInputError, SSZDecodeError, SSZTypeDefinitionError
from .hex import bytes_to_hex_string, hex_str_to_bytes
from .ssz_base import SSZType


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix (e.g. "0xdeadbeef" or "deadbeef")

    Raises:
      ValueError / TypeError if conversion is not possible or out-of-range, and
      TypeError for a bare integer.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return hex_str_to_bytes(value)
    if isinstance(value, int):
        # bytes(n) would silently build n zero bytes.
        raise TypeError(f"cannot coerce {type(value).__name__} to bytes")
    if isinstance(value, Iterable):
        # bytes(bytearray(iterable)) enforces each element is an int in 0..255
        return bytes(bytearray(value))
    return bytes(value)


class BaseBytes(bytes, SSZType):
    """
    A base class for fixed-length byte types that inherits from `bytes`.

    Subclasses set:
      - `LENGTH`: exact number of bytes the instance must contain.

    Instances are immutable byte objects with strict length checking.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new Bytes instance.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).

        Raises:
            MalformedInputError: If `value` is not bytes-like or its length differs from `LENGTH`.
        """
        if not hasattr(cls, "LENGTH"):
            raise SSZTypeDefinitionError(cls.__name__, missing_attr="LENGTH")

        try:
            b = _coerce_to_bytes(value)
        except (TypeError, ValueError) as exc:
            raise MalformedInputError(cls.__name__, expected=cls.LENGTH, detail=str(exc)) from exc
        if len(b) != cls.LENGTH:
            raise MalformedInputError(cls.__name__, expected=cls.LENGTH, actual=len(b))
        return super().__new__(cls, b)

    @classmethod
    def zero(cls) -> Self:
        """Create a new instance filled with zero bytes."""
        return cls(b"\x00" * cls.LENGTH)

    @classmethod
    def is_fixed_size(cls) -> bool:
        """Byte vectors are fixed-size (length known at the type level)."""
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        """Get the byte length of this fixed-size type."""
        return cls.LENGTH

    def serialize(self, stream: IO[bytes]) -> int:
        """
        Write the raw bytes to `stream`.

        Returns:
            Number of bytes written (always `LENGTH`).
        """
        stream.write(self)
        return len(self)

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Read exactly `scope` bytes from `stream` and build an instance.

        Raises:
            SSZDecodeError: If `scope` != `LENGTH` or the stream ends prematurely.
        """
        if scope != cls.LENGTH:
            raise SSZDecodeError(cls.__name__, f"expected scope {cls.LENGTH}, got {scope}")
        data = stream.read(scope)
        if len(data) != scope:
            raise SSZDecodeError(cls.__name__, "stream ended prematurely")
        return cls(data)

    def encode_bytes(self) -> bytes:
        """Return the value's canonical SSZ byte representation."""
        return bytes(self)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """Parse exactly `LENGTH` bytes as a value of this type."""
        return cls(data)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. If the input is already an instance of the class, accept it.
        2. Python bytes of exactly LENGTH are coerced into the class.
        3. JSON input is a `0x` hex string.
        4. JSON output is a `0x` hex string.
        """
        from_value_validator = core_schema.no_info_plain_validator_function(cls)

        python_schema = core_schema.chain_schema(
            [
                core_schema.bytes_schema(min_length=cls.LENGTH, max_length=cls.LENGTH),
                from_value_validator,
            ]
        )
        json_schema = core_schema.chain_schema(
            [core_schema.str_schema(), from_value_validator],
        )

        return core_schema.json_or_python_schema(
            json_schema=json_schema,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(cls),
                    python_schema,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                bytes_to_hex_string, when_used="json"
            ),
        )

    def __repr__(self) -> str:
        """Return a string representation of the bytes."""
        tname = type(self).__name__
        return f"{tname}({self.hex()})"

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return hash((type(self), bytes(self)))

    def hex(self, sep: str | bytes | None = None, bytes_per_sep: SupportsIndex = 1) -> str:
        """Return the hexadecimal string representation of the underlying bytes."""
        return bytes(self).hex() if sep is None else bytes(self).hex(sep, bytes_per_sep)

    def to_hex(self) -> str:
        """Return the `0x`-prefixed boundary encoding of these bytes."""
        return bytes_to_hex_string(self)


class Bytes4(BaseBytes):
    """Fixed-size byte array of exactly 4 bytes."""

    LENGTH = 4


class Bytes32(BaseBytes):
    """Fixed-size byte array of exactly 32 bytes."""

    LENGTH = 32


class Bytes48(BaseBytes):
    """Fixed-size byte array of exactly 48 bytes."""

    LENGTH = 48


class Bytes96(BaseBytes):
    """Fixed-size byte array of exactly 96 bytes."""

    LENGTH = 96


ZERO_HASH: Bytes32 = Bytes32.zero()
"""A 32-byte zero hash, the padding chunk of every Merkle tree."""
