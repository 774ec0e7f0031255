"""Exception hierarchy for the SSZ type system and the verification primitives."""

from __future__ import annotations


class SSZError(Exception):
    """
    Base exception for all SSZ-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class SSZTypeError(SSZError):
    """Base class for type-related errors."""


class SSZTypeDefinitionError(SSZTypeError):
    """
    Raised when an SSZ type class is incorrectly defined.

    Attributes:
        type_name: The name of the type with the definition error.
        missing_attr: The missing or invalid attribute name.
        detail: Additional context about the error.
    """

    def __init__(
        self,
        type_name: str,
        *,
        missing_attr: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.missing_attr = missing_attr
        self.detail = detail

        if missing_attr:
            msg = f"{type_name} must define {missing_attr}"
        elif detail:
            msg = f"{type_name}: {detail}"
        else:
            msg = f"{type_name} has an invalid type definition"

        super().__init__(msg)


class SSZValueError(SSZError):
    """
    Base class for value-related errors.

    Raised when a value is invalid for an SSZ operation, even if the type is correct.
    """


class MalformedInputError(SSZValueError, ValueError):
    """
    Raised when a fixed-size input does not have its required byte length.

    Also a `ValueError`, so pydantic validators surface it as a validation failure.

    Attributes:
        type_name: The fixed-size type being constructed.
        expected: The required number of bytes.
        actual: The number of bytes received, or None if the input was not bytes-like.
    """

    def __init__(
        self,
        type_name: str,
        *,
        expected: int,
        actual: int | None = None,
        detail: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual

        msg = f"{type_name} expects exactly {expected} bytes"
        if actual is not None:
            msg = f"{msg}, got {actual}"
        if detail:
            msg = f"{msg}: {detail}"

        super().__init__(msg)


class MalformedNodeError(MalformedInputError):
    """Raised when a value cannot be reinterpreted as a 32-byte Merkle node."""


class InvalidBranchError(SSZValueError):
    """
    Raised when a Merkle branch does not fit the claimed tree position.

    Attributes:
        depth: The claimed depth of the leaf.
        index: The claimed index of the leaf at that depth.
        branch_length: The number of sibling nodes supplied.
    """

    def __init__(self, detail: str, *, depth: int, index: int, branch_length: int) -> None:
        self.depth = depth
        self.index = index
        self.branch_length = branch_length
        super().__init__(
            f"{detail} (depth={depth}, index={index}, branch_length={branch_length})"
        )


class HashingFailureError(SSZError):
    """
    Raised when a value cannot be reduced to its hash tree root.

    Attributes:
        type_name: The type of the value that failed to merkleize.
    """

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        super().__init__(f"Failed to merkleize {type_name}: {detail}")


class SSZSerializationError(SSZError):
    """Base class for serialization-related errors."""


class SSZDecodeError(SSZSerializationError):
    """
    Raised when decoding SSZ bytes to a value fails.

    Attributes:
        type_name: The type being decoded.
        detail: Description of what went wrong.
        offset: The byte offset where the error occurred (if known).
    """

    def __init__(
        self,
        type_name: str,
        detail: str,
        *,
        offset: int | None = None,
    ) -> None:
        self.type_name = type_name
        self.detail = detail
        self.offset = offset

        msg = f"Failed to decode {type_name}: {detail}"
        if offset is not None:
            msg = f"{msg} (at byte offset {offset})"

        super().__init__(msg)
