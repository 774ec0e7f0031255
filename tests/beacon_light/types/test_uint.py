"""Unsigned Integer Type Tests."""

import io
from typing import Any

import pytest
from pydantic import ValidationError, create_model

from beacon_light.types import SSZDecodeError, Uint64
from beacon_light.types.uint import BaseUint


class Uint32(BaseUint):
    BITS = 32


def test_pydantic_validation_accepts_valid_int() -> None:
    """Tests that Pydantic validation correctly accepts a valid integer."""
    model = create_model("Model", value=(Uint64, ...))

    instance: Any = model(value=10)
    assert isinstance(instance.value, Uint64)
    assert instance.value == Uint64(10)


@pytest.mark.parametrize("invalid_value", [True, False, -1, 2**64])
def test_pydantic_validation_rejects_bools_and_out_of_range(invalid_value: Any) -> None:
    """Booleans and values outside [0, 2**64) fail validation."""
    model = create_model("Model", value=(Uint64, ...))
    with pytest.raises(ValidationError):
        model(value=invalid_value)


def test_json_round_trip() -> None:
    """JSON encodes the value as a plain integer."""
    model = create_model("Model", value=(Uint64, ...))
    instance: Any = model(value=2**64 - 1)
    assert instance.model_dump_json() == '{"value":18446744073709551615}'
    assert model.model_validate_json('{"value":7}').value == Uint64(7)


def test_instantiation_and_range() -> None:
    """Tests that instances are ints of their own class, range checked."""
    assert isinstance(Uint64(0), int)
    assert isinstance(Uint64(2**64 - 1), Uint64)
    with pytest.raises(OverflowError):
        Uint64(-1)
    with pytest.raises(OverflowError):
        Uint64(2**64)


def test_arithmetic_preserves_type() -> None:
    """Operators on two values of the same width keep the type."""
    a, b = Uint64(17), Uint64(5)
    assert a + b == Uint64(22)
    assert a - b == Uint64(12)
    assert a * b == Uint64(85)
    assert a // b == Uint64(3)
    assert a % b == Uint64(2)
    assert isinstance(a // b, Uint64)


def test_arithmetic_overflow_and_underflow_raise() -> None:
    """Results leaving the range raise instead of wrapping."""
    with pytest.raises(OverflowError):
        Uint64(2**64 - 1) + Uint64(1)
    with pytest.raises(OverflowError):
        Uint64(0) - Uint64(1)


@pytest.mark.parametrize("other", [1, 1.0, "1", Uint32(1)])
def test_mixing_with_other_types_raises(other: Any) -> None:
    """Plain ints and other widths are rejected by every operator."""
    value = Uint64(1)
    with pytest.raises(TypeError):
        value + other
    with pytest.raises(TypeError):
        value == other
    with pytest.raises(TypeError):
        value < other


def test_comparisons() -> None:
    assert Uint64(1) < Uint64(2)
    assert Uint64(2) >= Uint64(2)
    assert Uint64(3) != Uint64(4)


def test_repr_str_and_hash() -> None:
    assert repr(Uint64(5)) == "Uint64(5)"
    assert str(Uint64(5)) == "5"
    assert hash(Uint64(5)) == hash(Uint64(5))


class Height(Uint64):
    pass


class Round(Uint64):
    pass


def test_equal_values_of_the_same_width_hash_alike() -> None:
    """Distinct 64-bit subclasses compare equal, so they must also collide as keys."""
    assert Height(1) == Round(1)
    assert hash(Height(1)) == hash(Round(1))
    assert {Height(1), Round(1), Uint64(1)} == {Uint64(1)}
    assert {Height(7): "seen"}[Round(7)] == "seen"


class TestUintSSZ:
    def test_encode_is_little_endian(self) -> None:
        assert Uint64(1).encode_bytes() == b"\x01" + b"\x00" * 7
        assert Uint64(0x0102).encode_bytes() == b"\x02\x01" + b"\x00" * 6

    def test_decode_bytes(self) -> None:
        assert Uint64.decode_bytes(b"\xff" * 8) == Uint64(2**64 - 1)

    def test_decode_wrong_length_raises(self) -> None:
        with pytest.raises(SSZDecodeError):
            Uint64.decode_bytes(b"\x00" * 7)

    def test_stream_round_trip(self) -> None:
        buf = io.BytesIO()
        assert Uint64(123456789).serialize(buf) == 8
        buf.seek(0)
        assert Uint64.deserialize(buf, 8) == Uint64(123456789)

    def test_deserialize_short_stream_raises(self) -> None:
        with pytest.raises(SSZDecodeError):
            Uint64.deserialize(io.BytesIO(b"\x00" * 4), 8)
