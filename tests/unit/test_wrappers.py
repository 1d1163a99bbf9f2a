"""Unit tests for the HexArray and Base64Vec wrapper types."""

from __future__ import annotations

import pickle

import pytest

import human_bytes.models.hex_array as hex_array_model
from human_bytes import (
    Base64Vec,
    HexArray,
    JsonDeserializer,
    JsonSerializer,
    LengthMismatchError,
    MsgpackDeserializer,
    MsgpackSerializer,
)


class TestHexArrayConstruction:
    """Test sizing and construction."""

    def test_sized_class_cached(self) -> None:
        """Test HexArray[N] returns the same class for the same N."""
        assert HexArray[16] is HexArray[16]
        assert HexArray[16] is not HexArray[15]
        assert issubclass(HexArray[16], HexArray)
        assert HexArray[16].length == 16
        assert HexArray[16].__name__ == "HexArray[16]"

    def test_cache_keeps_first_class(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a class stored concurrently for the same N is the one returned."""
        existing = HexArray[99]

        class LateCache(dict):
            """Cache whose lookups miss, as when another thread stores late."""

            def get(self, key, default=None):
                return default

        monkeypatch.setattr(hex_array_model, "_SIZED", LateCache({99: existing}))

        assert HexArray[99] is existing

    def test_invalid_size(self) -> None:
        """Test only non-negative integer sizes are accepted."""
        with pytest.raises(TypeError):
            HexArray[-1]
        with pytest.raises(TypeError):
            HexArray["16"]  # type: ignore[index]
        with pytest.raises(TypeError, match="already sized"):
            HexArray[16][4]  # type: ignore[index]

    def test_unsized_instantiation(self) -> None:
        """Test bare HexArray cannot be instantiated."""
        with pytest.raises(TypeError, match="sized"):
            HexArray(b"\x00")

    def test_from_bytes(self, sample_bytes: bytes) -> None:
        """Test construction and extraction are inverse."""
        value = HexArray[16](sample_bytes)
        assert value.into_inner() == sample_bytes
        assert bytes(value) == sample_bytes
        assert len(value) == 16
        assert list(value) == list(sample_bytes)

    def test_wrong_length(self) -> None:
        """Test construction requires exactly N bytes."""
        with pytest.raises(ValueError, match="exactly 16 bytes, got 3"):
            HexArray[16](b"abc")

    def test_rejects_str_and_int(self) -> None:
        """Test str and int are not byte sources."""
        with pytest.raises(TypeError):
            HexArray[2]("ab")
        with pytest.raises(TypeError):
            HexArray[2](2)

    def test_default_zeros(self) -> None:
        """Test default value is all zeros."""
        assert HexArray[4]().into_inner() == b"\x00\x00\x00\x00"


class TestHexArrayValueSemantics:
    """Test equality, ordering, hashing, and rendering."""

    def test_equality(self, sample_bytes: bytes) -> None:
        """Test equality over bytes."""
        assert HexArray[16](sample_bytes) == HexArray[16](sample_bytes)
        assert HexArray[16](sample_bytes) != HexArray[16]()

    def test_different_sizes_not_equal(self) -> None:
        """Test arrays of different lengths never compare equal."""
        assert HexArray[0]() != HexArray[1]()
        assert HexArray[1](b"\x00") != b"\x00"

    def test_ordering(self) -> None:
        """Test ordering by bytes."""
        low = HexArray[2](b"\x00\xff")
        high = HexArray[2](b"\x01\x00")
        assert low < high
        assert high >= low
        assert sorted([high, low]) == [low, high]

    def test_ordering_across_sizes(self) -> None:
        """Test arrays of different lengths are not ordered."""
        with pytest.raises(TypeError):
            HexArray[1]() < HexArray[2]()  # noqa: B015

    def test_hash(self, sample_bytes: bytes) -> None:
        """Test equal values hash equal."""
        values = {HexArray[16](sample_bytes), HexArray[16](sample_bytes), HexArray[16]()}
        assert len(values) == 2

    def test_repr_and_str(self, sample_bytes: bytes, sample_hex: str) -> None:
        """Test rendering uses the hex encoding."""
        value = HexArray[16](sample_bytes)
        assert repr(value) == f"HexArray({sample_hex})"
        assert str(value) == sample_hex
        assert f"{value}" == sample_hex

    def test_rendering_independent_of_mode(self, sample_bytes: bytes, sample_hex: str) -> None:
        """Test values decoded from a binary format still render as hex."""
        packed = MsgpackSerializer().write_bytes(sample_bytes)
        value = HexArray[16].deserialize_from(MsgpackDeserializer(packed))
        assert str(value) == sample_hex

    def test_pickle(self, sample_bytes: bytes) -> None:
        """Test values survive pickling."""
        value = HexArray[16](sample_bytes)
        restored = pickle.loads(pickle.dumps(value))
        assert restored == value
        assert type(restored) is HexArray[16]


class TestHexArrayAccess:
    """Test borrowed access to the bytes."""

    def test_read_only_view(self) -> None:
        """Test as_bytes() cannot be written through."""
        value = HexArray[2](b"\x01\x02")
        view = value.as_bytes()
        assert view.tobytes() == b"\x01\x02"
        with pytest.raises(TypeError):
            view[0] = 0xFF

    def test_mutable_view(self) -> None:
        """Test as_mut() edits in place."""
        value = HexArray[2](b"\x01\x02")
        value.as_mut()[0] = 0xFF
        assert value.into_inner() == b"\xff\x02"

    def test_item_assignment(self) -> None:
        """Test index and same-length slice assignment."""
        value = HexArray[3](b"\x00\x00\x00")
        value[0] = 1
        value[1:3] = b"\x02\x03"
        assert value.into_inner() == b"\x01\x02\x03"
        assert value[1:] == b"\x02\x03"

    def test_mutation_cannot_resize(self) -> None:
        """Test slice assignment that would change the length fails."""
        value = HexArray[2](b"\x01\x02")
        with pytest.raises(ValueError):
            value[0:1] = b"\x00\x00\x00"
        assert len(value) == 2
        assert value.into_inner() == b"\x01\x02"


class TestHexArraySerialization:
    """Test wrapper and freestanding operations."""

    def test_serialize_into(self, sample_bytes: bytes, sample_hex: str) -> None:
        """Test the wrapper serializes through the codec."""
        value = HexArray[16](sample_bytes)
        assert value.serialize_into(JsonSerializer()) == f'"{sample_hex}"'
        assert value.serialize_into(MsgpackSerializer()) == b"\xc4\x10" + sample_bytes

    def test_deserialize_from(self, sample_bytes: bytes, sample_hex: str) -> None:
        """Test the wrapper deserializes through the codec."""
        value = HexArray[16].deserialize_from(JsonDeserializer(f'"{sample_hex}"'))
        assert value == HexArray[16](sample_bytes)

    def test_deserialize_from_wrong_size(self, sample_hex: str) -> None:
        """Test the wrapper enforces its length."""
        with pytest.raises(LengthMismatchError):
            HexArray[15].deserialize_from(JsonDeserializer(f'"{sample_hex}"'))

    def test_freestanding(self, sample_bytes: bytes, sample_hex: str) -> None:
        """Test freestanding operations work on raw bytes."""
        assert HexArray.serialize(sample_bytes, JsonSerializer()) == f'"{sample_hex}"'
        assert HexArray.serialize_upper(sample_bytes, JsonSerializer()) == f'"{sample_hex.upper()}"'
        assert HexArray[16].deserialize(JsonDeserializer(f'"{sample_hex}"')) == sample_bytes

    def test_freestanding_requires_size(self, sample_hex: str) -> None:
        """Test unsized deserialize is a programmer error."""
        with pytest.raises(TypeError):
            HexArray.deserialize(JsonDeserializer(f'"{sample_hex}"'))


class TestBase64Vec:
    """Test the variable-length wrapper."""

    def test_construction(self, sample_bytes: bytes) -> None:
        """Test construction and extraction are inverse."""
        value = Base64Vec(sample_bytes)
        assert value.into_inner() == sample_bytes
        assert bytes(value) == sample_bytes
        assert Base64Vec().into_inner() == b""

    def test_rejects_str(self) -> None:
        """Test str is not a byte source."""
        with pytest.raises(TypeError):
            Base64Vec("aGk=")

    def test_value_semantics(self) -> None:
        """Test equality, ordering, and hashing over bytes."""
        assert Base64Vec(b"ab") == Base64Vec(b"ab")
        assert Base64Vec(b"ab") < Base64Vec(b"b")
        assert Base64Vec(b"ab") != b"ab"
        assert len({Base64Vec(b"ab"), Base64Vec(b"ab")}) == 1

    def test_repr_and_str(self, sample_bytes: bytes, sample_base64: str) -> None:
        """Test rendering uses base64."""
        value = Base64Vec(sample_bytes)
        assert repr(value) == f"Base64Vec({sample_base64})"
        assert str(value) == sample_base64

    def test_growable(self) -> None:
        """Test as_mut() returns a growable buffer."""
        value = Base64Vec()
        value.as_mut().extend(b"xyz")
        assert len(value) == 3
        assert repr(value) == "Base64Vec(eHl6)"

    def test_read_only_view(self) -> None:
        """Test as_bytes() cannot be written through."""
        with pytest.raises(TypeError):
            Base64Vec(b"a").as_bytes()[0] = 0

    def test_serialization(self, sample_bytes: bytes, sample_base64: str) -> None:
        """Test wrapper and freestanding operations."""
        value = Base64Vec(sample_bytes)
        assert value.serialize_into(JsonSerializer()) == f'"{sample_base64}"'
        assert Base64Vec.serialize(sample_bytes, MsgpackSerializer()) == b"\xc4\x10" + sample_bytes
        assert Base64Vec.deserialize(JsonDeserializer(f'"{sample_base64}"')) == sample_bytes
        assert Base64Vec.deserialize_from(JsonDeserializer(f'"{sample_base64}"')) == value

    def test_pickle(self) -> None:
        """Test values survive pickling."""
        value = Base64Vec(b"\x00\x01")
        assert pickle.loads(pickle.dumps(value)) == value
