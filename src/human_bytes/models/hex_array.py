"""The HexArray fixed-length wrapper type.

``HexArray[N]`` is a byte array of exactly ``N`` bytes that serializes as hex
in human-readable formats and as raw bytes in binary ones.

This type can be used in two ways:

1. Directly as a field type: ``x: HexArray[16]``
2. As a per-field directive on a raw ``bytes`` field:
   ``x: Annotated[bytes, HexBytes(16)]`` (see :mod:`human_bytes.models.fields`)

Example:
    >>> from human_bytes import BaseRecord, HexArray
    >>> class Block(BaseRecord):
    ...     digest: HexArray[4]
    >>> block = Block(digest=HexArray[4](b"\\xde\\xad\\xbe\\xef"))
    >>> block.to_json()
    '{"digest":"deadbeef"}'
    >>> block.model_dump()
    {'digest': b'\\xde\\xad\\xbe\\xef'}
"""

from __future__ import annotations

import functools
from typing import Any, ClassVar, Iterator

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ..codec import hex_array
from ..codec.schema import hex_array_schema, hex_array_schema_name
from ..formats.base import Deserializer, Serializer
from ..formats.value import ValueDeserializer, ValueSerializer
from .integration import byte_field_schema

_SIZED: dict[int, type[HexArray]] = {}


@functools.total_ordering
class HexArray:
    """A byte array of fixed length ``N`` that serializes as hex when human readable.

    Equality, hashing and ordering are over the raw bytes; arrays of different
    lengths never compare equal. ``repr()`` and ``str()`` always use the hex
    rendering, independent of any serializer mode.

    Attributes:
        length: Fixed number of bytes (set on ``HexArray[N]``, None on ``HexArray``)
    """

    __slots__ = ("_data",)

    length: ClassVar[int | None] = None

    def __class_getitem__(cls, length: int) -> type[HexArray]:
        if cls.length is not None:
            raise TypeError(f"{cls.__name__} is already sized")
        if not isinstance(length, int) or isinstance(length, bool) or length < 0:
            raise TypeError(f"HexArray length must be a non-negative integer, got {length!r}")
        sized = _SIZED.get(length)
        if sized is None:
            name = f"HexArray[{length}]"
            sized = type(
                name,
                (HexArray,),
                {"__slots__": (), "length": length, "__module__": __name__, "__qualname__": name},
            )
            sized = _SIZED.setdefault(length, sized)
        return sized

    def __init__(self, data: Any = None) -> None:
        length = type(self).length
        if length is None:
            raise TypeError("HexArray must be sized before use, e.g. HexArray[16]")
        if data is None:
            self._data = bytearray(length)
            return
        if isinstance(data, (int, str)):
            raise TypeError(f"HexArray[{length}] expects bytes, got {type(data).__name__}")
        buf = bytearray(data)
        if len(buf) != length:
            raise ValueError(f"HexArray[{length}] requires exactly {length} bytes, got {len(buf)}")
        self._data = buf

    def into_inner(self) -> bytes:
        """Return the raw bytes."""
        return bytes(self._data)

    def as_bytes(self) -> memoryview:
        """Return a read-only view of the bytes."""
        return memoryview(self._data).toreadonly()

    def as_mut(self) -> memoryview:
        """Return a writable view of the bytes.

        The view has a fixed size, so in-place edits cannot change the length.
        """
        return memoryview(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, slice):
            return bytes(self._data[key])
        return self._data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        # memoryview rejects assignments that would resize the buffer
        self.as_mut()[key] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexArray) or other.length != self.length:
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HexArray) or other.length != self.length:
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash((self.length, bytes(self._data)))

    def __repr__(self) -> str:
        return f"HexArray({hex_array.encode(self._data)})"

    def __str__(self) -> str:
        return hex_array.encode(self._data)

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild, (self.length, bytes(self._data)))

    # Freestanding operations, usable on raw bytes fields

    @staticmethod
    def serialize(data: bytes, serializer: Serializer) -> Any:
        """Serialize bytes as lower-case hex (human readable) or raw bytes."""
        return hex_array.serialize(data, serializer)

    @staticmethod
    def serialize_upper(data: bytes, serializer: Serializer) -> Any:
        """Serialize bytes as upper-case hex (human readable) or raw bytes."""
        return hex_array.serialize_upper(data, serializer)

    @classmethod
    def deserialize(cls, deserializer: Deserializer) -> bytes:
        """Deserialize exactly ``N`` raw bytes from hex or a byte token."""
        return hex_array.deserialize(deserializer, cls._sized_length())

    # Wrapper serialization

    def serialize_into(self, serializer: Serializer) -> Any:
        return hex_array.serialize(self._data, serializer)

    @classmethod
    def deserialize_from(cls, deserializer: Deserializer) -> HexArray:
        return cls(cls.deserialize(deserializer))

    # Schema declaration

    @classmethod
    def schema_name(cls) -> str:
        return hex_array_schema_name(cls._sized_length())

    @classmethod
    def json_schema(cls) -> dict[str, Any]:
        """Return the JSON Schema of the hex rendering (exact length, hex pattern)."""
        return hex_array_schema(cls._sized_length())

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        length = cls._sized_length()

        def validate(value: Any, human_readable: bool) -> HexArray:
            if isinstance(value, cls):
                return cls(value._data)
            return cls(hex_array.deserialize(ValueDeserializer(value, human_readable), length))

        def serialize(value: HexArray, human_readable: bool) -> Any:
            return hex_array.serialize(value, ValueSerializer(human_readable))

        return byte_field_schema(validate, serialize)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return cls.json_schema()

    @classmethod
    def _sized_length(cls) -> int:
        if cls.length is None:
            raise TypeError("HexArray must be sized before use, e.g. HexArray[16]")
        return cls.length


def _rebuild(length: int, data: bytes) -> HexArray:
    return HexArray[length](data)
