"""The Base64Vec variable-length wrapper type."""

from __future__ import annotations

import functools
from typing import Any, Iterator

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ..codec import base64_vec
from ..codec.schema import base64_vec_schema, base64_vec_schema_name
from ..formats.base import Deserializer, Serializer
from ..formats.value import ValueDeserializer, ValueSerializer
from .integration import byte_field_schema


@functools.total_ordering
class Base64Vec:
    """A byte vector that serializes as base64 in human-readable formats.

    This type can be used in two ways:

    1. Directly as a field type: ``data: Base64Vec``
    2. As a per-field directive on a raw ``bytes`` field:
       ``data: Annotated[bytes, Base64Bytes()]``

    ``repr()`` and ``str()`` always use the base64 rendering.

    Example:
        >>> Base64Vec(b"hello")
        Base64Vec(aGVsbG8=)
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any = b"") -> None:
        if isinstance(data, (int, str)):
            raise TypeError(f"Base64Vec expects bytes, got {type(data).__name__}")
        self._data = bytearray(data)

    def into_inner(self) -> bytes:
        return bytes(self._data)

    def as_bytes(self) -> memoryview:
        return memoryview(self._data).toreadonly()

    def as_mut(self) -> bytearray:
        """Return the underlying growable buffer for in-place edits."""
        return self._data

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
        self._data[key] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Base64Vec):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Base64Vec):
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash(bytes(self._data))

    def __repr__(self) -> str:
        return f"Base64Vec({base64_vec.encode(self._data)})"

    def __str__(self) -> str:
        return base64_vec.encode(self._data)

    def __reduce__(self) -> tuple[Any, ...]:
        return (Base64Vec, (bytes(self._data),))

    @staticmethod
    def serialize(data: bytes, serializer: Serializer) -> Any:
        """Serialize bytes as base64 (human readable) or raw bytes."""
        return base64_vec.serialize(data, serializer)

    @staticmethod
    def deserialize(deserializer: Deserializer) -> bytes:
        """Deserialize raw bytes from base64 or a byte token."""
        return base64_vec.deserialize(deserializer)

    def serialize_into(self, serializer: Serializer) -> Any:
        return base64_vec.serialize(self._data, serializer)

    @classmethod
    def deserialize_from(cls, deserializer: Deserializer) -> Base64Vec:
        return cls(base64_vec.deserialize(deserializer))

    @classmethod
    def schema_name(cls) -> str:
        return base64_vec_schema_name()

    @classmethod
    def json_schema(cls) -> dict[str, Any]:
        return base64_vec_schema()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate(value: Any, human_readable: bool) -> Base64Vec:
            if isinstance(value, cls):
                return cls(value._data)
            return cls(base64_vec.deserialize(ValueDeserializer(value, human_readable)))

        def serialize(value: Base64Vec, human_readable: bool) -> Any:
            return base64_vec.serialize(value, ValueSerializer(human_readable))

        return byte_field_schema(validate, serialize)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return cls.json_schema()
