"""Per-field directives for raw bytes fields.

These markers give a plain ``bytes`` field the same mode-sensitive behavior as
the wrapper types without changing the field's declared type.

Example:
    >>> from typing import Annotated
    >>> class Record(BaseRecord):
    ...     digest: Annotated[bytes, HexBytes(16)]
    ...     payload: Annotated[bytes, Base64Bytes()]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ..codec import base64_vec, hex_array
from ..codec.schema import base64_vec_schema, hex_array_schema
from ..formats.value import ValueDeserializer, ValueSerializer
from .integration import byte_field_schema


@dataclass(frozen=True)
class HexBytes:
    """Serialize a ``bytes`` field as hex of exactly ``length`` bytes.

    Attributes:
        length: Exact length in bytes
        upper: Render upper-case hex digits when human readable
    """

    length: int
    upper: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.length, int) or isinstance(self.length, bool) or self.length < 0:
            raise ValueError(f"length must be a non-negative integer, got {self.length!r}")

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        write = hex_array.serialize_upper if self.upper else hex_array.serialize

        def validate(value: Any, human_readable: bool) -> bytes:
            return hex_array.deserialize(ValueDeserializer(value, human_readable), self.length)

        def serialize(value: bytes, human_readable: bool) -> Any:
            return write(value, ValueSerializer(human_readable))

        return byte_field_schema(validate, serialize)

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return hex_array_schema(self.length)


@dataclass(frozen=True)
class Base64Bytes:
    """Serialize a ``bytes`` field as base64 when human readable."""

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate(value: Any, human_readable: bool) -> bytes:
            return base64_vec.deserialize(ValueDeserializer(value, human_readable))

        def serialize(value: bytes, human_readable: bool) -> Any:
            return base64_vec.serialize(value, ValueSerializer(human_readable))

        return byte_field_schema(validate, serialize)

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return base64_vec_schema()
