"""In-memory token serializer/deserializer.

These adapters write to and read from plain Python values instead of a
document. They back the pydantic integration, where pydantic itself owns the
document and only asks for (or hands over) a single field value.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import UnexpectedTokenError
from .base import Deserializer, Serializer


class ValueSerializer(Serializer):
    """Serializer that returns the written token itself.

    Args:
        human_readable: Mode reported by is_human_readable()
    """

    def __init__(self, human_readable: bool) -> None:
        self.human_readable = human_readable

    def is_human_readable(self) -> bool:
        return self.human_readable

    def write_str(self, value: str) -> str:
        return value

    def write_bytes(self, value: bytes) -> bytes:
        return bytes(value)


class ValueDeserializer(Deserializer):
    """Deserializer over a single already-parsed token.

    Args:
        token: The value to hand out
        human_readable: Mode reported by is_human_readable()
    """

    def __init__(self, token: Any, human_readable: bool) -> None:
        self.token = token
        self.human_readable = human_readable

    def is_human_readable(self) -> bool:
        return self.human_readable

    def read_str(self, expecting: str) -> str:
        if not isinstance(self.token, str):
            raise UnexpectedTokenError(expecting, self.token)
        return self.token

    def read_bytes(self, expecting: str) -> bytes:
        # bytes-like buffers and wrapper types that define __bytes__
        if not isinstance(self.token, (bytes, bytearray, memoryview)) and not hasattr(
            type(self.token), "__bytes__"
        ):
            raise UnexpectedTokenError(expecting, self.token)
        return bytes(self.token)
