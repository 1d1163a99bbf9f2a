"""Single-value JSON driver.

JSON is a human-readable format, so the codec always writes strings here.
JSON has no byte-string token; raw bytes are rendered as an array of integers.

Also provides model helpers built on pydantic's own JSON support, where byte
fields take the human-readable path.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError, UnexpectedTokenError
from .base import Deserializer, Serializer

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class JsonSerializer(Serializer):
    """Serializer producing a JSON document for a single value."""

    def is_human_readable(self) -> bool:
        return True

    def write_str(self, value: str) -> str:
        return json.dumps(value)

    def write_bytes(self, value: bytes) -> str:
        return json.dumps(list(value))


class JsonDeserializer(Deserializer):
    """Deserializer reading a single value from a JSON document.

    Args:
        text: JSON document (str or UTF-8 bytes)

    Raises:
        DecodeError: If the document is not valid JSON
    """

    def __init__(self, text: str | bytes) -> None:
        try:
            self.token: Any = json.loads(text)
        except ValueError as e:
            logger.debug("Rejected JSON document: %s", e)
            raise DecodeError(f"Invalid JSON document: {e}") from e

    def is_human_readable(self) -> bool:
        return True

    def read_str(self, expecting: str) -> str:
        if not isinstance(self.token, str):
            logger.debug("Expected JSON string, got %s", type(self.token).__name__)
            raise UnexpectedTokenError(expecting, self.token)
        return self.token

    def read_bytes(self, expecting: str) -> bytes:
        token = self.token
        if not isinstance(token, list) or not all(
            isinstance(item, int) and not isinstance(item, bool) and 0 <= item <= 255
            for item in token
        ):
            logger.debug("Expected JSON byte array, got %s", type(token).__name__)
            raise UnexpectedTokenError(expecting, token)
        return bytes(token)


def to_json(model: BaseModel) -> str:
    """Serialize a pydantic model to a compact JSON document.

    Byte fields render as hex/base64 strings (human-readable mode).
    """
    return model.model_dump_json()


def from_json(model_class: type[T], text: str | bytes) -> T:
    """Validate a JSON document into a pydantic model.

    Args:
        model_class: Pydantic model class to decode to
        text: JSON document

    Returns:
        Decoded model instance

    Raises:
        DecodeError: If the document is malformed or any field fails to decode
    """
    try:
        return model_class.model_validate_json(text)
    except ValidationError as e:
        logger.debug("Failed to decode %s from JSON: %s", model_class.__name__, e)
        raise DecodeError(f"Failed to construct {model_class.__name__}: {e}") from e
