"""Single-value MessagePack driver.

MessagePack is a binary format, so the codec always writes raw byte strings
here. Strings pack as msgpack ``str`` and bytes as msgpack ``bin``
(``use_bin_type=True``), so the two token kinds stay distinguishable on read.

Also provides model helpers that pack a pydantic model dumped in python mode
(byte fields stay raw bytes) and validate an unpacked document back.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import msgpack
from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError, EncodeError, UnexpectedTokenError
from .base import Deserializer, Serializer

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _pack(value: Any) -> bytes:
    try:
        return msgpack.packb(value, use_bin_type=True)
    except (TypeError, ValueError, OverflowError) as e:
        raise EncodeError(f"Value is not MessagePack serializable: {e}") from e


def _unpack(data: bytes) -> Any:
    try:
        return msgpack.unpackb(data, raw=False)
    except ValueError as e:
        logger.debug("Rejected MessagePack document (%d bytes): %s", len(data), e)
        raise DecodeError(f"Invalid MessagePack document: {e}") from e


class MsgpackSerializer(Serializer):
    """Serializer producing a MessagePack document for a single value."""

    def is_human_readable(self) -> bool:
        return False

    def write_str(self, value: str) -> bytes:
        return _pack(value)

    def write_bytes(self, value: bytes) -> bytes:
        return _pack(bytes(value))


class MsgpackDeserializer(Deserializer):
    """Deserializer reading a single value from a MessagePack document.

    Args:
        data: Packed document

    Raises:
        DecodeError: If the document cannot be unpacked
    """

    def __init__(self, data: bytes) -> None:
        self.token: Any = _unpack(data)

    def is_human_readable(self) -> bool:
        return False

    def read_str(self, expecting: str) -> str:
        if not isinstance(self.token, str):
            logger.debug("Expected msgpack str, got %s", type(self.token).__name__)
            raise UnexpectedTokenError(expecting, self.token)
        return self.token

    def read_bytes(self, expecting: str) -> bytes:
        if not isinstance(self.token, bytes):
            logger.debug("Expected msgpack bin, got %s", type(self.token).__name__)
            raise UnexpectedTokenError(expecting, self.token)
        return self.token


def to_msgpack(model: BaseModel) -> bytes:
    """Serialize a pydantic model to MessagePack.

    Byte fields stay raw bytes (binary mode) and pack as ``bin``.

    Raises:
        EncodeError: If a dumped value has no MessagePack representation
    """
    return _pack(model.model_dump(mode="python"))


def from_msgpack(model_class: type[T], data: bytes) -> T:
    """Validate a MessagePack document into a pydantic model.

    Args:
        model_class: Pydantic model class to decode to
        data: Packed document

    Returns:
        Decoded model instance

    Raises:
        DecodeError: If the document is malformed or any field fails to decode
    """
    obj = _unpack(data)
    try:
        return model_class.model_validate(obj)
    except ValidationError as e:
        logger.debug("Failed to decode %s from MessagePack: %s", model_class.__name__, e)
        raise DecodeError(f"Failed to construct {model_class.__name__}: {e}") from e
