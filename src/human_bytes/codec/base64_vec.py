"""Variable-length byte sequences as base64 (human readable) or raw bytes (binary).

Uses the standard RFC 4648 alphabet with padding. There is no length
constraint and no upper-case variant.
"""

from __future__ import annotations

import base64
from typing import Any

from ..exceptions import MalformedEncodingError
from ..formats.base import Deserializer, Serializer
from .dispatch import deserialize_with, serialize_with


def encode(data: bytes) -> str:
    """Render bytes as padded standard base64."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decode(text: str) -> bytes:
    """Decode padded standard base64.

    Raises:
        MalformedEncodingError: On characters outside the alphabet, bad padding
            or non-zero trailing bits in the last symbol
    """
    try:
        data = base64.b64decode(text, validate=True)
    except ValueError as e:
        # binascii.Error for alphabet/padding, plain ValueError for non-ASCII input
        raise MalformedEncodingError(f"invalid base64 string: {e}") from e
    if encode(data) != text:
        raise MalformedEncodingError(f"invalid base64 string: invalid last symbol in {text!r}")
    return data


def serialize(data: bytes, serializer: Serializer) -> Any:
    """Write bytes as base64 if human readable, else as raw bytes."""
    return serialize_with(serializer, data, encode)


def deserialize(deserializer: Deserializer) -> bytes:
    """Read a base64 string (human readable) or raw bytes (binary).

    Raises:
        MalformedEncodingError: If the base64 string is malformed
        UnexpectedTokenError: If the token kind does not match the format's mode
    """
    return deserialize_with(
        deserializer,
        parse_str=decode,
        parse_bytes=bytes,
        expecting_str="a base64-encoded string",
        expecting_bytes="a byte array",
    )
