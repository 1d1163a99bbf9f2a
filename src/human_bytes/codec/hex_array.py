"""Fixed-length byte arrays as hex strings (human readable) or raw bytes (binary).

Rendering is two hex digits per byte, lower-case by default, with no prefix
or separators. Decoding is case-insensitive and strictly length-checked: a
value that does not decode to exactly ``length`` bytes is rejected, never
truncated or padded.

Example:
    >>> from human_bytes.formats import JsonSerializer, JsonDeserializer
    >>> serialize(b"\\x01\\xab", JsonSerializer())
    '"01ab"'
    >>> deserialize(JsonDeserializer('"01AB"'), 2)
    b'\\x01\\xab'
"""

from __future__ import annotations

import binascii
from typing import Any

from ..exceptions import LengthMismatchError, MalformedEncodingError
from ..formats.base import Deserializer, Serializer
from .dispatch import deserialize_with, serialize_with


def encode(data: bytes, upper: bool = False) -> str:
    """Render bytes as a hex string, two digits per byte."""
    text = bytes(data).hex()
    return text.upper() if upper else text


def encode_upper(data: bytes) -> str:
    """Render bytes as an upper-case hex string."""
    return encode(data, upper=True)


def decode(text: str, length: int) -> bytes:
    """Decode a hex string that must represent exactly ``length`` bytes.

    Args:
        text: Hex digits, any case
        length: Expected number of bytes

    Returns:
        Decoded bytes, always ``length`` long

    Raises:
        LengthMismatchError: If ``text`` is not ``2 * length`` characters
        MalformedEncodingError: If ``text`` contains a non-hex character
    """
    _check_length(length)
    if len(text) != 2 * length:
        raise LengthMismatchError(len(text), length, unit="characters")
    try:
        return binascii.unhexlify(text)
    except ValueError as e:
        # binascii.Error for bad digits, plain ValueError for non-ASCII input
        raise MalformedEncodingError(
            f"{e}, expected a hex-encoded string {length} bytes long"
        ) from e


def check_bytes(data: bytes, length: int) -> bytes:
    """Validate a raw byte token for a ``length``-byte array.

    Raises:
        LengthMismatchError: If ``data`` is not exactly ``length`` bytes
    """
    if len(data) != length:
        raise LengthMismatchError(len(data), length)
    return bytes(data)


def serialize(data: bytes, serializer: Serializer) -> Any:
    """Write bytes as lower-case hex if human readable, else as raw bytes.

    Args:
        data: Bytes to write
        serializer: Active format

    Returns:
        Whatever the serializer returns for the completed write
    """
    return serialize_with(serializer, data, encode)


def serialize_upper(data: bytes, serializer: Serializer) -> Any:
    """Same as serialize(), with upper-case hex digits."""
    return serialize_with(serializer, data, encode_upper)


def deserialize(deserializer: Deserializer, length: int) -> bytes:
    """Read a hex string (human readable) or raw bytes (binary) of ``length`` bytes.

    Args:
        deserializer: Active format
        length: Expected number of bytes

    Returns:
        Decoded bytes, always ``length`` long

    Raises:
        LengthMismatchError: If the value does not hold exactly ``length`` bytes
        MalformedEncodingError: If the hex string contains a non-hex character
        UnexpectedTokenError: If the token kind does not match the format's mode
    """
    _check_length(length)
    return deserialize_with(
        deserializer,
        parse_str=lambda text: decode(text, length),
        parse_bytes=lambda data: check_bytes(data, length),
        expecting_str=f"a hex-encoded string {length} bytes long",
        expecting_bytes=f"a byte array of length {length}",
    )


def _check_length(length: int) -> None:
    if not isinstance(length, int) or isinstance(length, bool) or length < 0:
        raise ValueError(f"length must be a non-negative integer, got {length!r}")
