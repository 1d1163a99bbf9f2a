"""Mode-sensing dispatch between the string and raw-bytes paths.

Each call asks the format exactly once whether it is human readable and then
performs a single write or read. There is no fallback from one mode to the
other.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from ..formats.base import Deserializer, Serializer

T = TypeVar("T")


def serialize_with(serializer: Serializer, data: bytes, render: Callable[[bytes], str]) -> Any:
    """Write ``data`` as ``render(data)`` if human readable, else as raw bytes.

    Args:
        serializer: Active format
        data: Bytes to write
        render: Textual encoding (hex, base64)

    Returns:
        Whatever the serializer returns for the completed write
    """
    data = bytes(data)
    if serializer.is_human_readable():
        return serializer.write_str(render(data))
    return serializer.write_bytes(data)


def deserialize_with(
    deserializer: Deserializer,
    *,
    parse_str: Callable[[str], T],
    parse_bytes: Callable[[bytes], T],
    expecting_str: str,
    expecting_bytes: str,
) -> T:
    """Read a string or a byte token depending on the format's mode.

    Args:
        deserializer: Active format
        parse_str: Decoder for the string token (human-readable mode)
        parse_bytes: Validator for the byte token (binary mode)
        expecting_str: Description of the wanted string token
        expecting_bytes: Description of the wanted byte token

    Returns:
        The parsed value

    Raises:
        DecodeError: If the token is of the wrong kind or fails to parse
    """
    if deserializer.is_human_readable():
        return parse_str(deserializer.read_str(expecting_str))
    return parse_bytes(deserializer.read_bytes(expecting_bytes))
