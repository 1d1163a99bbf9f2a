"""Abstract serializer/deserializer capabilities.

The codec never talks to a concrete wire format. It only needs a narrow
capability from the active format:

- "is this format human readable?"
- write a string token / write a byte token
- read a string token / read a byte token

Design Pattern: Adapter Pattern
- Serializer / Deserializer: Abstract capability (format-agnostic)
- ValueSerializer / ValueDeserializer: In-memory tokens (pydantic integration)
- JsonSerializer, MsgpackSerializer, ...: Concrete single-value drivers

The format's declared mode is authoritative. Nothing here inspects the data to
guess a representation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Serializer(ABC):
    """Abstract write side of a format.

    Examples:
        ```python
        from human_bytes.codec import hex_array
        from human_bytes.formats import JsonSerializer, MsgpackSerializer

        hex_array.serialize(b"\\x01\\x02", JsonSerializer())     # '"0102"'
        hex_array.serialize(b"\\x01\\x02", MsgpackSerializer())  # b'\\xc4\\x02\\x01\\x02'
        ```
    """

    @abstractmethod
    def is_human_readable(self) -> bool:
        """Return True if the format prefers textual representations."""
        pass

    @abstractmethod
    def write_str(self, value: str) -> Any:
        """Write a string token.

        Args:
            value: String to write

        Returns:
            The format's result for a completed write (document, token, ...)

        Raises:
            EncodeError: If the format cannot represent the token
        """
        pass

    @abstractmethod
    def write_bytes(self, value: bytes) -> Any:
        """Write a byte-string token verbatim.

        Args:
            value: Bytes to write

        Returns:
            The format's result for a completed write

        Raises:
            EncodeError: If the format cannot represent the token
        """
        pass


class Deserializer(ABC):
    """Abstract read side of a format.

    ``expecting`` is a short description of what the caller wants
    (e.g. "a base64-encoded string"); it is only used for error messages.
    """

    @abstractmethod
    def is_human_readable(self) -> bool:
        """Return True if the format prefers textual representations."""
        pass

    @abstractmethod
    def read_str(self, expecting: str) -> str:
        """Read a string token.

        Raises:
            UnexpectedTokenError: If the token is not a string
            DecodeError: If the underlying document cannot be parsed
        """
        pass

    @abstractmethod
    def read_bytes(self, expecting: str) -> bytes:
        """Read a byte-string token.

        Raises:
            UnexpectedTokenError: If the token is not a byte string
            DecodeError: If the underlying document cannot be parsed
        """
        pass
