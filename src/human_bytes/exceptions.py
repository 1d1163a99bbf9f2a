"""Exception hierarchy for human_bytes.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from HumanBytesError for easy catching of any human_bytes error.
"""

from __future__ import annotations

from typing import Any


class HumanBytesError(Exception):
    """Base exception for all human_bytes errors."""

    pass


class EncodeError(HumanBytesError):
    """Raised when a format driver cannot write an encoded value.

    Examples:
        - Value is not representable by the target format
        - Underlying format library rejected the token
    """

    pass


class DecodeError(HumanBytesError, ValueError):
    """Raised when decoding a byte field fails.

    Subclasses ValueError so that pydantic validators report it as a
    regular validation failure.

    Examples:
        - Malformed hex or base64 text
        - Fixed-length mismatch
        - Wrong token kind for the format's mode
        - Unparseable document
    """

    pass


class MalformedEncodingError(DecodeError):
    """Raised when a string is not valid hex or base64.

    Examples:
        - Character outside the codec's alphabet
        - Bad base64 padding
    """

    pass


class LengthMismatchError(DecodeError):
    """Raised when a fixed-length value decodes to the wrong size.

    Attributes:
        actual: Observed length
        expected: Expected length in bytes
        unit: Unit of ``actual`` ("bytes" or "characters")
    """

    def __init__(self, actual: int, expected: int, *, unit: str = "bytes") -> None:
        self.actual = actual
        self.expected = expected
        self.unit = unit
        if unit == "characters":
            what = f"a hex-encoded string {expected} bytes long"
        else:
            what = f"a byte array of length {expected}"
        super().__init__(f"invalid length {actual} {unit}, expected {what}")


class UnexpectedTokenError(DecodeError):
    """Raised when a deserializer holds a token of the wrong kind.

    Attributes:
        expecting: Description of what the caller wanted
        got: The token that was found instead
    """

    def __init__(self, expecting: str, got: Any) -> None:
        self.expecting = expecting
        self.got = got
        super().__init__(f"invalid type: {type(got).__name__}, expected {expecting}")
