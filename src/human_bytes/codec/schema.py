"""JSON Schema declarations for the textual wire shapes.

These are pure functions of the type (and length, for hex arrays). They
describe what the human-readable path produces and do not import any schema
library; the pydantic integration returns them as-is.
"""

from __future__ import annotations

from typing import Any


def hex_array_schema(length: int) -> dict[str, Any]:
    """Schema for a ``length``-byte array rendered as hex.

    Example:
        >>> hex_array_schema(2)
        {'type': 'string', 'minLength': 4, 'maxLength': 4, 'pattern': '^[0-9a-fA-F]{4}$'}
    """
    hex_len = length * 2
    return {
        "type": "string",
        "minLength": hex_len,
        "maxLength": hex_len,
        "pattern": f"^[0-9a-fA-F]{{{hex_len}}}$",
    }


def hex_array_schema_name(length: int) -> str:
    return f"HexArray_{length}"


def base64_vec_schema() -> dict[str, Any]:
    """Schema for a byte sequence rendered as base64."""
    return {
        "type": "string",
        "format": "byte",
        "contentEncoding": "base64",
    }


def base64_vec_schema_name() -> str:
    return "Base64Vec"
