"""Base record class and human_bytes-specific Pydantic configuration.

This module provides the BaseRecord class for models carrying byte fields,
with shortcuts for the bundled JSON (human-readable) and MessagePack (binary)
formats.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict

from ..formats.json_format import from_json, to_json
from ..formats.msgpack_format import from_msgpack, to_msgpack

R = TypeVar("R", bound="BaseRecord")


class BaseRecord(BaseModel):
    """Base class for records with format-adaptive byte fields.

    Example:
        >>> class Artifact(BaseRecord):
        ...     digest: HexArray[32]
        ...     signature: Base64Vec
        >>> data = artifact.to_msgpack()   # digest/signature as raw bytes
        >>> text = artifact.to_json()      # digest as hex, signature as base64
        >>> Artifact.from_json(text) == artifact
        True
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    def to_json(self) -> str:
        return to_json(self)

    @classmethod
    def from_json(cls: type[R], text: str | bytes) -> R:
        return from_json(cls, text)

    def to_msgpack(self) -> bytes:
        return to_msgpack(self)

    @classmethod
    def from_msgpack(cls: type[R], data: bytes) -> R:
        return from_msgpack(cls, data)
