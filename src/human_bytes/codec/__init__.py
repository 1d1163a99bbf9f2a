"""Format-adaptive byte codecs.

This module provides the hex (fixed-length) and base64 (variable-length)
codecs, the mode-sensing dispatch they share, and their schema declarations.
"""

from __future__ import annotations

from . import base64_vec, hex_array
from .dispatch import deserialize_with, serialize_with
from .schema import base64_vec_schema, hex_array_schema

__all__ = [
    "hex_array",
    "base64_vec",
    "serialize_with",
    "deserialize_with",
    "hex_array_schema",
    "base64_vec_schema",
]
