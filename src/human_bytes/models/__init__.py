"""Wrapper value types and Pydantic modeling for human_bytes.

This module provides the HexArray and Base64Vec wrapper types, per-field
directives for raw bytes fields, and the BaseRecord model class.
"""

from __future__ import annotations

from .base import BaseRecord
from .base64_vec import Base64Vec
from .fields import Base64Bytes, HexBytes
from .hex_array import HexArray

__all__ = [
    "BaseRecord",
    "HexArray",
    "Base64Vec",
    "HexBytes",
    "Base64Bytes",
]
