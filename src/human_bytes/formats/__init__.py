"""Serializer/deserializer capabilities and format drivers.

This module provides the narrow capability interfaces the codec depends on,
plus single-value JSON (human-readable) and MessagePack (binary) drivers.
"""

from __future__ import annotations

from .base import Deserializer, Serializer
from .json_format import JsonDeserializer, JsonSerializer, from_json, to_json
from .msgpack_format import MsgpackDeserializer, MsgpackSerializer, from_msgpack, to_msgpack
from .value import ValueDeserializer, ValueSerializer

__all__ = [
    "Serializer",
    "Deserializer",
    "ValueSerializer",
    "ValueDeserializer",
    "JsonSerializer",
    "JsonDeserializer",
    "MsgpackSerializer",
    "MsgpackDeserializer",
    "to_json",
    "from_json",
    "to_msgpack",
    "from_msgpack",
]
