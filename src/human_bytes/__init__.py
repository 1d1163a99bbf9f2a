"""human_bytes: Format-adaptive byte encoding

Serialize byte sequences as compact raw bytes in binary formats and as
readable strings in textual ones. Fixed-length arrays render as hex,
variable-length sequences as base64. The choice is made per call from the
active format's human-readable flag.

Key Features:
- HexArray[N] and Base64Vec wrapper types with value semantics
- Per-field directives (HexBytes, Base64Bytes) for raw ``bytes`` fields
- Strict decoding: exact lengths, strict alphabets, typed errors
- Pydantic integration, including JSON Schema declarations

Quick Start:
    >>> from human_bytes import BaseRecord, Base64Vec, HexArray
    >>>
    >>> class Upload(BaseRecord):
    ...     digest: HexArray[16]
    ...     body: Base64Vec
    >>>
    >>> upload = Upload(digest=bytes(16), body=b"hi")
    >>> upload.to_json()
    '{"digest":"00000000000000000000000000000000","body":"aGk="}'
    >>> Upload.from_msgpack(upload.to_msgpack()) == upload
    True
"""

from __future__ import annotations

from .codec import base64_vec, hex_array
from .exceptions import (
    DecodeError,
    EncodeError,
    HumanBytesError,
    LengthMismatchError,
    MalformedEncodingError,
    UnexpectedTokenError,
)
from .formats import (
    Deserializer,
    JsonDeserializer,
    JsonSerializer,
    MsgpackDeserializer,
    MsgpackSerializer,
    Serializer,
    ValueDeserializer,
    ValueSerializer,
    from_json,
    from_msgpack,
    to_json,
    to_msgpack,
)
from .models import Base64Bytes, Base64Vec, BaseRecord, HexArray, HexBytes

__version__ = "0.1.0"

__all__ = [
    # Wrapper types
    "HexArray",
    "Base64Vec",
    "BaseRecord",
    # Field directives
    "HexBytes",
    "Base64Bytes",
    # Codecs
    "hex_array",
    "base64_vec",
    # Capabilities
    "Serializer",
    "Deserializer",
    "ValueSerializer",
    "ValueDeserializer",
    # Formats
    "JsonSerializer",
    "JsonDeserializer",
    "MsgpackSerializer",
    "MsgpackDeserializer",
    "to_json",
    "from_json",
    "to_msgpack",
    "from_msgpack",
    # Exceptions
    "HumanBytesError",
    "EncodeError",
    "DecodeError",
    "MalformedEncodingError",
    "LengthMismatchError",
    "UnexpectedTokenError",
    # Version
    "__version__",
]
