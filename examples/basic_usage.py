#!/usr/bin/env python3
"""Basic usage example for human_bytes.

This example demonstrates:
1. Defining a record with byte fields
2. Serializing to JSON (hex/base64 strings)
3. Serializing to MessagePack (raw bytes)
4. Decoding back and handling malformed input
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from human_bytes import Base64Vec, BaseRecord, DecodeError, HexArray, HexBytes


# Define a record class
class Artifact(BaseRecord):
    """Build artifact with a content digest and a detached signature."""

    digest: HexArray[16] = Field(description="MD5 content digest")
    build_id: Annotated[bytes, HexBytes(4, upper=True)] = Field(description="Build ID")
    signature: Base64Vec = Field(description="Detached signature")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("human_bytes Basic Usage Example")
    print("=" * 60)
    print()

    # Create a record instance
    print("1. Creating an artifact record...")
    artifact = Artifact(
        digest=bytes.fromhex("0123456789abcdef0123456789abcdef"),
        build_id=b"\x00\x00\xbe\xef",
        signature=b"signed-by-ci",
    )

    print(f"   Digest: {artifact.digest}")
    print(f"   Build ID: {artifact.build_id!r}")
    print(f"   Signature: {artifact.signature!r}")
    print()

    # Human-readable format
    print("2. Serializing to JSON...")
    text = artifact.to_json()
    print(f"   {text}")
    print(f"   Size: {len(text.encode('utf-8'))} bytes")
    print()

    # Binary format
    print("3. Serializing to MessagePack...")
    packed = artifact.to_msgpack()
    print(f"   Hex: {packed.hex()}")
    print(f"   Size: {len(packed)} bytes")
    print()

    # Decode both
    print("4. Verifying round-trip...")
    if Artifact.from_json(text) == artifact and Artifact.from_msgpack(packed) == artifact:
        print("   ✓ Round-trip successful! Records match.")
    else:
        print("   ✗ Round-trip failed! Records don't match.")
    print()

    # Malformed input
    print("5. Decoding a truncated digest...")
    try:
        Artifact.from_json(text.replace("0123456789abcdef0123", "0123", 1))
    except DecodeError as e:
        print(f"   Rejected: {str(e).splitlines()[-1].strip()}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
