"""Base32 encoding/decoding utilities for boasdk."""

from __future__ import annotations

import base64
import binascii
import re

from ..errors import Base32DecodeError

# RFC 4648 alphabet, upper case only, no padding characters
BASE32_PATTERN = re.compile(r"[A-Z2-7]*")


def to_base32(data: bytes) -> str:
    """Encode bytes to base32 without padding.

    Args:
        data: The bytes to encode.

    Returns:
        Upper-case base32 string without padding.
    """
    return base64.b32encode(data).rstrip(b"=").decode("ascii")


def from_base32(s: str) -> bytes:
    """Decode an unpadded base32 string to bytes.

    Only canonical encodings are accepted, so that
    ``to_base32(from_base32(s)) == s`` always holds.

    Args:
        s: The base32 string to decode.

    Returns:
        The decoded bytes.

    Raises:
        Base32DecodeError: If the string contains characters outside the
            alphabet, has an impossible length or non-zero trailing bits.
    """
    if not BASE32_PATTERN.fullmatch(s):
        raise Base32DecodeError("Base32 string contains non-Base32 characters")

    padding = -len(s) % 8
    try:
        data = base64.b32decode(s + "=" * padding)
    except binascii.Error as e:
        raise Base32DecodeError(f"Invalid Base32 length: {len(s)}") from e

    if to_base32(data) != s:
        raise Base32DecodeError("Base32 string has non-zero trailing bits")
    return data
