"""Strkey encoding and validation for boasdk.

A strkey is the text form shared by seeds, secret keys and addresses::

    base32(version_byte || key_bytes || checksum(version_byte || key_bytes))
"""

from __future__ import annotations

import logging

from ..constants import CHECKSUM_SIZE, VERSION_BYTE_SIZE
from ..errors import (
    Base32DecodeError,
    ChecksumMismatchError,
    SizeMismatchError,
    StrKeyError,
    WrongTypeError,
)
from ..types import ValidationResult, VersionByte
from .checksum import compute_checksum, verify_checksum
from .utils import from_base32, to_base32

logger = logging.getLogger("boasdk")

_ERRORS: dict[ValidationResult, type[StrKeyError]] = {
    ValidationResult.SIZE_MISMATCH: SizeMismatchError,
    ValidationResult.WRONG_TYPE: WrongTypeError,
    ValidationResult.CHECKSUM_MISMATCH: ChecksumMismatchError,
}


def encode_strkey(version: VersionByte, data: bytes) -> str:
    """Encode key bytes as a strkey.

    Args:
        version: Version byte of the key type.
        data: The raw key bytes.

    Returns:
        The canonical strkey string.
    """
    payload = bytes([version]) + bytes(data)
    return to_base32(payload + compute_checksum(payload))


def _inspect(
    encoded: str, version: VersionByte, payload_size: int
) -> tuple[ValidationResult, bytes]:
    """Run the validation steps, returning the result and the key bytes."""
    # Step 1: Decode and check size
    if not isinstance(encoded, str):
        return ValidationResult.SIZE_MISMATCH, b""
    try:
        decoded = from_base32(encoded)
    except Base32DecodeError:
        return ValidationResult.SIZE_MISMATCH, b""
    if len(decoded) != VERSION_BYTE_SIZE + payload_size + CHECKSUM_SIZE:
        return ValidationResult.SIZE_MISMATCH, b""

    # Step 2: Check the version byte
    if decoded[0] != version:
        return ValidationResult.WRONG_TYPE, b""

    # Step 3: Check the checksum over version byte + key bytes
    payload, checksum = decoded[:-CHECKSUM_SIZE], decoded[-CHECKSUM_SIZE:]
    if not verify_checksum(payload, checksum):
        return ValidationResult.CHECKSUM_MISMATCH, b""

    return ValidationResult.OK, payload[VERSION_BYTE_SIZE:]


def validate_strkey(encoded: str, version: VersionByte, payload_size: int) -> ValidationResult:
    """Validate a strkey without raising.

    Validation steps (first failure wins):
    1. Base32 decode, decoded size must be 1 + payload_size + 2
    2. Version byte must equal ``version``
    3. Checksum must match version byte + key bytes

    Args:
        encoded: The string to validate.
        version: Expected version byte.
        payload_size: Expected number of key bytes.

    Returns:
        ValidationResult.OK or the failed step.
    """
    result, _ = _inspect(encoded, version, payload_size)
    return result


def decode_strkey(encoded: str, version: VersionByte, payload_size: int) -> bytes:
    """Decode a strkey into its key bytes.

    Args:
        encoded: The strkey string.
        version: Expected version byte.
        payload_size: Expected number of key bytes.

    Returns:
        The key bytes.

    Raises:
        SizeMismatchError: If the string does not decode to the expected size.
        WrongTypeError: If the version byte belongs to another key type.
        ChecksumMismatchError: If the checksum does not match.
    """
    result, data = _inspect(encoded, version, payload_size)
    if not result.ok:
        raise _ERRORS[result](version.label)
    return data


def describe_strkey(encoded: str, version: VersionByte, payload_size: int) -> str:
    """Validate a strkey and describe the outcome.

    Returns:
        An empty string if valid, otherwise the failure message.
    """
    result = validate_strkey(encoded, version, payload_size)
    if not result.ok:
        logger.debug("Rejected %s string: %s", version.label, result.value)
    return result.describe(version.label)
