"""Strkey checksum for boasdk.

CRC16-XModem (polynomial 0x1021, initial value 0) over version byte and
payload, stored little endian. It catches typos, it is not a security control.
"""

from __future__ import annotations

import binascii
import hmac

from ..constants import CHECKSUM_SIZE


def compute_checksum(payload: bytes) -> bytes:
    """Compute the 2-byte checksum of a versioned payload."""
    return binascii.crc_hqx(payload, 0).to_bytes(CHECKSUM_SIZE, "little")


def verify_checksum(payload: bytes, checksum: bytes) -> bool:
    """Check a checksum against its payload.

    Args:
        payload: Version byte followed by the key bytes.
        checksum: The trailing checksum bytes of a decoded strkey.

    Returns:
        True if the checksum matches, False otherwise.
    """
    return hmac.compare_digest(compute_checksum(payload), bytes(checksum))
