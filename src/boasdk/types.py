"""Type definitions for boasdk."""

from __future__ import annotations

from enum import Enum, IntEnum


class VersionByte(IntEnum):
    """Strkey version bytes.

    The version byte is the first byte of the decoded string, so its top five
    bits pick the first base32 character of the encoded form.
    """

    ACCOUNT_ID = 6 << 3  # G
    SECRET_KEY = 10 << 3  # K
    SEED = 18 << 3  # S

    @property
    def label(self) -> str:
        """Human name used in validation messages."""
        return _VERSION_LABELS[self]


_VERSION_LABELS = {
    VersionByte.ACCOUNT_ID: "address",
    VersionByte.SECRET_KEY: "secret key",
    VersionByte.SEED: "seed",
}


class ValidationResult(str, Enum):
    """Outcome of strkey validation.

    Checks run in declaration order and the first failing one wins.
    """

    OK = "ok"
    SIZE_MISMATCH = "size_mismatch"
    WRONG_TYPE = "wrong_type"
    CHECKSUM_MISMATCH = "checksum_mismatch"

    @property
    def ok(self) -> bool:
        return self is ValidationResult.OK

    def describe(self, label: str) -> str:
        """Render the stable message for this result.

        Args:
            label: Human name of the expected key type.

        Returns:
            An empty string for OK, otherwise the failure message.
        """
        if self is ValidationResult.OK:
            return ""
        if self is ValidationResult.SIZE_MISMATCH:
            return "Decoded data size is not normal"
        if self is ValidationResult.WRONG_TYPE:
            return f"This is not a valid {label} type"
        return "Checksum result do not match"
