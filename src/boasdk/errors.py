"""Error hierarchy for boasdk."""

from __future__ import annotations

from .types import ValidationResult


class BoaSdkError(Exception):
    """Base exception for all boasdk errors."""

    pass


class InvalidKeyError(BoaSdkError, ValueError):
    """Raw key material of the wrong size."""

    pass


class Base32DecodeError(BoaSdkError, ValueError):
    """String is not a canonical unpadded base32 encoding."""

    pass


class StrKeyError(BoaSdkError, ValueError):
    """A key string failed validation.

    Attributes:
        kind: The failed validation step.
        label: Human name of the expected key type ("seed", "address", ...).
        message: The stable, user-visible failure message.
    """

    def __init__(self, kind: ValidationResult, label: str) -> None:
        self.kind = kind
        self.label = label
        self.message = kind.describe(label)
        super().__init__(self.message)


class SizeMismatchError(StrKeyError):
    """Decoded size differs from version + payload + checksum."""

    def __init__(self, label: str) -> None:
        super().__init__(ValidationResult.SIZE_MISMATCH, label)


class WrongTypeError(StrKeyError):
    """Version byte belongs to another key type."""

    def __init__(self, label: str) -> None:
        super().__init__(ValidationResult.WRONG_TYPE, label)


class ChecksumMismatchError(StrKeyError):
    """Embedded checksum does not match the payload."""

    def __init__(self, label: str) -> None:
        super().__init__(ValidationResult.CHECKSUM_MISMATCH, label)


class BackendError(BoaSdkError):
    """ED25519 backend failure."""

    pass


class BackendNotReadyError(BackendError):
    """Backend used before init() completed."""

    pass


class SignatureVerificationError(BoaSdkError):
    """Signature verification failure.

    Raised only by verify_signature(). PublicKey.verify() reports the same
    condition as False so that verification cannot be used as a crash oracle.
    """

    pass
