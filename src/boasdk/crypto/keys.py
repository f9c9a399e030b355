"""ED25519 key value types for boasdk."""

from __future__ import annotations

import hmac
from dataclasses import dataclass, field
from typing import ClassVar

from ..constants import STRKEY_PAYLOAD_SIZE
from ..errors import InvalidKeyError
from ..types import ValidationResult, VersionByte
from .backend import Ed25519Backend, resolve_backend
from .constants import (
    ED25519_PUBLIC_KEY_SIZE,
    ED25519_SECRET_KEY_SIZE,
    ED25519_SEED_SIZE,
)
from .signature import sign_message, verify_signature_safe
from .validation import decode_strkey, describe_strkey, encode_strkey, validate_strkey


@dataclass(frozen=True, repr=False)
class _KeyBytes:
    """Immutable fixed-size key bytes with a strkey text form."""

    data: bytes

    version: ClassVar[VersionByte]
    size: ClassVar[int]

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"{type(self).__name__} expects bytes, got {type(self.data).__name__}"
            )
        data = bytes(self.data)
        if len(data) != self.size:
            raise InvalidKeyError(
                f"Invalid {self.version.label} length: {len(data)}, expected {self.size}"
            )
        object.__setattr__(self, "data", data)

    @classmethod
    def check(cls, encoded: str) -> ValidationResult:
        """Validate a string of this key type, returning the result kind."""
        return validate_strkey(encoded, cls.version, STRKEY_PAYLOAD_SIZE)

    @classmethod
    def validate(cls, encoded: str) -> str:
        """Validate a string of this key type without raising.

        Returns:
            An empty string if valid, otherwise the failure message.
        """
        return describe_strkey(encoded, cls.version, STRKEY_PAYLOAD_SIZE)

    def to_string(self) -> str:
        return encode_strkey(self.version, self.data[:STRKEY_PAYLOAD_SIZE])

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<redacted>)"


@dataclass(frozen=True, repr=False)
class Seed(_KeyBytes):
    """32 bytes of entropy from which a keypair is derived."""

    version: ClassVar[VersionByte] = VersionByte.SEED
    size: ClassVar[int] = ED25519_SEED_SIZE

    @classmethod
    def from_string(cls, encoded: str) -> Seed:
        """Decode a seed string (``S...``).

        Raises:
            StrKeyError: If the string is not a valid seed.
        """
        return cls(decode_strkey(encoded, cls.version, STRKEY_PAYLOAD_SIZE))

    @classmethod
    def generate(cls, backend: Ed25519Backend | None = None) -> Seed:
        """Create a seed from the backend's secure random source."""
        return cls(resolve_backend(backend).secure_random(ED25519_SEED_SIZE))


@dataclass(frozen=True, repr=False)
class PublicKey(_KeyBytes):
    """ED25519 public key. Its string form is the address (``G...``)."""

    backend: Ed25519Backend | None = field(default=None, compare=False)

    version: ClassVar[VersionByte] = VersionByte.ACCOUNT_ID
    size: ClassVar[int] = ED25519_PUBLIC_KEY_SIZE

    @classmethod
    def from_string(cls, encoded: str, backend: Ed25519Backend | None = None) -> PublicKey:
        """Decode an address.

        Raises:
            StrKeyError: If the string is not a valid address.
        """
        return cls(decode_strkey(encoded, cls.version, STRKEY_PAYLOAD_SIZE), backend=backend)

    def verify(self, signature: bytes, message: bytes | str) -> bool:
        """Check that ``signature`` was made for ``message`` by the matching secret key.

        Never raises for malformed signatures, it returns False instead.
        """
        return verify_signature_safe(
            self.data, signature, message, resolve_backend(self.backend)
        )

    def __repr__(self) -> str:
        return f"PublicKey({self.to_string()!r})"


@dataclass(frozen=True, repr=False)
class SecretKey(_KeyBytes):
    """ED25519 secret key, 64 bytes laid out as ``seed || public key``.

    The public half must be the one derived from the seed half, so the
    string form (``K...``) carries only the seed half and decoding it
    re-derives the rest.
    """

    backend: Ed25519Backend | None = field(default=None, compare=False)

    version: ClassVar[VersionByte] = VersionByte.SECRET_KEY
    size: ClassVar[int] = ED25519_SECRET_KEY_SIZE

    def __post_init__(self) -> None:
        super().__post_init__()
        seed, public = self.data[:ED25519_SEED_SIZE], self.data[ED25519_SEED_SIZE:]
        expected, _ = resolve_backend(self.backend).keypair_from_seed(seed)
        if not hmac.compare_digest(expected, public):
            raise InvalidKeyError("Secret key public half does not match its seed")

    @classmethod
    def from_string(cls, encoded: str, backend: Ed25519Backend | None = None) -> SecretKey:
        """Decode a secret key string.

        Raises:
            StrKeyError: If the string is not a valid secret key.
        """
        seed = decode_strkey(encoded, cls.version, STRKEY_PAYLOAD_SIZE)
        _, secret = resolve_backend(backend).keypair_from_seed(seed)
        return cls(secret, backend=backend)

    def sign(self, message: bytes | str) -> bytes:
        """Sign a message, returning the 64-byte signature."""
        return sign_message(self.data, message, resolve_backend(self.backend))

    def public_key(self) -> PublicKey:
        return PublicKey(self.data[ED25519_SEED_SIZE:], backend=self.backend)
