"""Cryptographic operations for boasdk."""

from .backend import CryptographyBackend, Ed25519Backend, default_backend, init
from .checksum import compute_checksum, verify_checksum
from .constants import (
    ED25519_PUBLIC_KEY_SIZE,
    ED25519_SECRET_KEY_SIZE,
    ED25519_SEED_SIZE,
    ED25519_SIGNATURE_SIZE,
)
from .keypair import KeyPair
from .keys import PublicKey, SecretKey, Seed
from .signature import sign_message, verify_signature, verify_signature_safe
from .utils import from_base32, to_base32
from .validation import decode_strkey, describe_strkey, encode_strkey, validate_strkey

__all__ = [
    "ED25519_PUBLIC_KEY_SIZE",
    "ED25519_SECRET_KEY_SIZE",
    "ED25519_SEED_SIZE",
    "ED25519_SIGNATURE_SIZE",
    "CryptographyBackend",
    "Ed25519Backend",
    "KeyPair",
    "PublicKey",
    "SecretKey",
    "Seed",
    "compute_checksum",
    "decode_strkey",
    "default_backend",
    "describe_strkey",
    "encode_strkey",
    "from_base32",
    "init",
    "sign_message",
    "to_base32",
    "validate_strkey",
    "verify_checksum",
    "verify_signature",
    "verify_signature_safe",
]
