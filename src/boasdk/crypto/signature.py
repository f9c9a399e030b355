"""ED25519 signing and signature verification for boasdk."""

from __future__ import annotations

import logging

from ..constants import DEFAULT_MESSAGE_ENCODING
from ..errors import BackendError, SignatureVerificationError
from .backend import Ed25519Backend, require_bytes
from .constants import ED25519_PUBLIC_KEY_SIZE, ED25519_SIGNATURE_SIZE

logger = logging.getLogger("boasdk")


def to_message_bytes(message: bytes | str) -> bytes:
    """Return message bytes, encoding text with the default encoding.

    Raises:
        TypeError: If the message is neither text nor bytes-like.
    """
    if isinstance(message, str):
        return message.encode(DEFAULT_MESSAGE_ENCODING)
    return require_bytes(message, "message")


def sign_message(secret_key: bytes, message: bytes | str, backend: Ed25519Backend) -> bytes:
    """Sign a message.

    ED25519 signing is deterministic: the same key and message always give
    the same signature.

    Args:
        secret_key: The 64-byte secret key.
        message: The message to sign.
        backend: The ED25519 backend.

    Returns:
        The 64-byte signature.
    """
    return backend.sign(secret_key, to_message_bytes(message))


def verify_signature(
    public_key: bytes,
    signature: bytes,
    message: bytes | str,
    backend: Ed25519Backend,
) -> None:
    """Verify an ED25519 signature.

    Args:
        public_key: The 32-byte public key.
        signature: The 64-byte signature.
        message: The signed message.
        backend: The ED25519 backend.

    Raises:
        SignatureVerificationError: If the signature is not valid for the message.
        BackendError: If the backend is not usable.
    """
    try:
        if len(public_key) != ED25519_PUBLIC_KEY_SIZE:
            raise SignatureVerificationError(
                f"Invalid public key length: {len(public_key)}, "
                f"expected {ED25519_PUBLIC_KEY_SIZE}"
            )
        if len(signature) != ED25519_SIGNATURE_SIZE:
            raise SignatureVerificationError(
                f"Invalid signature length: {len(signature)}, expected {ED25519_SIGNATURE_SIZE}"
            )

        if not backend.verify(public_key, signature, to_message_bytes(message)):
            raise SignatureVerificationError("Signature does not match message")

    except (SignatureVerificationError, BackendError):
        raise
    except Exception as e:
        raise SignatureVerificationError(f"SIGNATURE VERIFICATION FAILED: {e}") from e


def verify_signature_safe(
    public_key: bytes,
    signature: bytes,
    message: bytes | str,
    backend: Ed25519Backend,
) -> bool:
    """Verify an ED25519 signature without raising on bad signatures.

    Returns:
        True if signature is valid, False otherwise.
    """
    try:
        verify_signature(public_key, signature, message, backend)
        return True
    except SignatureVerificationError as e:
        logger.debug("Signature rejected: %s", e)
        return False
