"""ED25519 backend for boasdk.

Key derivation, signing and verification are delegated to a backend object.
The backend must be initialised before use; ``init()`` does this off the
event loop.

Every key type takes an explicit ``backend=``. Passing None selects the
process-wide ``CryptographyBackend`` returned by ``default_backend()``, a
convenience that initialises itself on first use. Code that needs control
over initialisation should ``await init(backend)`` and pass that backend on.
"""

from __future__ import annotations

import asyncio
import logging
import secrets
import threading
from typing import Protocol

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ..errors import BackendError, BackendNotReadyError, InvalidKeyError
from .constants import (
    ED25519_SECRET_KEY_SIZE,
    ED25519_SEED_SIZE,
    SELF_TEST_MESSAGE,
)

logger = logging.getLogger("boasdk")

BytesLike = (bytes, bytearray, memoryview)


def require_bytes(value: object, name: str) -> bytes:
    """Return ``value`` as bytes, rejecting anything that is not bytes-like.

    Raises:
        TypeError: If ``value`` is not bytes, bytearray or memoryview.
    """
    if not isinstance(value, BytesLike):
        raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")
    return bytes(value)


class Ed25519Backend(Protocol):
    """Protocol for pluggable ED25519 backends."""

    @property
    def ready(self) -> bool:
        """Whether init() has completed."""
        ...

    def init(self) -> None:
        """Prepare the backend. Must be idempotent."""
        ...

    def keypair_from_seed(self, seed: bytes) -> tuple[bytes, bytes]:
        """Derive (public[32], secret[64]) from a 32-byte seed."""
        ...

    def sign(self, secret: bytes, message: bytes) -> bytes:
        """Sign a message with a 64-byte secret key."""
        ...

    def verify(self, public: bytes, signature: bytes, message: bytes) -> bool:
        """Verify a signature. Returns False instead of raising on bad input."""
        ...

    def secure_random(self, n: int) -> bytes:
        """Return n bytes from a cryptographically secure source."""
        ...


class CryptographyBackend:
    """ED25519 backend built on the ``cryptography`` package.

    The 64-byte secret key uses the libsodium layout ``seed || public``.
    """

    def __init__(self) -> None:
        self._ready = False
        self._lock = threading.Lock()

    @property
    def ready(self) -> bool:
        return self._ready

    def init(self) -> None:
        """Run a sign/verify self test once.

        Raises:
            BackendError: If ED25519 is unavailable or the self test fails.
        """
        with self._lock:
            if self._ready:
                return
            try:
                private_key = Ed25519PrivateKey.from_private_bytes(bytes(ED25519_SEED_SIZE))
                signature = private_key.sign(SELF_TEST_MESSAGE)
                private_key.public_key().verify(signature, SELF_TEST_MESSAGE)
            except Exception as e:
                raise BackendError(f"ED25519 self test failed: {e}") from e
            self._ready = True
        logger.debug("ED25519 backend ready")

    def _require_ready(self) -> None:
        if not self._ready:
            raise BackendNotReadyError("ED25519 backend is not initialized, call init() first")

    def keypair_from_seed(self, seed: bytes) -> tuple[bytes, bytes]:
        self._require_ready()
        if len(seed) != ED25519_SEED_SIZE:
            raise InvalidKeyError(
                f"Invalid seed length: {len(seed)}, expected {ED25519_SEED_SIZE}"
            )
        private_key = Ed25519PrivateKey.from_private_bytes(bytes(seed))
        public = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
        return public, bytes(seed) + public

    def sign(self, secret: bytes, message: bytes) -> bytes:
        self._require_ready()
        if len(secret) != ED25519_SECRET_KEY_SIZE:
            raise InvalidKeyError(
                f"Invalid secret key length: {len(secret)}, expected {ED25519_SECRET_KEY_SIZE}"
            )
        private_key = Ed25519PrivateKey.from_private_bytes(bytes(secret[:ED25519_SEED_SIZE]))
        return private_key.sign(require_bytes(message, "message"))

    def verify(self, public: bytes, signature: bytes, message: bytes) -> bool:
        self._require_ready()
        if not all(isinstance(v, BytesLike) for v in (public, signature, message)):
            return False
        try:
            public_key = Ed25519PublicKey.from_public_bytes(bytes(public))
            public_key.verify(bytes(signature), bytes(message))
        except (InvalidSignature, ValueError):
            return False
        return True

    def secure_random(self, n: int) -> bytes:
        return secrets.token_bytes(n)


_default_backend: CryptographyBackend | None = None
_default_lock = threading.Lock()


def _default_instance() -> CryptographyBackend:
    global _default_backend
    with _default_lock:
        if _default_backend is None:
            _default_backend = CryptographyBackend()
        return _default_backend


def default_backend() -> Ed25519Backend:
    """Return the process-wide backend, initialising it on first use."""
    backend = _default_instance()
    backend.init()
    return backend


def resolve_backend(backend: Ed25519Backend | None) -> Ed25519Backend:
    """Return ``backend``, or the default backend when None."""
    if backend is None:
        return default_backend()
    return backend


async def init(backend: Ed25519Backend | None = None) -> Ed25519Backend:
    """Initialise a backend without blocking the event loop.

    Args:
        backend: The backend to initialise. Defaults to the process-wide one.

    Returns:
        The ready backend.

    Raises:
        BackendError: If initialisation fails.
    """
    if backend is None:
        backend = _default_instance()
    await asyncio.to_thread(backend.init)
    return backend
