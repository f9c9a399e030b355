"""ED25519 keypair derivation for boasdk."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .backend import Ed25519Backend, resolve_backend
from .keys import PublicKey, SecretKey, Seed

logger = logging.getLogger("boasdk")


@dataclass(frozen=True)
class KeyPair:
    """Seed together with the secret key and address derived from it.

    Attributes:
        seed: The seed the keys were derived from.
        secret: The 64-byte secret key.
        address: The public key.
    """

    seed: Seed
    secret: SecretKey
    address: PublicKey

    @classmethod
    def from_seed(cls, seed: Seed, backend: Ed25519Backend | None = None) -> KeyPair:
        """Derive a keypair from a seed.

        Deterministic: the same seed always yields the same secret key and
        address.

        Args:
            seed: The seed to derive from.
            backend: The ED25519 backend. Defaults to the process-wide one.

        Returns:
            The derived keypair.
        """
        backend = resolve_backend(backend)
        public, secret = backend.keypair_from_seed(seed.data)
        return cls(
            seed=seed,
            secret=SecretKey(secret, backend=backend),
            address=PublicKey(public, backend=backend),
        )

    @classmethod
    def from_string(cls, seed: str, backend: Ed25519Backend | None = None) -> KeyPair:
        """Derive a keypair from a seed string (``S...``).

        Raises:
            StrKeyError: If the string is not a valid seed.
        """
        return cls.from_seed(Seed.from_string(seed), backend)

    @classmethod
    def random(cls, backend: Ed25519Backend | None = None) -> KeyPair:
        """Generate a keypair from a fresh random seed."""
        backend = resolve_backend(backend)
        keypair = cls.from_seed(Seed.generate(backend), backend)
        logger.debug("Generated keypair %s", keypair.address)
        return keypair
