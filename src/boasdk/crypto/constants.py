"""Cryptographic constants for boasdk."""

# ED25519 sizes in bytes
ED25519_SEED_SIZE = 32
ED25519_PUBLIC_KEY_SIZE = 32
# Expanded secret key: seed || public key
ED25519_SECRET_KEY_SIZE = 64
ED25519_SIGNATURE_SIZE = 64

# Message signed and verified by the backend self test
SELF_TEST_MESSAGE = b"boasdk:ed25519:self-test"
