"""boasdk key types.

ED25519 seeds, secret keys and addresses with their checksummed base32
string forms.

Example:
    ```python
    import asyncio
    from boasdk import KeyPair, PublicKey, Seed, init

    async def main():
        backend = await init()

        kp = KeyPair.from_seed(
            Seed.from_string("SBBUWIMSX5VL4KVFKY44GF6Q6R5LS2Z5B7CTAZBNCNPLS4UKFVDXC7TQ"),
            backend,
        )
        print(f"Address: {kp.address}")

        signature = kp.secret.sign(b"Hello World")
        print(kp.address.verify(signature, b"Hello World"))

        print(repr(PublicKey.validate("GDD5RFGBIUAFCOXQA246BOUPHCK7ZL2NSHDU7DVAPNPTJJKVPJMNLQF")))

    asyncio.run(main())
    ```
"""

from .constants import (
    CHECKSUM_SIZE,
    DEFAULT_MESSAGE_ENCODING,
    STRKEY_DECODED_SIZE,
    STRKEY_PAYLOAD_SIZE,
    VERSION_BYTE_SIZE,
)
from .crypto import (
    CryptographyBackend,
    Ed25519Backend,
    KeyPair,
    PublicKey,
    SecretKey,
    Seed,
    default_backend,
    init,
)
from .errors import (
    BackendError,
    BackendNotReadyError,
    Base32DecodeError,
    BoaSdkError,
    ChecksumMismatchError,
    InvalidKeyError,
    SignatureVerificationError,
    SizeMismatchError,
    StrKeyError,
    WrongTypeError,
)
from .types import ValidationResult, VersionByte

__version__ = "0.1.0"

__all__ = [
    # Key types
    "KeyPair",
    "PublicKey",
    "SecretKey",
    "Seed",
    # Backend
    "CryptographyBackend",
    "Ed25519Backend",
    "default_backend",
    "init",
    # Constants
    "CHECKSUM_SIZE",
    "DEFAULT_MESSAGE_ENCODING",
    "STRKEY_DECODED_SIZE",
    "STRKEY_PAYLOAD_SIZE",
    "VERSION_BYTE_SIZE",
    # Data types
    "ValidationResult",
    "VersionByte",
    # Errors
    "BoaSdkError",
    "BackendError",
    "BackendNotReadyError",
    "Base32DecodeError",
    "ChecksumMismatchError",
    "InvalidKeyError",
    "SignatureVerificationError",
    "SizeMismatchError",
    "StrKeyError",
    "WrongTypeError",
    # Version
    "__version__",
]
