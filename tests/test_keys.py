"""Tests for Seed, SecretKey and PublicKey."""

import base64

import pytest

from boasdk import (
    ChecksumMismatchError,
    CryptographyBackend,
    InvalidKeyError,
    PublicKey,
    SecretKey,
    Seed,
    SizeMismatchError,
    ValidationResult,
    WrongTypeError,
)

ADDRESS = "GDD5RFGBIUAFCOXQA246BOUPHCK7ZL2NSHDU7DVAPNPTJJKVPJMNLQFW"
SEED = "SBBUWIMSX5VL4KVFKY44GF6Q6R5LS2Z5B7CTAZBNCNPLS4UKFVDXC7TQ"


def flip_checksum(encoded: str) -> str:
    """Complement the two checksum bytes of a strkey."""
    decoded = base64.b32decode(encoded)
    body, checksum = decoded[:-2], decoded[-2:]
    flipped = bytes(~b & 0xFF for b in checksum)
    return base64.b32encode(body + flipped).decode("ascii").rstrip("=")


@pytest.fixture
def backend() -> CryptographyBackend:
    """Create an initialized backend."""
    backend = CryptographyBackend()
    backend.init()
    return backend


class TestPublicKey:
    """Tests for PublicKey."""

    def test_string_round_trip(self) -> None:
        """Extract the public key from a string then convert it back into a string."""
        public_key = PublicKey.from_string(ADDRESS)
        assert str(public_key) == ADDRESS
        assert public_key.to_string() == ADDRESS
        assert len(public_key.data) == 32

    def test_validate(self) -> None:
        """Test PublicKey.validate() messages."""
        assert PublicKey.validate(ADDRESS[:-1]) == "Decoded data size is not normal"
        assert PublicKey.validate("S" + ADDRESS[1:]) == "This is not a valid address type"
        assert PublicKey.validate(ADDRESS) == ""
        assert PublicKey.validate(flip_checksum(ADDRESS)) == "Checksum result do not match"

    def test_check(self) -> None:
        """Test PublicKey.check() result kinds."""
        assert PublicKey.check(ADDRESS) is ValidationResult.OK
        assert PublicKey.check(SEED) is ValidationResult.WRONG_TYPE

    def test_from_string_errors(self) -> None:
        """Test that invalid strings raise the matching error."""
        with pytest.raises(SizeMismatchError):
            PublicKey.from_string(ADDRESS[:-1])
        with pytest.raises(WrongTypeError, match="This is not a valid address type"):
            PublicKey.from_string(SEED)
        with pytest.raises(ChecksumMismatchError):
            PublicKey.from_string(flip_checksum(ADDRESS))

    def test_equality_ignores_backend(self, backend: CryptographyBackend) -> None:
        """Test that keys compare and hash by their bytes."""
        a = PublicKey.from_string(ADDRESS)
        b = PublicKey.from_string(ADDRESS, backend=backend)
        assert a == b
        assert hash(a) == hash(b)

    def test_repr_shows_address(self) -> None:
        """Test that repr shows the address."""
        assert repr(PublicKey.from_string(ADDRESS)) == f"PublicKey({ADDRESS!r})"

    def test_immutable(self) -> None:
        """Test that keys cannot be mutated."""
        public_key = PublicKey.from_string(ADDRESS)
        with pytest.raises(AttributeError):
            public_key.data = bytes(32)  # type: ignore[misc]


class TestSeed:
    """Tests for Seed."""

    def test_string_round_trip(self) -> None:
        """Extract the seed from a string then convert it back into a string."""
        seed = Seed.from_string(SEED)
        assert str(seed) == SEED

    def test_validate(self) -> None:
        """Test Seed.validate() messages."""
        assert Seed.validate(SEED[:-1]) == "Decoded data size is not normal"
        assert Seed.validate(ADDRESS) == "This is not a valid seed type"
        assert Seed.validate(SEED) == ""
        assert Seed.validate(flip_checksum(SEED)) == "Checksum result do not match"

    def test_from_bytes(self) -> None:
        """Test construction from raw bytes and re-decoding."""
        seed = Seed(bytes(range(32)))
        assert Seed.from_string(str(seed)) == seed

    def test_accepts_bytearray(self) -> None:
        """Test that bytearray input is frozen into bytes."""
        seed = Seed(bytearray(32))
        assert isinstance(seed.data, bytes)

    @pytest.mark.parametrize("size", [0, 31, 33, 64])
    def test_wrong_size(self, size: int) -> None:
        """Test that raw bytes must be exactly 32 bytes."""
        with pytest.raises(InvalidKeyError, match="Invalid seed length"):
            Seed(bytes(size))

    def test_rejects_non_bytes(self) -> None:
        """Test that strings and integers are not accepted as raw bytes."""
        with pytest.raises(TypeError):
            Seed(SEED)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Seed(32)  # type: ignore[arg-type]

    def test_generate(self, backend: CryptographyBackend) -> None:
        """Test that generated seeds are random."""
        assert Seed.generate(backend) != Seed.generate(backend)

    def test_repr_redacted(self) -> None:
        """Test that repr does not leak the seed."""
        seed = Seed.from_string(SEED)
        assert repr(seed) == "Seed(<redacted>)"
        assert SEED not in repr(seed)

    def test_seed_is_not_public_key(self) -> None:
        """Test that equal bytes of different key types do not compare equal."""
        assert Seed(bytes(32)) != PublicKey(bytes(32))


class TestSecretKey:
    """Tests for SecretKey."""

    def test_string_round_trip(self, backend: CryptographyBackend) -> None:
        """Test that the secret key string re-derives the full key."""
        seed = Seed.from_string(SEED)
        _, secret = backend.keypair_from_seed(seed.data)
        secret_key = SecretKey(secret, backend=backend)

        encoded = str(secret_key)
        assert encoded.startswith("K")
        assert SecretKey.validate(encoded) == ""

        decoded = SecretKey.from_string(encoded, backend=backend)
        assert decoded == secret_key
        assert str(decoded) == encoded

    def test_validate(self) -> None:
        """Test SecretKey.validate() messages."""
        assert SecretKey.validate(SEED) == "This is not a valid secret key type"
        assert SecretKey.validate(ADDRESS[:-2]) == "Decoded data size is not normal"

    def test_public_key(self, backend: CryptographyBackend) -> None:
        """Test that the public half is the address."""
        _, secret = backend.keypair_from_seed(Seed.from_string(SEED).data)
        assert str(SecretKey(secret).public_key()) == ADDRESS

    def test_wrong_size(self) -> None:
        """Test that raw secret keys must be 64 bytes."""
        with pytest.raises(InvalidKeyError, match="Invalid secret key length"):
            SecretKey(bytes(32))

    def test_repr_redacted(self, backend: CryptographyBackend) -> None:
        """Test that repr does not leak the secret key."""
        _, secret = backend.keypair_from_seed(bytes(32))
        assert repr(SecretKey(secret, backend=backend)) == "SecretKey(<redacted>)"

    def test_mismatched_public_half_rejected(self, backend: CryptographyBackend) -> None:
        """Test that a public half not derived from the seed half is rejected."""
        seed = Seed.from_string(SEED).data
        with pytest.raises(InvalidKeyError, match="does not match its seed"):
            SecretKey(seed + bytes(32), backend=backend)

    def test_other_public_half_rejected(self, backend: CryptographyBackend) -> None:
        """Test that halves from two different keypairs cannot be combined."""
        _, first = backend.keypair_from_seed(bytes(32))
        _, second = backend.keypair_from_seed(bytes(range(32)))
        with pytest.raises(InvalidKeyError):
            SecretKey(first[:32] + second[32:], backend=backend)

    def test_accepted_keys_round_trip(self, backend: CryptographyBackend) -> None:
        """Test that every accepted secret key survives its string form."""
        for seed in (bytes(32), bytes(range(32)), Seed.from_string(SEED).data):
            _, secret = backend.keypair_from_seed(seed)
            secret_key = SecretKey(secret, backend=backend)
            assert SecretKey.from_string(str(secret_key), backend=backend) == secret_key
