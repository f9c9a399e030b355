#!/usr/bin/env python3
"""Testhelper CLI for boasdk key interoperability testing."""

import asyncio
import json
import sys

from boasdk import Ed25519Backend, KeyPair, PublicKey, SecretKey, Seed, init


def keypair_output(kp: KeyPair) -> dict[str, str]:
    return {
        "seed": str(kp.seed),
        "secretKey": str(kp.secret),
        "address": str(kp.address),
    }


def generate(backend: Ed25519Backend) -> None:
    """Generate a random keypair."""
    print(json.dumps(keypair_output(KeyPair.random(backend))))


def derive(backend: Ed25519Backend, seed: str) -> None:
    """Derive the keypair of a seed string."""
    print(json.dumps(keypair_output(KeyPair.from_string(seed, backend))))


def validate(value: str) -> None:
    """Validate a string as every key type."""
    output = {
        "seed": Seed.validate(value),
        "secretKey": SecretKey.validate(value),
        "address": PublicKey.validate(value),
    }
    print(json.dumps(output))


def sign(backend: Ed25519Backend, seed: str, message: str) -> None:
    """Sign a message with the keypair of a seed string."""
    kp = KeyPair.from_string(seed, backend)
    signature = kp.secret.sign(message)
    print(json.dumps({"address": str(kp.address), "signature": signature.hex()}))


def verify(backend: Ed25519Backend, address: str, signature: str, message: str) -> None:
    """Verify a hex signature against an address."""
    public_key = PublicKey.from_string(address, backend)
    print(json.dumps({"valid": public_key.verify(bytes.fromhex(signature), message)}))


def usage(text: str) -> None:
    print(f"usage: testhelper.py {text}", file=sys.stderr)
    sys.exit(1)


async def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        usage("<command> [args]")

    command = sys.argv[1]
    args = sys.argv[2:]

    backend = await init()

    if command == "generate":
        generate(backend)
    elif command == "derive":
        if len(args) < 1:
            usage("derive <seed>")
        derive(backend, args[0])
    elif command == "validate":
        if len(args) < 1:
            usage("validate <string>")
        validate(args[0])
    elif command == "sign":
        if len(args) < 2:
            usage("sign <seed> <message>")
        sign(backend, args[0], args[1])
    elif command == "verify":
        if len(args) < 3:
            usage("verify <address> <signature-hex> <message>")
        verify(backend, args[0], args[1], args[2])
    else:
        print(f"unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
