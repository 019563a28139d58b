"""Key and address derivation for passphrase-based accounts.

Private key = SHA-256(passphrase), public key = compressed secp256k1 point,
address = Base58Check(version byte + RIPEMD-160(public key)).
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

import base58
from coincurve import PrivateKey
from Crypto.Hash import RIPEMD160


class KeyDerivationError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class KeyPair:
    private_key: PrivateKey
    public_key: bytes

    @property
    def public_key_hex(self) -> str:
        return self.public_key.hex()


def keys_from_passphrase(passphrase: str) -> KeyPair:
    if not isinstance(passphrase, str) or not passphrase.strip():
        raise KeyDerivationError("passphrase must be a non-empty string")
    secret = hashlib.sha256(passphrase.encode("utf-8")).digest()
    try:
        private_key = PrivateKey(secret)
    except ValueError as e:
        raise KeyDerivationError(f"passphrase does not yield a valid private key: {e}") from e
    return KeyPair(
        private_key=private_key,
        public_key=private_key.public_key.format(compressed=True),
    )


def address_from_public_key(public_key: bytes, network_version: int) -> str:
    if not 0 <= network_version <= 255:
        raise KeyDerivationError(f"network version out of range: {network_version}")
    digest = RIPEMD160.new(public_key).digest()
    return base58.b58encode_check(bytes([network_version]) + digest).decode("ascii")


def address_from_passphrase(passphrase: str, network_version: int) -> str:
    return address_from_public_key(keys_from_passphrase(passphrase).public_key, network_version)
